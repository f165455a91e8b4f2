"""ASCII character classification and case mapping.

Each function accepts a character code (``int``) or a one-character ``str``.
Codes outside the ASCII range are classified as nothing.
"""

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    return ord(c) if isinstance(c, str) else c


def islower(c: Char) -> bool:
    code = _code(c)
    return ord("a") <= code <= ord("z")


def isupper(c: Char) -> bool:
    code = _code(c)
    return ord("A") <= code <= ord("Z")


def isalpha(c: Char) -> bool:
    return islower(c) or isupper(c)


def isdigit(c: Char) -> bool:
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: Char) -> bool:
    return isalpha(c) or isdigit(c)


def isxdigit(c: Char) -> bool:
    code = _code(c)
    return isdigit(code) or ord("a") <= code <= ord("f") or ord("A") <= code <= ord("F")


def isspace(c: Char) -> bool:
    return _code(c) in (0x20, 0x0C, 0x0A, 0x0D, 0x09, 0x0B)


def isblank(c: Char) -> bool:
    return _code(c) in (0x20, 0x09)


def isgraph(c: Char) -> bool:
    return 32 < _code(c) < 127


def isprint(c: Char) -> bool:
    return 32 <= _code(c) < 127


def iscntrl(c: Char) -> bool:
    code = _code(c)
    return 0 <= code < 32 or code == 127


def isascii(c: Char) -> bool:
    return 0 <= _code(c) < 128


def ispunct(c: Char) -> bool:
    return isprint(c) and not isalnum(c) and not isspace(c)


def tolower(c: Char) -> Char:
    """Map an upper-case letter to lower case; other characters pass through."""
    code = _code(c)
    result = code - ord("A") + ord("a") if isupper(code) else code
    return chr(result) if isinstance(c, str) else result


def toupper(c: Char) -> Char:
    """Map a lower-case letter to upper case; other characters pass through."""
    code = _code(c)
    result = code - ord("a") + ord("A") if islower(code) else code
    return chr(result) if isinstance(c, str) else result
"""Integer helpers of the C standard library: division, random numbers,
string-to-integer conversion and system configuration queries.

Integers follow a 32-bit machine: ``int`` and ``long`` are 32 bits wide.
"""

from typing import NamedTuple, Tuple

CHAR_BIT = 8

SCHAR_MAX = 127
SCHAR_MIN = -SCHAR_MAX - 1
UCHAR_MAX = 255
CHAR_MIN = SCHAR_MIN
CHAR_MAX = SCHAR_MAX

SHRT_MAX = 32767
SHRT_MIN = -SHRT_MAX - 1
USHRT_MAX = 65535

INT_MAX = 2147483647
INT_MIN = -INT_MAX - 1
UINT_MAX = 4294967295

LONG_MAX = 2147483647
LONG_MIN = -LONG_MAX - 1
ULONG_MAX = 4294967295

LLONG_MAX = 9223372036854775807
LLONG_MIN = -LLONG_MAX - 1
ULLONG_MAX = 18446744073709551615

RAND_MAX = 0x7FFFFFFD

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

SC_PAGESIZE = 0x0027
SC_PAGE_SIZE = SC_PAGESIZE

_PAGE_SIZE = 4096
_ZERO_SEED_REPLACEMENT = 123459876
_WHITESPACE = (" ", "\t", "\n")


class DivResult(NamedTuple):
    """Quotient and remainder of an integer division."""

    quot: int
    rem: int


def _divide(numer: int, denom: int) -> DivResult:
    for value in (numer, denom):
        if not LONG_MIN <= value <= LONG_MAX:
            raise OverflowError(f"{value} does not fit in 32 bits")
    if denom == 0:
        raise ZeroDivisionError("integer division by zero")
    if numer == LONG_MIN and denom == -1:
        raise OverflowError("quotient does not fit in 32 bits")
    quot = abs(numer) // abs(denom)
    if (numer < 0) != (denom < 0):
        quot = -quot
    return DivResult(quot, numer - quot * denom)


def div(numer: int, denom: int) -> DivResult:
    """Divide, truncating the quotient toward zero."""
    return _divide(numer, denom)


def ldiv(numer: int, denom: int) -> DivResult:
    """Divide ``long`` values, truncating the quotient toward zero."""
    return _divide(numer, denom)


def _next_state(state: int) -> Tuple[int, int]:
    """Advance a Park-Miller state; return (value, new_state)."""
    state &= 0xFFFFFFFF
    if state == 0:
        state = _ZERO_SEED_REPLACEMENT
    hi, lo = divmod(state, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x % (RAND_MAX + 1), x


def rand_r(seed: int) -> Tuple[int, int]:
    """Return the next random value for ``seed`` and the updated seed."""
    return _next_state(seed)


class ParkMillerRandom:
    """The minimal standard generator behind ``rand``/``srand``."""

    def __init__(self, seed: int = 1) -> None:
        self._state = seed & 0xFFFFFFFF

    def seed(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        self._state = seed & 0xFFFFFFFF

    def rand(self) -> int:
        """Return a value in ``0..RAND_MAX``."""
        value, self._state = _next_state(self._state)
        return value


def _scan(text: str, base: int, limit: int, negative_limit: int):
    """Shared parser; returns (accumulated, negative, overflowed, end)."""
    if base < 0:
        raise ValueError(f"invalid base {base}")

    def char_at(index: int) -> str:
        return text[index] if index < len(text) else "\0"

    pos = 0
    c = char_at(pos)
    pos += 1
    while c in _WHITESPACE:
        c = char_at(pos)
        pos += 1

    negative = False
    if c == "-":
        negative = True
        c = char_at(pos)
        pos += 1
    elif c == "+":
        c = char_at(pos)
        pos += 1

    if base in (0, 16) and c == "0" and char_at(pos) in "xX":
        c = char_at(pos + 1)
        pos += 2
        base = 16
    elif base in (0, 2) and c == "0" and char_at(pos) in "bB":
        c = char_at(pos + 1)
        pos += 2
        base = 2
    if base == 0:
        base = 8 if c == "0" else 10

    cutoff, cutlim = divmod(negative_limit if negative else limit, base)
    acc = 0
    state = 0  # 0: no digits, 1: digits, -1: overflow
    while True:
        if "0" <= c <= "9":
            digit = ord(c) - ord("0")
        elif "A" <= c <= "Z":
            digit = ord(c) - ord("A") + 10
        elif "a" <= c <= "z":
            digit = ord(c) - ord("a") + 10
        else:
            break
        if digit >= base:
            break
        if state < 0 or acc > cutoff or (acc == cutoff and digit > cutlim):
            state = -1
        else:
            state = 1
            acc = acc * base + digit
        c = char_at(pos)
        pos += 1

    end = pos - 1 if state else 0
    return acc, negative, state < 0, end


def strtol(text: str, base: int = 10) -> Tuple[int, int]:
    """Parse a signed 32-bit integer.

    Returns the value and the index just past the digits used (0 when no
    digits were found). Out-of-range values saturate at LONG_MIN/LONG_MAX.
    Base 0 detects ``0x``, ``0b`` and octal prefixes.
    """
    acc, negative, overflowed, end = _scan(text, base, LONG_MAX, -LONG_MIN)
    if overflowed:
        value = LONG_MIN if negative else LONG_MAX
    else:
        value = -acc if negative else acc
    return value, end


def strtoul(text: str, base: int = 10) -> Tuple[int, int]:
    """Parse an unsigned 32-bit integer.

    A leading minus negates the result modulo 2**32; out-of-range values
    saturate at ULONG_MAX. Returns the value and the end index.
    """
    acc, negative, overflowed, end = _scan(text, base, ULONG_MAX, ULONG_MAX)
    if overflowed:
        value = ULONG_MAX
    elif negative:
        value = (-acc) & ULONG_MAX
    else:
        value = acc
    return value, end


def atol(text: str) -> int:
    """Parse a decimal ``long``, ignoring anything after the digits."""
    return strtol(text, 10)[0]


def sysconf(name: int) -> int:
    """Return a system configuration value; only the page size is known."""
    if name == SC_PAGESIZE:
        return _PAGE_SIZE
    raise ValueError(f"unknown configuration name {name!r}")
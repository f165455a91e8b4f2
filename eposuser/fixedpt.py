"""Signed 24.8 fixed-point arithmetic on plain Python integers.

A fixed-point value is an ``int`` holding the number multiplied by 256.
Results that the format stores in 32 bits wrap like a 32-bit signed integer.
"""

BITS = 32
WBITS = 24
FBITS = BITS - WBITS
FMASK = (1 << FBITS) - 1
ONE = 1 << FBITS
ONE_HALF = ONE >> 1
TWO = ONE + ONE


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_div(numer: int, denom: int) -> int:
    if denom == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    quotient = abs(numer) // abs(denom)
    return quotient if (numer < 0) == (denom < 0) else -quotient


def from_float(r: float) -> int:
    """Convert a real number to fixed point, rounding half away from zero."""
    return _wrap32(int(r * ONE + (0.5 if r >= 0 else -0.5)))


def from_int(i: int) -> int:
    """Convert an integer to fixed point."""
    return i << FBITS


def to_int(f: int) -> int:
    """Return the whole part of a fixed-point value (rounds toward minus infinity)."""
    return f >> FBITS


def mul(a: int, b: int) -> int:
    """Multiply two fixed-point values."""
    return _wrap32((a * b) >> FBITS)


def div(a: int, b: int) -> int:
    """Divide two fixed-point values; the quotient is truncated toward zero."""
    return _wrap32(_trunc_div(a << FBITS, b))


def frac_part(a: int) -> int:
    """Return the fractional bits of a fixed-point value."""
    return a & FMASK


def to_str(a: int, max_dec: int = -1) -> str:
    """Render a fixed-point value as a decimal string.

    ``max_dec`` limits the digits after the point; -1 selects the default of
    2 digits and -2 selects 15 digits. A single trailing zero is removed when
    more than one decimal digit was produced.
    """
    if max_dec == -1:
        max_dec = 2
    elif max_dec == -2:
        max_dec = 15

    mask = (1 << BITS) - 1
    parts = []
    if a < 0:
        parts.append("-")
        a = -a
    parts.append(str(to_int(a)))
    parts.append(".")

    fraction = (frac_part(a) << WBITS) & mask
    ndec = 0
    while True:
        fraction = (fraction & mask) * 10
        parts.append(str((fraction >> BITS) % 10))
        ndec += 1
        if fraction == 0 or ndec >= max_dec:
            break

    text = "".join(parts)
    if ndec > 1 and text.endswith("0"):
        text = text[:-1]
    return text


PI = from_float(3.14159265358979323846)
TWO_PI = from_float(2 * 3.14159265358979323846)
HALF_PI = from_float(3.14159265358979323846 / 2)
E = from_float(2.7182818284590452354)
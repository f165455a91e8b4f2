"""Floating-point math routines with the results of the x87 implementations."""

import math
import struct

M_E = 2.7182818284590452354
M_PI = 3.14159265358979323846

_X87_TRIG_LIMIT = 2.0**63
_LOG2_E = 1.442695040888963


def fabs(x: float) -> float:
    if x < 0:
        x = -x
    return x


def floor(x: float) -> float:
    """Round down; a negative value that is already whole still drops by one."""
    return float(int(x) - 1) if x < 0.0 else float(int(x))


def ceil(x: float) -> float:
    whole = int(x)
    if whole == x or x < 0.0:
        return float(whole)
    return float(whole + 1)


def _trig(func, x: float) -> float:
    if not math.isfinite(x):
        return math.nan
    if abs(x) >= _X87_TRIG_LIMIT:
        # Out of range for the FPU: the operand is left unchanged.
        return x
    return func(x)


def sin(x: float) -> float:
    return _trig(math.sin, x)


def cos(x: float) -> float:
    return _trig(math.cos, x)


def sqrt(x: float) -> float:
    if x < 0:
        return math.nan
    return math.sqrt(x)


def log2(x: float, y: float) -> float:
    """Return ``y * log2(x)``."""
    if math.isnan(x) or math.isnan(y) or x < 0:
        return math.nan
    if x == 0:
        return math.nan if y == 0 else math.copysign(math.inf, -y)
    if math.isinf(x):
        return math.nan if y == 0 else math.copysign(math.inf, y)
    return y * math.log2(x)


def atan2(y: float, x: float) -> float:
    return math.atan2(y, x)


def tan(x: float) -> float:
    if not math.isfinite(x):
        return math.nan
    return math.tan(x)


def cot(x: float) -> float:
    t = tan(x)
    if t == 0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def _exp2(t: float) -> float:
    if not math.isfinite(t):
        return math.nan
    try:
        return 2.0**t
    except OverflowError:
        return math.inf


def pow(x: float, y: float) -> float:
    """Raise ``x`` to ``y`` as ``2 ** (y * log2(x))``.

    A zero base gives 1 for a zero (or NaN) exponent and 0 otherwise; a
    negative base gives NaN.
    """
    if x == 0:
        return 1.0 if (y == 0 or math.isnan(y)) else 0.0
    if math.isnan(x) or x < 0 or math.isinf(x):
        return math.nan
    return _exp2(y * math.log2(x))


def exp(x: float) -> float:
    if not math.isfinite(x):
        return math.nan
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def log(x: float) -> float:
    return log2(x, 1.0) / _LOG2_E


_ATANHI = (
    4.63647609000806093515e-01,
    7.85398163397448278999e-01,
    9.82793723247329054082e-01,
    1.57079632679489655800e00,
)
_ATANLO = (
    2.26987774529616870924e-17,
    3.06161699786838301793e-17,
    1.39033110312309984516e-17,
    6.12323399573676603587e-17,
)
_AT = (
    3.33333333333329318027e-01,
    -1.99999999998764832476e-01,
    1.42857142725034663711e-01,
    -1.11111104054623557880e-01,
    9.09088713343650656196e-02,
    -7.69187620504482999495e-02,
    6.66107313738753120669e-02,
    -5.83357013379057348645e-02,
    4.97687799461593236017e-02,
    -3.65315727442169155270e-02,
    1.62858201153657823623e-02,
)


def _words(x: float) -> tuple:
    bits = struct.unpack("<Q", struct.pack("<d", x))[0]
    high = bits >> 32
    if high & 0x80000000:
        high -= 1 << 32
    return high, bits & 0xFFFFFFFF


def atan(x: float) -> float:
    """Arctangent by argument reduction and a polynomial approximation."""
    hx, low = _words(x)
    ix = hx & 0x7FFFFFFF
    if ix >= 0x44100000:
        if ix > 0x7FF00000 or (ix == 0x7FF00000 and low != 0):
            return x + x
        if hx > 0:
            return _ATANHI[3] + _ATANLO[3]
        return -_ATANHI[3] - _ATANLO[3]

    if ix < 0x3FDC0000:
        if ix < 0x3E200000:
            return x
        index = None
    else:
        x = fabs(x)
        if ix < 0x3FF30000:
            if ix < 0x3FE60000:
                index, x = 0, (2.0 * x - 1.0) / (2.0 + x)
            else:
                index, x = 1, (x - 1.0) / (x + 1.0)
        elif ix < 0x40038000:
            index, x = 2, (x - 1.5) / (1.0 + 1.5 * x)
        else:
            index, x = 3, -1.0 / x

    z = x * x
    w = z * z
    s1 = z * (_AT[0] + w * (_AT[2] + w * (_AT[4] + w * (_AT[6] + w * (_AT[8] + w * _AT[10])))))
    s2 = w * (_AT[1] + w * (_AT[3] + w * (_AT[5] + w * (_AT[7] + w * _AT[9]))))
    if index is None:
        return x - x * (s1 + s2)
    z = _ATANHI[index] - ((x * (s1 + s2) - _ATANLO[index]) - x)
    return -z if hx < 0 else z
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eposuser import stdlib
from eposuser.stdlib import (
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    RAND_MAX,
    SC_PAGE_SIZE,
    SC_PAGESIZE,
    ULONG_MAX,
    DivResult,
    ParkMillerRandom,
    atol,
    div,
    ldiv,
    rand_r,
    strtol,
    strtoul,
    sysconf,
)

MODULUS = 2**31 - 1
int32 = st.integers(min_value=INT_MIN, max_value=2**31 - 1)


# ---- div / ldiv -----------------------------------------------------------


@given(int32, int32.filter(lambda d: d != 0))
def test_div_identity_and_truncation(numer, denom):
    if numer == INT_MIN and denom == -1:
        return_value = None
        with pytest.raises(OverflowError):
            return_value = div(numer, denom)
        assert return_value is None
        return
    result = div(numer, denom)
    assert result.quot * denom + result.rem == numer
    assert abs(result.rem) < abs(denom)
    assert result.rem == 0 or (result.rem < 0) == (numer < 0)
    assert result.quot == math.trunc(numer / denom) or abs(numer) > 2**52


def test_div_returns_named_pair():
    quot, rem = div(7, -2)
    assert (quot, rem) == (math.trunc(7 / -2), 7 - math.trunc(7 / -2) * -2)
    assert isinstance(div(7, -2), DivResult)


def test_ldiv_matches_div():
    assert ldiv(-17, 5) == div(-17, 5)
    assert ldiv(-17, 5).rem < 0


def test_div_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        div(1, 0)
    with pytest.raises(ZeroDivisionError):
        ldiv(1, 0)


def test_div_overflow_raises():
    with pytest.raises(OverflowError):
        div(INT_MIN, -1)
    with pytest.raises(OverflowError):
        ldiv(2**31, 3)


# ---- random numbers ------------------------------------------------------


def test_rand_first_value_from_seed_one():
    value, state = rand_r(1)
    assert value == 16807
    assert state == 16807


def test_rand_second_value_from_seed_one():
    _, state = rand_r(1)
    value, _ = rand_r(state)
    assert value == 282475249


def test_ten_thousandth_state_matches_published_check():
    state = 1
    for _ in range(10000):
        _, state = rand_r(state)
    assert state == 1043618065


def test_zero_seed_is_replaced():
    assert rand_r(0) == rand_r(123459876)


@given(st.integers(min_value=1, max_value=MODULUS - 1), st.integers(0, 20))
def test_state_follows_multiplicative_congruence(seed, steps):
    state = seed
    for _ in range(steps):
        _, state = rand_r(state)
    assert state == seed * pow(16807, steps, MODULUS) % MODULUS


def test_generator_default_seed_is_one():
    gen = ParkMillerRandom()
    expected = []
    state = 1
    for _ in range(5):
        value, state = rand_r(state)
        expected.append(value)
    assert [gen.rand() for _ in range(5)] == expected


def test_generator_reseed_restarts_sequence():
    gen = ParkMillerRandom()
    gen.seed(42)
    first = [gen.rand() for _ in range(4)]
    gen.seed(42)
    assert [gen.rand() for _ in range(4)] == first
    gen.seed(43)
    assert [gen.rand() for _ in range(4)] != first


# ---- strtol / strtoul / atol --------------------------------------------


def test_strtol_decimal():
    assert strtol("123", 10) == (123, 3)


def test_strtol_skips_blanks_and_sign():
    assert strtol("  -42xyz", 10) == (-42, 5)
    assert strtol("\t+7", 10) == (7, 3)


def test_strtol_carriage_return_is_not_whitespace():
    assert strtol("\r5", 10) == (0, 0)


def test_strtol_prefix_detection():
    assert strtol("0x1A", 0) == (int("1A", 16), 4)
    assert strtol("0X1a", 16) == (int("1a", 16), 4)
    assert strtol("0b101", 0) == (int("101", 2), 5)
    assert strtol("017", 0) == (0o17, 3)
    assert strtol("19", 0) == (19, 2)


def test_strtol_bare_prefix_consumes_nothing():
    assert strtol("0x", 16) == (0, 0)
    assert strtol("0xg", 0) == (0, 0)


def test_strtol_no_digits():
    assert strtol("abc", 10) == (0, 0)
    assert strtol("", 10) == (0, 0)


def test_strtol_high_base():
    assert strtol("zZ", 36) == (int("zz", 36), 2)


def test_strtol_saturates():
    assert strtol("99999999999", 10) == (LONG_MAX, 11)
    assert strtol("2147483648", 10) == (LONG_MAX, 10)
    assert strtol("-2147483648", 10) == (LONG_MIN, 11)
    assert strtol("-2147483649", 10) == (LONG_MIN, 11)


def test_strtol_rejects_negative_base():
    with pytest.raises(ValueError):
        strtol("10", -2)
    with pytest.raises(ValueError):
        strtoul("10", -2)


@given(int32)
def test_strtol_decimal_round_trip(n):
    text = str(n)
    assert strtol(text, 10) == (n, len(text))


@given(st.integers(min_value=0, max_value=LONG_MAX))
def test_strtol_hex_round_trip(n):
    text = f"0x{n:x}"
    assert strtol(text, 0) == (n, len(text))


def test_strtoul_limits():
    assert strtoul("4294967295", 10) == (ULONG_MAX, 10)
    assert strtoul("4294967296", 10) == (ULONG_MAX, 10)


def test_strtoul_negative_wraps():
    assert strtoul("-1", 10) == (ULONG_MAX, 2)
    assert strtoul("-5", 10) == ((-5) % 2**32, 2)


@given(st.integers(min_value=0, max_value=ULONG_MAX))
def test_strtoul_round_trip(n):
    text = str(n)
    assert strtoul(text, 10) == (n, len(text))


def test_atol_ignores_trailing_text():
    assert atol("  12abc") == 12
    assert atol("nothing") == 0


# ---- sysconf --------------------------------------------------------------


def test_sysconf_page_size():
    assert sysconf(SC_PAGESIZE) == 4096
    assert sysconf(SC_PAGE_SIZE) == sysconf(SC_PAGESIZE)


def test_sysconf_unknown_name():
    with pytest.raises(ValueError):
        sysconf(0)


def test_limits_agree_with_conversions():
    assert stdlib.INT_MIN == -stdlib.INT_MAX - 1
    assert strtol(str(stdlib.INT_MAX), 10)[0] == stdlib.INT_MAX
    assert strtol(str(stdlib.INT_MIN), 10)[0] == stdlib.INT_MIN
    assert strtoul(str(stdlib.UINT_MAX), 10)[0] == stdlib.UINT_MAX
    assert div(stdlib.INT_MIN, 1).quot == stdlib.INT_MIN
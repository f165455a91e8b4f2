import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eposuser import charclass

ascii_codes = st.integers(min_value=0, max_value=127)


@given(ascii_codes)
def test_digit_alpha_hex(c):
    ch = chr(c)
    assert charclass.isdigit(c) == (ch in string.digits)
    assert charclass.isalpha(c) == (ch in string.ascii_letters)
    assert charclass.isalnum(c) == (ch in string.ascii_letters + string.digits)
    assert charclass.isxdigit(c) == (ch in string.hexdigits)
    assert charclass.islower(c) == (ch in string.ascii_lowercase)
    assert charclass.isupper(c) == (ch in string.ascii_uppercase)


@given(ascii_codes)
def test_space_and_punct(c):
    ch = chr(c)
    assert charclass.isspace(c) == (ch in string.whitespace)
    assert charclass.ispunct(c) == (ch in string.punctuation)
    assert charclass.isblank(c) == (ch in " \t")


@given(ascii_codes)
def test_print_and_cntrl_partition_ascii(c):
    assert charclass.isascii(c)
    assert charclass.isprint(c) != charclass.iscntrl(c)
    assert charclass.isgraph(c) == (charclass.isprint(c) and c != ord(" "))


@given(ascii_codes)
def test_case_mapping_matches_str(c):
    ch = chr(c)
    assert charclass.tolower(c) == ord(ch.lower())
    assert charclass.toupper(c) == ord(ch.upper())


@given(st.sampled_from(string.ascii_letters))
def test_case_round_trip(ch):
    assert charclass.tolower(charclass.toupper(ch.lower())) == ch.lower()
    assert charclass.toupper(charclass.tolower(ch.upper())) == ch.upper()


@pytest.mark.parametrize("c", [-1, 128, 200, 1000])
def test_non_ascii_codes_are_unclassified(c):
    assert not charclass.isascii(c)
    assert not charclass.isprint(c)
    assert not charclass.iscntrl(c)
    assert not charclass.isalpha(c)
    assert charclass.tolower(c) == c


def test_string_arguments():
    assert charclass.isupper("Q")
    assert not charclass.islower("Q")
    assert charclass.tolower("Q") == "Q".lower()
    assert charclass.toupper("!") == "!"


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        charclass.isalpha("ab")
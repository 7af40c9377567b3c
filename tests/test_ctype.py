import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.ctype import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == chr(code).isdigit()


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_printable(code):
    assert is_print(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", ASCII_CODES)
def test_case_conversion_matches_str_methods(code):
    assert to_upper(code) == ord(chr(code).upper())
    assert to_lower(code) == ord(chr(code).lower())


@given(st.integers(min_value=-1000, max_value=1000))
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@given(st.integers(min_value=-1000, max_value=1000))
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code < 128)


@given(st.integers(min_value=128, max_value=100_000))
def test_non_ascii_codes_are_not_classified(code):
    assert not is_alpha(code)
    assert not is_digit(code)
    assert not is_print(code)
    assert to_upper(code) == code
    assert to_lower(code) == code


@given(st.integers(min_value=-1000, max_value=1000))
def test_case_round_trip_on_letters(code):
    if is_alpha(code):
        assert to_lower(to_upper(code)) == to_lower(code)
        assert to_upper(to_lower(code)) == to_upper(code)
    else:
        assert to_upper(code) == code
        assert to_lower(code) == code


def test_string_input_returns_string():
    assert to_upper("q") == "Q"
    assert to_lower("Q") == "q"
    assert to_upper("5") == "5"


def test_string_input_classification():
    assert is_alpha("z")
    assert is_digit("7")
    assert not is_alnum("_")
    assert is_print(" ")
    assert not is_print("\t")


def test_negative_values():
    assert not is_ascii(-1)
    assert not is_print(-1)
    assert to_upper(-5) == -5


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_char_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
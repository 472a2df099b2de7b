import string

import pytest

from minixpm.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", ["@", "[", "`", "{", " ", "é"])
def test_non_alnum(c):
    assert is_alnum(c) is False


def test_accepts_integer_codes():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("5")) is True
    assert is_alpha(ord("5")) is False


def test_ascii_range_boundaries():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_print_range_boundaries():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_upper_and_lower_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(lower) == upper
        assert to_lower(upper) == lower
        assert to_upper(ord(lower)) == ord(upper)
        assert to_lower(ord(upper)) == ord(lower)


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " "))
def test_case_conversion_leaves_others(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        is_alpha("ab")
import string

import pytest

from ftxpm.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    lowercase,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_is_alpha_accepts_letters(c):
    assert is_alpha(c)
    assert is_alpha(ord(c))


@pytest.mark.parametrize("c", list(string.digits + " @[`{~\n"))
def test_is_alpha_rejects_non_letters(c):
    assert not is_alpha(c)


def test_is_digit_matches_ascii_digits():
    for code in range(256):
        assert is_digit(code) == (chr(code) in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_to_lower_and_to_upper_on_letters():
    for upper, lower in zip(string.ascii_uppercase, string.ascii_lowercase):
        assert to_lower(upper) == lower
        assert to_upper(lower) == upper
        assert to_lower(ord(upper)) == ord(lower)
        assert to_upper(ord(lower)) == ord(upper)


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " "))
def test_case_conversion_leaves_other_characters(c):
    assert to_lower(c) == c
    assert to_upper(c) == c


def test_to_lower_leaves_non_ascii_codes():
    assert to_lower(200) == 200
    assert to_upper(-5) == -5


def test_lowercase_only_touches_ascii():
    text = "Hello, WORLD 42 Ä"
    result = lowercase(text)
    assert result == "hello, world 42 Ä"
    assert len(result) == len(text)


def test_lowercase_empty_gives_none():
    assert lowercase("") is None
    assert lowercase(None) is None
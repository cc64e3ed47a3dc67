import string

import pytest

from ftlib.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_is_alpha_accepts_letters(ch):
    assert is_alpha(ch) is True
    assert is_alpha(ord(ch)) is True


@pytest.mark.parametrize("ch", ["0", "9", " ", "@", "[", "`", "{", "é"])
def test_is_alpha_rejects_non_letters(ch):
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_is_digit_accepts_digits(ch):
    assert is_digit(ch) is True


@pytest.mark.parametrize("ch", ["/", ":", "a", "Z", " "])
def test_is_digit_rejects_others(ch):
    assert is_digit(ch) is False


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_case_conversion_on_strings():
    assert to_upper("a") == "A"
    assert to_upper("z") == "Z"
    assert to_lower("A") == "a"
    assert to_lower("Z") == "z"


def test_case_conversion_keeps_type_for_ints():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


@pytest.mark.parametrize("ch", ["1", "@", "[", "`", "{", " ", "A"])
def test_to_upper_leaves_non_lowercase_unchanged(ch):
    assert to_upper(ch) == ch


@pytest.mark.parametrize("ch", ["1", "@", "[", "`", "{", " ", "a"])
def test_to_lower_leaves_non_uppercase_unchanged(ch):
    assert to_lower(ch) == ch


def test_case_round_trip_for_all_letters():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ch)) == ch
    for ch in string.ascii_uppercase:
        assert to_upper(to_lower(ch)) == ch


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_non_character_type():
    with pytest.raises(TypeError):
        is_digit(1.5)
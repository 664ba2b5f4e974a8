import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_CODES = range(256)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)
    assert is_alpha(chr(code)) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


@pytest.mark.parametrize("code", ALL_CODES)
def test_is_print_matches_printable_without_controls(code):
    expected = chr(code) in string.printable and chr(code) not in "\t\n\r\x0b\x0c"
    assert is_print(code) == expected


def test_case_conversion_pinned():
    assert to_upper("a") == "A"
    assert to_lower("Q") == "q"


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


def test_case_conversion_keeps_integer_kind():
    assert to_upper(ord("m")) == ord("M")
    assert to_lower(ord("M")) == ord("m")


@pytest.mark.parametrize("c", ["1", "@", "[", "`", "{", " ", "\xe9"])
def test_non_letters_unchanged(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)
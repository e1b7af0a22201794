import string

import pytest

from pushswap.lib.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", string.ascii_letters)
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c)
    assert is_alnum(c)
    assert not is_digit(c)


@pytest.mark.parametrize("c", string.digits)
def test_digits(c):
    assert is_digit(c)
    assert is_alnum(c)
    assert not is_alpha(c)


@pytest.mark.parametrize("c", string.punctuation + " \t\n")
def test_punctuation_and_space_are_not_alnum(c):
    assert not is_alnum(c)
    assert not is_alpha(c)
    assert not is_digit(c)


def test_non_ascii_letter_is_not_alpha():
    assert not is_alpha("é")
    assert not is_ascii("é")


def test_integer_codes_are_accepted():
    assert is_alpha(ord("q"))
    assert is_digit(ord("7"))
    assert not is_digit(ord("q"))


@pytest.mark.parametrize("code,expected", [(-1, False), (0, True), (127, True), (128, False)])
def test_ascii_bounds(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize(
    "code,expected", [(31, False), (32, True), (126, True), (127, False)]
)
def test_print_bounds(code, expected):
    assert is_print(code) is expected


def test_printable_characters_match_string_module():
    visible = set(string.printable) - set(string.whitespace) | {" "}
    assert all(is_print(c) for c in visible)
    assert not any(is_print(c) for c in "\t\n\r\v\f")


@pytest.mark.parametrize("index", range(26))
def test_case_conversion_round_trip(index):
    lower = string.ascii_lowercase[index]
    upper = string.ascii_uppercase[index]
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_lower(to_upper(lower)) == lower


def test_case_conversion_keeps_integer_kind():
    assert to_upper(ord("m")) == ord("M")
    assert to_lower(ord("M")) == ord("m")


@pytest.mark.parametrize("c", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_non_letters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_already_upper_is_unchanged():
    assert to_upper("Z") == "Z"
    assert to_lower("z") == "z"


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")
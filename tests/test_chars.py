import string

import pytest

from fractol.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


def test_letters_are_alpha():
    assert all(is_alpha(ch) for ch in string.ascii_letters)


def test_non_letters_are_not_alpha():
    others = string.digits + string.punctuation + " \t\n"
    assert not any(is_alpha(ch) for ch in others)


def test_digits():
    assert all(is_digit(ch) for ch in string.digits)
    assert not any(is_digit(ch) for ch in string.ascii_letters + string.punctuation)


def test_alnum_is_alpha_or_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("ß") is False


@pytest.mark.parametrize("code, expected", [(-1, False), (0, True), (127, True), (128, False)])
def test_ascii_bounds(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize("ch, expected", [(" ", True), ("~", True), ("\x7f", False), ("\x1f", False)])
def test_print_bounds(ch, expected):
    assert is_print(ch) is expected


def test_printable_matches_string_module():
    printable = set(string.printable) - set(string.whitespace) | {" "}
    for code in range(128):
        assert is_print(code) == (chr(code) in printable)


def test_case_conversion_of_strings():
    assert [to_lower(ch) for ch in string.ascii_uppercase] == list(string.ascii_lowercase)
    assert [to_upper(ch) for ch in string.ascii_lowercase] == list(string.ascii_uppercase)


def test_case_conversion_of_codes_returns_codes():
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("q")) == ord("Q")


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " ") + ["é", "Ä"])
def test_case_conversion_leaves_others_unchanged(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_round_trip_through_cases():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_is_rejected():
    with pytest.raises(TypeError):
        is_alpha("ab")
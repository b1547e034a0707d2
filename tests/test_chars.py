import string

import pytest

from fractscope.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    tolower,
    toupper,
)

ALL_CODES = range(0, 256)


@pytest.mark.parametrize("code", ALL_CODES)
def test_isalpha_matches_ascii_letters(code):
    assert isalpha(chr(code)) == (chr(code) in string.ascii_letters)
    assert isalpha(code) == isalpha(chr(code))


@pytest.mark.parametrize("code", ALL_CODES)
def test_isdigit_matches_ascii_digits(code):
    assert isdigit(chr(code)) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ALL_CODES)
def test_isalnum_is_letter_or_digit(code):
    assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isdigit_rejects_non_ascii_digits():
    assert isdigit("\u0663") is False


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint("\x1f") is False
    assert isprint("\x7f") is False
    assert isprint("\n") is False


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip(letter):
    upper = toupper(letter)
    assert upper == letter.upper()
    assert tolower(upper) == letter
    assert toupper(upper) == upper


@pytest.mark.parametrize("char", string.digits + string.punctuation + " \t")
def test_case_mapping_leaves_non_letters(char):
    assert toupper(char) == char
    assert tolower(char) == char


def test_case_mapping_keeps_integer_kind():
    assert toupper(ord("q")) == ord("Q")
    assert tolower(ord("Q")) == ord("q")
    assert toupper(200) == 200


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_non_character_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)
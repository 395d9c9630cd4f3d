import string

import pytest

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


def _ascii(code):
    return 0 <= code < 128


@pytest.mark.parametrize("code", CODES)
def test_is_alpha(code):
    expected = _ascii(code) and chr(code) in string.ascii_letters
    assert is_alpha(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_is_digit(code):
    expected = _ascii(code) and chr(code) in string.digits
    assert is_digit(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_union(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", CODES)
def test_is_ascii(code):
    assert is_ascii(code) == _ascii(code)


@pytest.mark.parametrize("code", CODES)
def test_is_print(code):
    expected = _ascii(code) and chr(code).isprintable()
    assert is_print(code) == expected


def test_print_edges():
    assert is_print(ord(" "))
    assert not is_print(ord("~") + 1)


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_letters(letter):
    assert to_lower(ord(letter)) == ord(letter.lower())


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_letters(letter):
    assert to_upper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("code", CODES)
def test_non_letters_unchanged(code):
    if not is_alpha(code):
        assert to_lower(code) == code
        assert to_upper(code) == code
    else:
        assert to_upper(to_lower(code)) == to_upper(code)
        assert to_lower(to_upper(code)) == to_lower(code)
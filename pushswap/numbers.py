"""Strict decimal parsing and formatting of fixed-width integers."""

from __future__ import annotations

_INT_BITS = 32
_LONG_BITS = 64


def _wrap(value: int, bits: int) -> int:
    """Wrap ``value`` into the signed range of a ``bits``-wide integer."""
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _parse(text: str) -> int:
    """Parse an optionally signed run of digits that fills the whole text.

    Anything else yields 0: a leading blank, a stray character or no digits.
    """
    if not text or text[0] == " " or "\t" <= text[0] <= "\r":
        return 0
    sign = 1
    body = text
    if body[0] in "+-":
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = 0
    for ch in body:
        if not "0" <= ch <= "9":
            return 0
        digits = digits * 10 + (ord(ch) - ord("0"))
    return sign * digits


def parse_int(text: str) -> int:
    """Parse ``text`` as a 32-bit integer; invalid text gives 0, overflow wraps."""
    return _wrap(_parse(text), _INT_BITS)


def parse_long(text: str) -> int:
    """Parse ``text`` as a 64-bit integer; invalid text gives 0, overflow wraps."""
    return _wrap(_parse(text), _LONG_BITS)


def int_to_string(number: int) -> str:
    """Return the decimal text of ``number`` taken as a 32-bit integer."""
    return str(_wrap(int(number), _INT_BITS))
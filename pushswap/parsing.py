"""Reading and validating the integers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.numbers import parse_long

_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


class ParseError(ValueError):
    """Raised when the arguments do not form a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def split_numbers(text: str, separator: str = " ") -> list[str]:
    """Split ``text`` on ``separator`` after checking it holds only number characters.

    Allowed characters are digits, ``+``, ``-`` and the separator; no two of
    ``+``, ``-`` and the separator may stand next to each other. An empty text
    or a violation raises :class:`ParseError`.
    """
    if len(separator) != 1:
        raise ValueError("separator must be a single character")
    if not text:
        raise ParseError()
    joiners = {separator, "-", "+"}
    for current, following in zip(text, text[1:] + "\0"):
        if not current.isascii() or not (current.isdigit() or current in joiners):
            raise ParseError()
        if current in joiners and following in joiners:
            raise ParseError()
    return [token for token in text.split(separator) if token]


def parse_values(tokens: Iterable[str]) -> list[int]:
    """Convert tokens to 32-bit integers.

    ``"0"`` is zero and an empty token also reads as zero; any other token that
    does not parse, or lies outside the 32-bit range, raises :class:`ParseError`.
    """
    values = []
    for token in tokens:
        if token == "0":
            values.append(0)
            continue
        value = parse_long(token)
        if (token and value == 0) or not _INT_MIN <= value <= _INT_MAX:
            raise ParseError()
        values.append(value)
    return values


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value occurs more than once."""
    return len(set(values)) != len(values)


def read_arguments(argv: Sequence[str]) -> list[int]:
    """Turn command-line arguments (program name excluded) into values.

    A single argument is split on spaces; several arguments are taken one
    value each. No arguments give an empty list. Invalid input, a single
    argument holding no numbers, or repeated values raise :class:`ParseError`.
    """
    if not argv:
        return []
    if len(argv) == 1:
        tokens = split_numbers(argv[0], " ")
        if not tokens:
            raise ParseError()
    else:
        tokens = list(argv)
    values = parse_values(tokens)
    if has_duplicates(values):
        raise ParseError()
    return values
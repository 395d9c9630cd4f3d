"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str | int, stream: TextIO | None = None) -> None:
    """Write one character; an integer is taken as a byte code."""
    if isinstance(char, int):
        char = chr(char % 256)
    elif len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)


def put_str(text: str, stream: TextIO | None = None) -> None:
    """Write ``text``."""
    _target(stream).write(text)


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline."""
    _target(stream).write(text + "\n")


def put_number(number: int, stream: TextIO | None = None) -> None:
    """Write ``number``, taken as a 32-bit integer, in decimal."""
    value = (int(number) + (1 << 31)) % (1 << 32) - (1 << 31)
    _target(stream).write(str(value))
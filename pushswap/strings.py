"""String helpers: searching, comparing, slicing, joining, trimming and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence


def _as_char(char: str | int) -> str:
    """Normalise a character given as a one-character string or a byte code."""
    if isinstance(char, int):
        return chr(char % 256)
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def string_length(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def find_char(text: str, char: str | int) -> int | None:
    """Return the index of the first ``char`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the text.
    """
    char = _as_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def find_last_char(text: str, char: str | int) -> int | None:
    """Return the index of the last ``char`` in ``text``, or ``None``.

    Searching for the NUL character finds the end of the text.
    """
    char = _as_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters and return the difference of the first mismatch.

    The end of a string compares as a character of code 0, so a proper prefix
    compares lower than the longer string. Equal prefixes give 0.
    """
    _check_non_negative(count=count)
    for index in range(count):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_within(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first occurs wholly inside the first ``length`` characters.

    An empty needle is found at index 0; no match gives ``None``.
    """
    _check_non_negative(length=length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end yields an empty string.
    """
    _check_non_negative(start=start, length=length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def trim(text: str, charset: str) -> str:
    """Remove every leading and trailing character of ``text`` found in ``charset``."""
    if text is None or charset is None:
        raise TypeError("text and charset are required")
    if not charset:
        return text
    return text.strip(charset)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def each_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each element, storing any non-``None`` result in place.

    Returns ``chars`` itself.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars


def duplicate(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters; nothing when
    ``size`` is 0) and the full length of ``src``, so truncation shows as a
    length not smaller than ``size``.
    """
    _check_non_negative(size=size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When ``size`` does not exceed the length of ``dst`` nothing is appended and
    the length reported is ``len(src) + size``.
    """
    _check_non_negative(size=size)
    dst_len = len(dst)
    src_len = len(src)
    if size <= dst_len:
        return dst, src_len + size
    return dst + src[:size - 1 - dst_len], dst_len + src_len
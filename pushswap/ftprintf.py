"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"

_UINT32 = 1 << 32
_UINTPTR = 1 << 64


def _as_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (int(value) + (1 << 31)) % _UINT32 - (1 << 31)


def _as_uint32(value: int) -> int:
    """Wrap an integer into the unsigned 32-bit range."""
    return int(value) % _UINT32


def _to_base16(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    out = []
    while value:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError("%c requires a single character")
        return arg
    return chr(int(arg) % 256)


def _format_string(arg: Any) -> str:
    return "(null)" if arg is None else str(arg)


def _format_pointer(arg: Any) -> str:
    if arg is None:
        return "(nil)"
    address = int(arg) % _UINTPTR
    if address == 0:
        return "(nil)"
    return "0x" + _to_base16(address, _HEX_LOWER)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        arg = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(arg)
    if spec == "s":
        return _format_string(arg)
    if spec == "p":
        return _format_pointer(arg)
    if spec in "di":
        return str(_as_int32(arg))
    if spec == "u":
        return str(_as_uint32(arg))
    digits = _HEX_LOWER if spec == "x" else _HEX_UPPER
    return _to_base16(_as_uint32(arg), digits)


def format_printf(fmt: str | None, *args: Any) -> str:
    """Return the text that printf would write for ``fmt`` and ``args``.

    Unknown conversions and a lone trailing ``%`` produce nothing.
    A ``None`` format yields an empty string.
    """
    if fmt is None:
        return ""
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            spec = next(chars, "")
            if spec:
                pieces.append(_convert(spec, remaining))
        else:
            pieces.append(ch)
    return "".join(pieces)


def printf(fmt: str | None, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    if text:
        sys.stdout.write(text)
        sys.stdout.flush()
    return len(text)
"""Byte-buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

_SIZE_MAX = (1 << 64) - 1


def _check_count(count: int, *buffers) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for buf in buffers:
        if count > len(buf):
            raise ValueError("count exceeds buffer length")


def zero(buffer: bytearray, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero, in place."""
    _check_count(count, buffer)
    buffer[:count] = bytes(count)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes.

    A request for zero elements of size zero still yields one byte.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > _SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    if count == 0 and size == 0:
        count = size = 1
    return bytearray(count * size)


def find_byte(data: bytes, value: int, count: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``count``."""
    _check_count(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(first: bytes, second: bytes, count: int) -> int:
    """Return the difference of the first unequal bytes, or 0 if all match."""
    _check_count(count, first, second)
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def copy_bytes(dest: bytearray | None, src: bytes | None, count: int) -> bytearray | None:
    """Copy ``count`` bytes from ``src`` into the start of ``dest``."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise ValueError("both buffers are required")
    _check_count(count, dest, src)
    dest[:count] = src[:count]
    return dest


def move_bytes(buffer: bytearray, dest_offset: int, src_offset: int, count: int) -> bytearray:
    """Copy ``count`` bytes within ``buffer``; overlapping regions are safe."""
    if min(dest_offset, src_offset, count) < 0:
        raise ValueError("offsets and count must not be negative")
    if max(dest_offset, src_offset) + count > len(buffer):
        raise ValueError("region exceeds buffer length")
    buffer[dest_offset:dest_offset + count] = buffer[src_offset:src_offset + count]
    return buffer


def fill_bytes(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` (taken mod 256)."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer
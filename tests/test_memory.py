import pytest

from pushswap.memory import (
    allocate_zeroed,
    compare_bytes,
    copy_bytes,
    fill_bytes,
    find_byte,
    move_bytes,
    zero,
)


def test_zero_prefix_only():
    buf = bytearray(b"abc")
    zero(buf, 2)
    assert buf == bytearray(b"\x00\x00c")


def test_zero_too_long():
    with pytest.raises(ValueError):
        zero(bytearray(b"ab"), 3)


def test_allocate_zeroed_all_zero():
    buf = allocate_zeroed(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_allocate_zeroed_empty_request_gets_one_byte():
    assert allocate_zeroed(0, 0) == bytearray(1)


def test_allocate_zeroed_overflow():
    with pytest.raises(OverflowError):
        allocate_zeroed(1 << 63, 4)


def test_find_byte():
    assert find_byte(b"abc", ord("c"), 3) == 2
    assert find_byte(b"abc", ord("c"), 2) is None


def test_find_byte_value_wraps():
    assert find_byte(b"abcd", ord("d") + 256, 4) == 3


def test_compare_bytes_equal():
    assert compare_bytes(b"abc", b"abc", 3) == 0
    assert compare_bytes(b"abx", b"aby", 2) == 0


def test_compare_bytes_unsigned():
    assert compare_bytes(b"\x80", b"\x00", 1) == 128
    assert compare_bytes(b"a", b"b", 1) < 0


def test_copy_bytes():
    dest = bytearray(4)
    result = copy_bytes(dest, b"abcd", 3)
    assert result is dest
    assert dest[:3] == bytearray(b"abc")
    assert dest[3] == 0


def test_copy_bytes_both_none():
    assert copy_bytes(None, None, 3) is None


def test_copy_bytes_one_none():
    with pytest.raises(ValueError):
        copy_bytes(bytearray(3), None, 3)


def test_move_bytes_forward_overlap():
    buf = bytearray(b"abc")
    assert move_bytes(buf, 1, 0, 2) == bytearray(b"aab")


def test_move_bytes_backward_overlap():
    buf = bytearray(b"abc")
    assert move_bytes(buf, 0, 1, 2) == bytearray(b"bcc")


def test_move_bytes_out_of_range():
    with pytest.raises(ValueError):
        move_bytes(bytearray(b"abc"), 2, 0, 2)


def test_fill_bytes():
    buf = bytearray(b"abc\x00")
    assert fill_bytes(buf, 65, 4) == bytearray(b"AAAA")
    assert fill_bytes(buf, 66 + 256, 2) == bytearray(b"BBAA")
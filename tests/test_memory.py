import pytest

from fractscope.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buffer = bytearray(b"hello")
    result = memset(buffer, ord("z"), 3)
    assert result is buffer
    assert buffer[:3] == b"zzz"
    assert buffer[3:] == b"lo"


def test_memset_truncates_value_to_byte():
    buffer = bytearray(2)
    memset(buffer, 0x100 + ord("a"), 2)
    assert buffer == bytearray(b"aa")


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears():
    buffer = bytearray(b"abcd")
    bzero(buffer, 2)
    assert buffer == bytearray(b"\0\0cd")


def test_memcpy_copies():
    dest = bytearray(b"......")
    memcpy(dest, b"abc", 3)
    assert dest == bytearray(b"abc...")


def test_memcpy_source_too_short_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"ab", 3)


def test_memmove_forward_overlap():
    buffer = bytearray(b"abcdef")
    view = memoryview(buffer)
    result = memmove(view[2:], view, 4)
    assert bytes(result) == b"abcd"
    assert buffer == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buffer = bytearray(b"abcdef")
    view = memoryview(buffer)
    result = memmove(view, view[2:], 4)
    assert bytes(result) == b"cdefef"
    assert buffer == bytearray(b"cdefef")


def test_memchr_finds_first():
    assert memchr(b"abcabc", ord("c"), 6) == 2


def test_memchr_respects_limit_and_none():
    assert memchr(b"abcabc", ord("c"), 2) is None
    assert memchr(None, 0, 0) is None


def test_memcmp_equal_and_order():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abx", b"aby", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_calloc_zeroed():
    buffer = calloc(3, 4)
    assert len(buffer) == 3 * 4
    assert not any(buffer)


def test_calloc_zero_size():
    assert calloc(0, 8) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)
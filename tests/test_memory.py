import pytest

from ftxpm.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"abcdef")
    result = memset(buf, 0x41, 3)
    assert result is buf
    assert buf == bytes([0x41]) * 3 + b"def"


def test_memset_truncates_value_to_a_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"xyz")
    bzero(buf, 2)
    assert buf == bytes(2) + b"z"


def test_calloc_gives_zeroed_buffer():
    buf = calloc(3, 4)
    assert buf == bytearray(3 * 4)


@pytest.mark.parametrize("count,size", [(0, 4), (4, 0), (-1, 2)])
def test_calloc_non_positive_gives_none(count, size):
    assert calloc(count, size) is None


def test_memchr_finds_first_occurrence():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None


def test_memcmp_equal_and_different():
    assert memcmp(b"abcd", b"abcd", 4) == 0
    assert memcmp(b"abcd", b"abzz", 2) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst == b"abc..."


def test_memmove_handles_overlap():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    target = view[2:]
    result = memmove(target, view[:4], 4)
    assert bytes(result) == b"abcd"
    assert buf == b"ab" + b"abcd"


def test_memmove_overlap_backwards():
    buf = bytearray(b"abcdef")
    view = memoryview(buf)
    target = view[:4]
    result = memmove(target, view[2:], 4)
    assert bytes(result) == b"cdef"
    assert buf == b"cdef" + b"ef"


def test_strlcpy_full_copy():
    src = b"hello"
    dst = bytearray(10)
    assert strlcpy(dst, src, len(dst)) == len(src)
    assert bytes(dst[:len(src) + 1]) == src + b"\0"


def test_strlcpy_truncates():
    src = b"hello"
    dst = bytearray(b"XXXXXX")
    assert strlcpy(dst, src, 3) == len(src)
    assert bytes(dst[:3]) == src[:2] + b"\0"


def test_strlcpy_size_zero_writes_nothing():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"abc", 0) == 3
    assert dst == b"keep"


def test_strlcat_appends():
    dst = bytearray(b"foo\0" + bytes(8))
    src = b"bar"
    assert strlcat(dst, src, len(dst)) == 3 + len(src)
    assert bytes(dst[:7]) == b"foo" + src + b"\0"


def test_strlcat_truncates():
    dst = bytearray(b"foo\0\0\0")
    assert strlcat(dst, b"barbaz", 5) == 3 + 6
    assert bytes(dst[:5]) == b"foo" + b"b" + b"\0"


def test_strlcat_size_not_beyond_dest():
    dst = bytearray(b"foobar\0")
    src = b"xy"
    assert strlcat(dst, src, 4) == len(src) + 4
    assert dst == b"foobar\0"


def test_strlcpy_then_strlcat_round_trip():
    dst = bytearray(16)
    strlcpy(dst, b"abc", len(dst))
    strlcat(dst, b"def", len(dst))
    assert bytes(dst).split(b"\0")[0] == b"abc" + b"def"
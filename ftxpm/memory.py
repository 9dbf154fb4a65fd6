"""Byte-buffer helpers working on mutable byte sequences in place."""

from __future__ import annotations

from typing import Optional, Union

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "strlcpy",
    "strlcat",
]

Buffer = Union[bytearray, memoryview]
BytesLike = Union[bytes, bytearray, memoryview]


def _check_length(buf: BytesLike, length: int) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    if length > len(buf):
        raise ValueError("length exceeds the buffer size")


def _cstrlen(data: BytesLike) -> int:
    """Length up to the first NUL byte, or the whole buffer without one."""
    index = bytes(data).find(b"\0")
    return len(data) if index < 0 else index


def memset(buf: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buf`` with ``value & 0xFF``."""
    _check_length(buf, length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: Buffer, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> Optional[bytearray]:
    """A zeroed buffer of ``count * size`` bytes, or None if either is not positive."""
    if count <= 0 or size <= 0:
        return None
    return bytearray(count * size)


def memchr(buf: BytesLike, value: int, length: int) -> Optional[int]:
    """Index of the first byte equal to ``value & 0xFF`` in the first ``length`` bytes."""
    _check_length(buf, length)
    index = bytes(buf[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, length: int) -> int:
    """Difference of the first differing bytes within ``length``, or 0."""
    _check_length(a, length)
    _check_length(b, length)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Buffer, src: BytesLike, length: int) -> Buffer:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(dst, length)
    _check_length(src, length)
    dst[:length] = src[:length]
    return dst


def memmove(dst: Buffer, src: BytesLike, length: int) -> Buffer:
    """Copy ``length`` bytes like :func:`memcpy`, safe when the buffers overlap."""
    _check_length(dst, length)
    _check_length(src, length)
    dst[:length] = bytes(src[:length])
    return dst


def strlcpy(dst: Buffer, src: BytesLike, size: int) -> int:
    """Copy the NUL-terminated ``src`` into ``dst`` within ``size`` bytes.

    At most ``size - 1`` bytes are copied and a NUL terminator written when
    ``size`` is positive. Returns the length of ``src``.
    """
    source_length = _cstrlen(src)
    if size > 0:
        _check_length(dst, size)
        count = min(source_length, size - 1)
        dst[:count] = bytes(src[:count])
        dst[count] = 0
    return source_length


def strlcat(dst: Buffer, src: BytesLike, size: int) -> int:
    """Append the NUL-terminated ``src`` to the string in ``dst`` within ``size`` bytes.

    Returns the length the result would have had without truncation; when
    ``size`` does not exceed the current length of ``dst``, nothing is
    written and ``len(src) + size`` is returned.
    """
    dest_length = _cstrlen(dst)
    source_length = _cstrlen(src)
    if size <= dest_length:
        return source_length + size
    _check_length(dst, size)
    count = min(source_length, size - 1 - dest_length)
    dst[dest_length:dest_length + count] = bytes(src[:count])
    dst[dest_length + count] = 0
    return dest_length + source_length
"""Byte-buffer helpers working on bytearray and writable memoryview objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_length(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer size {len(buf)}")


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buf: Buffer, value: int, n: int) -> Buffer:
    """Fill the first n bytes of buf with the low byte of value."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def memcpy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to the start of dst."""
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy n bytes from src to dst; the regions may overlap."""
    _check_length(n, dst, src)
    data = bytes(src[:n])
    dst[:n] = data
    return dst


def memchr(buf: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to value within the first n bytes, or None."""
    _check_length(n, buf)
    target = value & 0xFF
    return next((i for i, byte in enumerate(bytes(buf[:n])) if byte == target), None)


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first differing bytes within n bytes, or 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0
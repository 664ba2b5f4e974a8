"""Byte-buffer operations on bytes-like objects."""

from __future__ import annotations

from collections.abc import ByteString


def _check_span(buf, n: int, offset: int = 0, name: str = "buffer") -> None:
    if n < 0 or offset < 0:
        raise ValueError("sizes and offsets must not be negative")
    if offset + n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {offset + n} requested")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zeroed buffer of count * size bytes; one byte when either is zero."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray(1)
    return bytearray(count * size)


def memchr(data: ByteString, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of c in data[:n], or None."""
    _check_span(data, n)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: ByteString, s2: ByteString, n: int) -> int:
    """Difference of the first differing bytes in the first n, or 0."""
    _check_span(s1, n, name="first buffer")
    _check_span(s2, n, name="second buffer")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: ByteString, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dst."""
    _check_span(dst, n, name="destination")
    _check_span(src, n, name="source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes within buf from offset src to offset dst; overlap is safe."""
    _check_span(buf, n, src, name="source span")
    _check_span(buf, n, dst, name="destination span")
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf
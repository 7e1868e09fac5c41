"""Byte-buffer operations over bytes and bytearray objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(buf: bytes | bytearray, n: int) -> None:
    if n < 0 or n > len(buf):
        raise ValueError(f"length {n} outside buffer of {len(buf)} bytes")


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first n bytes of buf."""
    _check_length(buf, n)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes."""
    if size and count > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    return bytearray(count * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to c in data[:n], or None."""
    _check_length(data, n)
    index = data.find(c & 0xFF, 0, n)
    return None if index == -1 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, else 0."""
    _check_length(a, n)
    _check_length(b, n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy n bytes of src to the start of dest and return dest."""
    _check_length(dest, n)
    _check_length(src, n)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes inside buf from src_offset to dest_offset, overlap allowed."""
    if min(dest_offset, src_offset, n) < 0 or max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("move range outside buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_length(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf
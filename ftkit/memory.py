"""Byte-buffer primitives: fill, copy, move, search, compare and allocate."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *sizes: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for size in sizes:
        if n > size:
            raise ValueError(f"byte count {n} exceeds buffer length {size}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first *n* bytes of *buffer* to ``value & 0xFF``; return *buffer*."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buffer*."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into the start of *dest*; return *dest*."""
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy *n* bytes within *dest* from *src_offset* to *dest_offset*.

    The regions may overlap; the result is as if the source bytes were first
    copied aside. Returns *dest*.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    size = len(dest)
    _check_count(n, size - dest_offset, size - src_offset)
    dest[dest_offset:dest_offset + n] = dest[src_offset:src_offset + n]
    return dest


def memchr(data: bytes | bytearray, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value & 0xFF`` in the first
    *n* bytes of *data*, or None if there is none."""
    _check_count(n, len(data))
    index = data.find(value & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_count(n, len(a), len(b))
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes.

    Raises MemoryError when the total size does not fit in a machine size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if size > SIZE_MAX // nmemb:
        raise MemoryError(f"cannot allocate {nmemb} elements of {size} bytes")
    return bytearray(nmemb * size)
"""NUL-terminated string operations on ``str``, ``bytes`` and ``bytearray``.

Every function treats its text arguments as ending at the first NUL
character (or byte), or at the end of the object when there is none.
Searches return an index into the text instead of a pointer, and None
where nothing is found.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Iterator, Union

Text = Union[str, bytes, bytearray]
ByteText = Union[bytes, bytearray]


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def _needle(s: Text, c: int | str) -> str | bytes:
    """Return *c* as a one-element needle of the same kind as *s*."""
    if isinstance(c, bool) or not isinstance(c, (int, str)):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    if isinstance(c, str) and len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if isinstance(s, str):
        return c if isinstance(c, str) else chr(c)
    if isinstance(c, str):
        code = ord(c)
        if code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in a byte")
        return bytes([code])
    return bytes([c & 0xFF])


def _codes(data: Text) -> Iterator[int]:
    if isinstance(data, str):
        return (ord(ch) for ch in data)
    return iter(data)


def strlen(data: Text) -> int:
    """Return the number of characters before the first NUL in *data*."""
    index = data.find("\0" if isinstance(data, str) else b"\0")
    return len(data) if index < 0 else index


def strlcpy(dst: bytearray, src: ByteText, size: int) -> int:
    """Copy *src* into *dst*, writing at most *size* bytes including the NUL.

    Returns the length of *src*; a result of *size* or more means the copy
    was truncated. With *size* 0 nothing is written.
    """
    _check_count(size)
    length = strlen(src)
    if size == 0:
        return length
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")
    count = min(length, size - 1)
    dst[:count] = src[:count]
    dst[count] = 0
    return length


def strlcat(dst: bytearray, src: ByteText, size: int) -> int:
    """Append *src* to the string in *dst*, which has room for *size* bytes.

    Returns the length of the string it tried to create: the initial length
    of *dst* plus the length of *src*. When *dst* already holds more than
    *size* bytes nothing is written and ``size + len(src)`` is returned.
    """
    _check_count(size)
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer length {len(dst)}")
    dst_len = strlen(dst)
    src_len = strlen(src)
    if dst_len > size:
        return size + src_len
    count = max(0, min(src_len, size - dst_len - 1))
    dst[dst_len:dst_len + count] = src[:count]
    end = dst_len + count
    if end < len(dst):
        dst[end] = 0
    return src_len + dst_len


def strchr(s: Text, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*, or None.

    Searching for NUL returns the index of the terminator.
    """
    needle = _needle(s, c)
    end = strlen(s)
    if ord(needle) == 0:
        return end
    index = s.find(needle, 0, end)
    return None if index < 0 else index


def strrchr(s: Text, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*, or None.

    Searching for NUL returns the index of the terminator.
    """
    needle = _needle(s, c)
    end = strlen(s)
    if ord(needle) == 0:
        return end
    index = s.rfind(needle, 0, end)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2*.

    Returns the difference between the first pair of differing character
    codes, a shorter string counting as ending in NUL, or 0 if they match.
    """
    _check_count(n)
    left = _codes(s1[:strlen(s1)])
    right = _codes(s2[:strlen(s2)])
    for a, b in islice(zip_longest(left, right, fillvalue=0), n):
        if a != b:
            return a - b
    return 0


def strnstr(big: Text, little: Text, length: int) -> int | None:
    """Return the index of *little* in the first *length* characters of *big*.

    An empty *little* is found at index 0. Returns None if there is no
    match that lies wholly within the limit.
    """
    _check_count(length)
    little_len = strlen(little)
    if little_len == 0:
        return 0
    window = big[:min(strlen(big), length)]
    index = window.find(little[:little_len])
    return None if index < 0 else index


def strdup(s: Text) -> Text:
    """Return a new copy of *s* up to its first NUL."""
    return s[:strlen(s)]
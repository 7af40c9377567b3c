"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional

from ftkit.convert import itoa
from ftkit.strings import Text, strlen


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Text) -> bytes:
    text = s[:strlen(s)]
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def putchar_fd(c: int | str, fd: int) -> None:
    """Write the character *c* to *fd*; an int is written as one byte."""
    if isinstance(c, bool) or not isinstance(c, (int, str)):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: Optional[Text], fd: int) -> None:
    """Write *s* up to its first NUL to *fd*; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(s))


def putendl_fd(s: Text, fd: int) -> None:
    """Write *s* up to its first NUL followed by a newline to *fd*."""
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of the 32-bit signed integer *n* to *fd*."""
    _write_all(fd, itoa(n).encode("ascii"))
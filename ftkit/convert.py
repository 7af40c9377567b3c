"""Conversion between decimal text and 32-bit signed integers."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMBER = re.compile(r"[ \t-\r]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str | bytes | bytearray) -> int:
    """Parse a leading decimal integer from *text*.

    Leading spaces and the characters tab through carriage return are
    skipped, then one optional sign, then ASCII digits. Parsing stops at the
    first other character; text without digits gives 0. Values outside the
    32-bit range wrap around as a 32-bit signed integer.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("latin-1")
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Return the decimal text of the 32-bit signed integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} is outside the 32-bit signed range")
    return str(n)
"""Character classification and case conversion for ASCII character codes."""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)

_UPPER_A = ord("A")
_UPPER_Z = ord("Z")
_LOWER_A = ord("a")
_LOWER_Z = ord("z")
_DIGIT_0 = ord("0")
_DIGIT_9 = ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: int | str) -> int:
    """Return the integer code of *c*, which is an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def _from_code(code: int, like: int | str) -> int | str:
    return chr(code) if isinstance(like, str) else code


def _is_upper(code: int) -> bool:
    return _UPPER_A <= code <= _UPPER_Z


def _is_lower(code: int) -> bool:
    return _LOWER_A <= code <= _LOWER_Z


def is_alpha(c: int | str) -> bool:
    """Return True if *c* is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: int | str) -> bool:
    """Return True if *c* is an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def is_alnum(c: int | str) -> bool:
    """Return True if *c* is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True if *c* lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True if *c* is a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Return *c* converted to upper case if it is an ASCII lower-case letter.

    Any other value is returned unchanged; the result has the same type as *c*.
    """
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _from_code(code, c)  # type: ignore[return-value]


def to_lower(c: CharLike) -> CharLike:
    """Return *c* converted to lower case if it is an ASCII upper-case letter.

    Any other value is returned unchanged; the result has the same type as *c*.
    """
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _from_code(code, c)  # type: ignore[return-value]
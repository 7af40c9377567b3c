"""Building new strings from existing ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Union

from ftkit.strings import Text, strlen


def _terminated(s: Text) -> Text:
    """Return *s* cut at its first NUL."""
    return s[:strlen(s)]


def _separator(s: Text, sep: int | str) -> str | bytes:
    """Return *sep* as a one-element separator of the same kind as *s*."""
    if isinstance(sep, bool) or not isinstance(sep, (int, str)):
        raise TypeError(f"expected an int or a single character, got {type(sep).__name__}")
    if isinstance(sep, str) and len(sep) != 1:
        raise ValueError(f"expected a single character, got {sep!r}")
    if isinstance(s, str):
        return sep if isinstance(sep, str) else chr(sep)
    if isinstance(sep, str):
        code = ord(sep)
        if code > 0xFF:
            raise ValueError(f"character {sep!r} does not fit in a byte")
        return bytes([code])
    return bytes([sep & 0xFF])


def substr(s: Text, start: int, length: int) -> Text:
    """Return at most *length* characters of *s* beginning at *start*.

    A *start* at or beyond the end of *s* gives an empty result.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _terminated(s)
    if start >= len(text):
        return text[:0]
    return text[start:start + length]


def strjoin(s1: Text, s2: Text) -> Text:
    """Return *s1* followed by *s2*."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: Text, charset: Text) -> Text:
    """Return *s* without the characters of *charset* at its start and end."""
    return _terminated(s).strip(_terminated(charset))


def split(s: Text, sep: int | str) -> list:
    """Split *s* on the character *sep*, dropping empty pieces."""
    text = _terminated(s)
    return [part for part in text.split(_separator(text, sep)) if part]


def strmapi(s: Text, func: Callable) -> Text:
    """Return a new string made of ``func(index, char)`` for each character of *s*.

    For byte strings *func* receives and returns byte values.
    """
    text = _terminated(s)
    if isinstance(text, str):
        return "".join(func(index, ch) for index, ch in enumerate(text))
    return bytes(func(index, code) for index, code in enumerate(text))


def _terminated_length(chars: MutableSequence) -> int:
    if isinstance(chars, (bytes, bytearray)):
        return strlen(chars)
    return next((index for index, item in enumerate(chars) if item == "\0"), len(chars))


def striteri(chars: Union[bytearray, MutableSequence[str]], func: Callable) -> None:
    """Replace each element of *chars* before the first NUL with ``func(index, element)``."""
    end = _terminated_length(chars)
    for index, item in enumerate(chars[:end]):
        chars[index] = func(index, item)
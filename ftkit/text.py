"""Building new strings out of existing ones.

Splitting, joining, slicing, trimming and per-character mapping. Missing
arguments, which the C-style interface would answer with a null result,
raise ``TypeError`` here.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def _check_text(value: str, name: str = "text") -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def _check_index(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> List[str]:
    """Split *text* on the character *sep*, dropping empty pieces."""
    _check_text(text)
    _check_text(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strdup(text: str) -> str:
    """Return a copy of *text*."""
    _check_text(text)
    return "".join(text)


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    _check_text(s1, "s1")
    _check_text(s2, "s2")
    return s1 + s2


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*.

    A *start* past the end of *text* yields an empty string.
    """
    _check_text(text)
    _check_index(start, "start")
    _check_index(length, "length")
    if start > len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    _check_text(text)
    _check_text(charset, "charset")
    return text.strip(charset)


def striteri(chars: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` for each item of *chars*, in order.

    When *func* returns something other than ``None``, that value replaces
    the item in place.
    """
    if not callable(func):
        raise TypeError("func must be callable")
    for index, item in enumerate(list(chars)):
        replacement = func(index, item)
        if replacement is not None:
            chars[index] = replacement


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of *text*."""
    _check_text(text)
    if not callable(func):
        raise TypeError("func must be callable")
    pieces = []
    for index, char in enumerate(text):
        mapped = func(index, char)
        if not isinstance(mapped, str) or len(mapped) != 1:
            raise ValueError(f"func must return a single character, got {mapped!r}")
        pieces.append(mapped)
    return "".join(pieces)
"""Conversions between text and integers, and searching and comparing strings.

The search functions return indices into the string they were given
rather than pointers into it. ``None`` means nothing was found.

As with C strings, the end of a string counts as a terminating NUL.
Searching for ``"\\0"`` finds the position just past the last character.
Comparisons treat a shorter string as if it were padded with NULs.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterator, Optional, Union

CharLike = Union[int, str]
Text = Union[str, bytes, bytearray]

_INT_BITS = 32
_INT_MODULUS = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_SPACE_CODES = frozenset({9, 10, 11, 12, 13, 32})
_NUL = "\0"


def _wrap_int(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, two's-complement style."""
    value %= _INT_MODULUS
    return value - _INT_MODULUS if value > _INT_MAX else value


def _check_count(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")


def _as_char(ch: CharLike) -> str:
    """Return the single character that *ch* stands for.

    Integers are reduced to a byte value, as a C ``int`` cast to
    ``unsigned char`` would be.
    """
    if isinstance(ch, str):
        if len(ch) != 1:
            raise TypeError(f"expected a single character, got {ch!r}")
        return ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected an int or a single character, got {type(ch).__name__}")
    return chr(ch & 0xFF)


def _check_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")


def _codes(s: Text) -> Iterator[int]:
    if isinstance(s, str):
        return (ord(c) for c in s)
    if isinstance(s, (bytes, bytearray)):
        return iter(s)
    raise TypeError(f"expected a string or bytes, got {type(s).__name__}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace and a single ``+`` or ``-`` are accepted; parsing
    stops at the first non-digit. Returns 0 when no digits follow. The
    result wraps around like a 32-bit signed integer.
    """
    _check_text(text)
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _SPACE_CODES:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= text[pos] <= "9":
        pos += 1
    if pos == start:
        return 0
    return _wrap_int(sign * int(text[start:pos]))


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of *ch* in *text*.

    Looking for NUL yields ``len(text)``.
    """
    _check_text(text)
    target = _as_char(ch)
    if target == _NUL and _NUL not in text:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, ch: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of *ch* in *text*.

    Looking for NUL yields ``len(text)``.
    """
    _check_text(text)
    target = _as_char(ch)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strcmp(s1: Text, s2: Text) -> int:
    """Compare two strings.

    Returns the difference between the first pair of differing characters,
    or 0 when the strings are equal.
    """
    for a, b in zip_longest(_codes(s1), _codes(s2), fillvalue=0):
        if a != b:
            return a - b
    return 0


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most the first *n* characters of two strings."""
    _check_count(n)
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for count, (a, b) in enumerate(pairs):
        if count >= n:
            break
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Find *needle* lying wholly within the first *n* characters of *haystack*.

    Returns the index where it starts, 0 for an empty needle, or ``None``.
    """
    _check_text(haystack)
    _check_text(needle)
    _check_count(n)
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index
"""ASCII character classification and case conversion.

Every function accepts either an integer code point or a one-character
string. The classifiers return ``bool``. The case converters return a
value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_FIRST, _UPPER_LAST = ord("A"), ord("Z")
_LOWER_FIRST, _LOWER_LAST = ord("a"), ord("z")
_DIGIT_FIRST, _DIGIT_LAST = ord("0"), ord("9")
_PRINT_FIRST, _PRINT_LAST = 0x20, 0x7E
_ASCII_LAST = 0x7F
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the integer code point for *c*."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def _is_upper(code: int) -> bool:
    return _UPPER_FIRST <= code <= _UPPER_LAST


def _is_lower(code: int) -> bool:
    return _LOWER_FIRST <= code <= _LOWER_LAST


def is_alpha(c: CharLike) -> bool:
    """True if *c* is an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: CharLike) -> bool:
    """True if *c* is an ASCII decimal digit."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: CharLike) -> bool:
    """True if *c* is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True if *c* lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= _ASCII_LAST


def is_print(c: CharLike) -> bool:
    """True if *c* is a printable ASCII character, space included."""
    return _PRINT_FIRST <= _code(c) <= _PRINT_LAST


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _same_kind(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _same_kind(c, code)
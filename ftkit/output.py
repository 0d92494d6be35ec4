"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write the single character *c* to *stream* (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write the string *s* to *stream* (standard output by default)."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write *s* followed by a newline to *stream* (standard output by default)."""
    put_str(s, stream)
    _target(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of the integer *n* to *stream* (standard output by default)."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    _target(stream).write(str(n))
"""Byte-buffer operations on ``bytearray`` and other byte sequences.

Functions that modify a buffer need a writable one, such as a
``bytearray`` or a writable ``memoryview``. Spans that run past the end
of a buffer raise ``ValueError``.

C-style strings are byte buffers whose content ends at the first NUL
byte, or at the end of the buffer if there is none.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

_NUL = 0


def _check_count(n: int, name: str = "n") -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")


def _check_span(buf: ByteSource, n: int, what: str) -> None:
    _check_count(n)
    if n > len(buf):
        raise ValueError(f"{what} holds {len(buf)} bytes, cannot reach {n}")


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes(n)


def memset(buf: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Fill the first *n* bytes of *buf* with ``value & 0xFF`` and return *buf*."""
    _check_span(buf, n, "buffer")
    buf[:n] = bytes((value & 0xFF,)) * n
    return buf


def calloc(num: int, size: int) -> bytearray:
    """Return a zeroed buffer of *num* elements of *size* bytes each.

    Raises ``OverflowError`` when the total size cannot be represented.
    """
    _check_count(num, "num")
    _check_count(size, "size")
    if num != 0 and size > sys.maxsize // num:
        raise OverflowError(f"{num} elements of {size} bytes is too large")
    return bytearray(num * size)


def memchr(buf: ByteSource, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value & 0xFF`` in the first *n*.

    Returns ``None`` when no such byte is found.
    """
    _check_span(buf, n, "buffer")
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: WritableBuffer, src: ByteSource, n: int) -> WritableBuffer:
    """Copy the first *n* bytes of *src* into *dst* and return *dst*."""
    _check_span(src, n, "source")
    _check_span(dst, n, "destination")
    dst[:n] = src[:n]
    return dst


def memmove(dst: WritableBuffer, src: ByteSource, n: int) -> WritableBuffer:
    """Copy *n* bytes from *src* to *dst*, correct even when the two overlap."""
    _check_span(src, n, "source")
    _check_span(dst, n, "destination")
    dst[:n] = bytes(src[:n])
    return dst


def strlen(buf: Union[ByteSource, str]) -> int:
    """Return the number of bytes (or characters) before the first NUL."""
    if isinstance(buf, str):
        end = buf.find("\0")
    else:
        end = bytes(buf).find(_NUL)
    return len(buf) if end < 0 else end


def strlcpy(dst: WritableBuffer, src: ByteSource, size: int) -> int:
    """Copy the string in *src* into *dst*, writing at most *size* bytes.

    At most ``size - 1`` bytes are copied and the result is NUL-terminated
    when *size* is positive. Returns the length of the string in *src*.
    """
    _check_count(size, "size")
    src_len = strlen(src)
    if size > 0:
        count = min(src_len, size - 1)
        if count + 1 > len(dst):
            raise ValueError(
                f"destination holds {len(dst)} bytes, needs {count + 1}"
            )
        dst[:count] = bytes(src[:count])
        dst[count] = _NUL
    return src_len


def strlcat(dst: WritableBuffer, src: ByteSource, size: int) -> int:
    """Append the string in *src* to the string in *dst*, within *size* bytes.

    Returns the length of the string it tried to create: the initial
    length of *dst* plus that of *src*, or *size* plus the length of
    *src* when *size* does not exceed the initial length of *dst*.
    """
    _check_count(size, "size")
    dst_len = strlen(dst)
    src_len = strlen(src)
    if size > 0:
        count = max(0, min(src_len, size - 1 - dst_len))
        if count:
            end = dst_len + count
            if end >= len(dst):
                raise ValueError(
                    f"destination holds {len(dst)} bytes, needs {end + 1}"
                )
            dst[dst_len:end] = bytes(src[:count])
            dst[end] = _NUL
    if size <= dst_len:
        return size + src_len
    return dst_len + src_len
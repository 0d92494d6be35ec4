"""A small formatter with the conversions ``%c %s %d %i %u %x %X %p %%``.

Integers are reduced the way the matching C types would hold them:
``%d`` and ``%i`` as a signed 32-bit value, ``%u``, ``%x`` and ``%X``
as an unsigned 32-bit value, and ``%p`` as an unsigned 64-bit address.
No flags, widths or precisions are supported.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, Optional, Sequence, TextIO

from ftkit.output import put_str

_UINT_MASK = (1 << 32) - 1
_INT_MAX = (1 << 31) - 1
_PTR_MASK = (1 << 64) - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} needs an int, got {type(value).__name__}"
        )
    return value


def _signed(value: Any) -> str:
    n = _require_int(value, "d") & _UINT_MASK
    if n > _INT_MAX:
        n -= _UINT_MASK + 1
    return str(n)


def _unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT_MASK)


def _hex_lower(value: Any) -> str:
    return format(_require_int(value, "x") & _UINT_MASK, "x")


def _hex_upper(value: Any) -> str:
    return format(_require_int(value, "X") & _UINT_MASK, "X")


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = _require_int(value, "p") & _PTR_MASK
    if address == 0:
        return _NULL_POINTER
    return "0x" + format(address, "x")


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


_CONVERTERS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
    "p": _pointer,
}


def _render(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with a lone '%'")
        if conversion == "%":
            yield "%"
            continue
        converter = _CONVERTERS.get(conversion)
        if converter is None:
            raise ValueError(f"unknown conversion '%{conversion}'")
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        yield converter(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by the next argument.

    Extra arguments are ignored.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format like :func:`sprintf`, write to *stream* and return the length written.

    Nothing is written when the format or an argument is invalid.
    """
    text = sprintf(fmt, *args)
    put_str(text, stream)
    return len(text)
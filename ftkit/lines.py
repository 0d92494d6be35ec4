"""Reading a source one line at a time through a fixed-size read buffer.

A source is either an open file descriptor or an object with a
``read(size)`` method returning ``str`` or ``bytes``. Lines keep their
trailing newline; the last line may lack one.
"""

from __future__ import annotations

import os
from typing import Any, Callable, Dict, Iterator, Optional, Union

BUFFER_SIZE = 2

Chunk = Union[str, bytes]

_readers: Dict[int, "LineReader"] = {}


def _check_buffer_size(buffer_size: int) -> None:
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise TypeError(
            f"buffer_size must be an int, got {type(buffer_size).__name__}"
        )
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")


def _check_fd(fd: int) -> None:
    if fd < 0:
        raise ValueError(f"invalid file descriptor {fd}")


def _newline_index(chunk: Chunk) -> int:
    """Return the position of the first newline in *chunk*, or -1."""
    if isinstance(chunk, (bytes, bytearray)):
        return chunk.find(b"\n")
    return chunk.find("\n")


class LineReader:
    """Hands out the lines of *source*, reading *buffer_size* units at a time."""

    def __init__(self, source: Any, buffer_size: int = BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None
        self._read: Callable[[int], Chunk]
        if isinstance(source, int) and not isinstance(source, bool):
            _check_fd(source)
            fd = source
            self._read = lambda size: os.read(fd, size)
        elif callable(getattr(source, "read", None)):
            self._read = source.read
        else:
            raise TypeError(
                f"source must be a file descriptor or readable, got {type(source).__name__}"
            )

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or ``None`` once the source has nothing more.

        A later call reads the source again, so data that arrives after the
        end was reached is still returned. A read error discards anything
        buffered and is raised.
        """
        pending = self._pending
        while pending is None or _newline_index(pending) < 0:
            try:
                chunk = self._read(self._buffer_size)
            except BaseException:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        end = _newline_index(pending)
        if end < 0:
            self._pending = None
            return pending
        line, rest = pending[: end + 1], pending[end + 1 :]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[Chunk]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(fd: int, buffer_size: int = BUFFER_SIZE) -> Optional[bytes]:
    """Return the next line read from the file descriptor *fd*, or ``None`` at its end.

    Buffered data is kept per descriptor between calls and dropped once the
    end is reached or a read fails.
    """
    _check_buffer_size(buffer_size)
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an int, got {type(fd).__name__}")
    if fd < 0:
        _readers.pop(fd, None)
        _check_fd(fd)
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd, buffer_size)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except BaseException:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line
"""Reading a file descriptor one line at a time.

Bytes read past the end of a line are kept per descriptor, so lines can
be read from several descriptors in turn without mixing their data.
"""

from __future__ import annotations

import os
from collections.abc import Hashable, Iterator
from typing import Any

__all__ = ["BUFFER_SIZE", "MAX_FILES", "LineReader", "get_next_line"]

BUFFER_SIZE = 1
MAX_FILES = 700

_NEWLINE = b"\n"


class LineReader:
    """Reads lines from descriptors, ``buffer_size`` bytes per read call.

    A descriptor is an integer file descriptor, read with ``os.read``, or
    any object with a ``read(size)`` method returning bytes. Integer
    descriptors must lie below ``max_files``.
    """

    def __init__(
        self, buffer_size: int = BUFFER_SIZE, max_files: int = MAX_FILES
    ) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        if max_files <= 0:
            raise ValueError("max_files must be positive")
        self.buffer_size = buffer_size
        self.max_files = max_files
        self._pending: dict[Hashable, bytes] = {}

    def _key(self, fd: int | Any) -> Hashable:
        if isinstance(fd, int) and not isinstance(fd, bool):
            if fd < 0:
                raise ValueError(f"invalid file descriptor {fd}")
            if fd >= self.max_files:
                raise ValueError(
                    f"file descriptor {fd} is not below {self.max_files}"
                )
            return fd
        if not hasattr(fd, "read"):
            raise TypeError(f"cannot read from {type(fd).__name__}")
        return fd

    def _read(self, fd: int | Any) -> bytes:
        if isinstance(fd, int):
            return os.read(fd, self.buffer_size)
        return fd.read(self.buffer_size) or b""

    def read_line(self, fd: int | Any) -> bytes | None:
        """Return the next line, with its newline if it has one.

        Returns None once the descriptor has no more data.
        """
        key = self._key(fd)
        pending = self._pending.pop(key, b"")
        chunks = [pending]
        found = _NEWLINE in pending
        while not found:
            chunk = self._read(fd)
            if not chunk:
                break
            chunks.append(chunk)
            found = _NEWLINE in chunk
        data = b"".join(chunks)
        if not data:
            return None
        end = data.find(_NEWLINE)
        cut = len(data) if end < 0 else end + 1
        line, rest = data[:cut], data[cut:]
        if rest:
            self._pending[key] = rest
        return line

    def lines(self, fd: int | Any) -> Iterator[bytes]:
        """Yield every remaining line of ``fd``."""
        while (line := self.read_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int | Any) -> bytes | None:
    """Return the next line of ``fd`` using a shared reader, or None at the end."""
    return _default_reader.read_line(fd)
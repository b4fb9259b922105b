"""Writing characters, strings and numbers to a file descriptor or stream.

The target ``fd`` is either an integer file descriptor, written to with
UTF-8 encoded bytes, or any object with a ``write`` method taking text.
"""

from __future__ import annotations

import os
import sys
from typing import Any

from ftkit.chars import itoa

__all__ = ["put_char", "put_endl", "put_nbr", "put_str"]


def _write(fd: int | Any, text: str) -> None:
    """Write all of ``text`` to ``fd``."""
    if isinstance(fd, int) and not isinstance(fd, bool):
        data = text.encode("utf-8")
        while data:
            written = os.write(fd, data)
            data = data[written:]
    elif hasattr(fd, "write"):
        fd.write(text)
    else:
        raise TypeError(f"cannot write to {type(fd).__name__}")


def put_char(c: str, fd: int | Any = None) -> None:
    """Write one character. ``fd`` defaults to standard output."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(sys.stdout if fd is None else fd, c)


def put_str(text: str, fd: int | Any = None) -> None:
    """Write a string. ``fd`` defaults to standard output."""
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    _write(sys.stdout if fd is None else fd, text)


def put_endl(text: str, fd: int | Any = None) -> None:
    """Write a string followed by a newline."""
    put_str(text + "\n" if isinstance(text, str) else text, fd)


def put_nbr(n: int, fd: int | Any = None) -> None:
    """Write the decimal form of a 32-bit integer."""
    put_str(itoa(n), fd)
"""Formatted output with a small set of conversions.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. There are no flags, widths or precisions.
Integer arguments are reduced the way a C ``int``, ``unsigned int`` or
pointer would hold them.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

from ftkit.chars import itoa
from ftkit.output import put_str

__all__ = [
    "hex_lower",
    "hex_upper",
    "pointer_hex",
    "printf",
    "render",
    "unsigned_decimal",
]

_UINT32 = 2**32
_UINT64 = 2**64
_PIECE_PATTERN = re.compile(r"%(.?)|[^%]+", re.DOTALL)


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{conversion} expects an int, got {type(value).__name__}"
        )
    return value


def _as_int32(value: int) -> int:
    return (value + 2**31) % _UINT32 - 2**31


def pointer_hex(value: int | None) -> str:
    """Return a pointer value as ``0x`` followed by lower-case hex digits.

    None stands for the null pointer and gives ``0x0``.
    """
    if value is None:
        return "0x0"
    return "0x" + format(_require_int(value, "p") % _UINT64, "x")


def unsigned_decimal(value: int) -> str:
    """Return the decimal text of ``value`` held as a 32-bit unsigned int."""
    return str(_require_int(value, "u") % _UINT32)


def hex_lower(value: int) -> str:
    """Return ``value`` as a 32-bit unsigned int in lower-case hex."""
    return format(_require_int(value, "x") % _UINT32, "x")


def hex_upper(value: int) -> str:
    """Return ``value`` as a 32-bit unsigned int in upper-case hex."""
    return format(_require_int(value, "X") % _UINT32, "X")


def _signed(value: Any) -> str:
    return itoa(_as_int32(_require_int(value, "d")))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "d": _signed,
    "i": _signed,
    "c": _char,
    "s": _string,
    "p": pointer_hex,
    "u": unsigned_decimal,
    "x": hex_lower,
    "X": hex_upper,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    for match in _PIECE_PATTERN.finditer(fmt):
        piece = match.group(0)
        if not piece.startswith("%"):
            yield piece
            continue
        conversion = match.group(1)
        if conversion == "%":
            yield "%"
            continue
        handler = _CONVERSIONS.get(conversion)
        if handler is None:
            if not conversion:
                raise ValueError("format ends with an incomplete conversion")
            raise ValueError(f"unsupported conversion %{conversion}")
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for conversion %{conversion}"
            ) from None
        yield handler(value)


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Extra arguments are ignored; missing ones raise TypeError, and an
    unknown or incomplete conversion raises ValueError.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Any = None) -> int:
    """Write the rendered text and return the number of characters written.

    ``stream`` is a file descriptor or an object with a ``write`` method;
    it defaults to standard output.
    """
    text = render(fmt, *args)
    put_str(text, sys.stdout if stream is None else stream)
    return len(text)
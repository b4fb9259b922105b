"""Byte-buffer operations over bytes and bytearray objects.

Functions that write take a mutable buffer and return it. A length that
reaches past the end of a buffer raises ValueError instead of touching
memory that is not there.
"""

from __future__ import annotations

from typing import Union

__all__ = [
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
]

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_span(name: str, buffer: ReadableBuffer, offset: int, length: int) -> None:
    if length < 0:
        raise ValueError(f"{name}: length must not be negative, got {length}")
    if offset < 0:
        raise ValueError(f"{name}: offset must not be negative, got {offset}")
    if offset + length > len(buffer):
        raise ValueError(
            f"{name}: {length} bytes at offset {offset} reach past the end "
            f"of a buffer of {len(buffer)} bytes"
        )


def memset(buffer: WritableBuffer, value: int, length: int) -> WritableBuffer:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` as a byte."""
    _check_span("memset", buffer, 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: WritableBuffer, length: int) -> WritableBuffer:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def memcpy(dest: WritableBuffer, src: ReadableBuffer, length: int) -> WritableBuffer:
    """Copy the first ``length`` bytes of ``src`` into the start of ``dest``."""
    _check_span("memcpy", dest, 0, length)
    _check_span("memcpy", src, 0, length)
    dest[:length] = bytes(src[:length])
    return dest


def memmove(
    buffer: WritableBuffer, dest_offset: int, src_offset: int, length: int
) -> WritableBuffer:
    """Copy ``length`` bytes within ``buffer``; the two regions may overlap."""
    _check_span("memmove", buffer, dest_offset, length)
    _check_span("memmove", buffer, src_offset, length)
    if length:
        chunk = bytes(buffer[src_offset : src_offset + length])
        buffer[dest_offset : dest_offset + length] = chunk
    return buffer


def memchr(data: ReadableBuffer, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first
    ``length`` bytes of ``data``, or None when there is none."""
    _check_span("memchr", data, 0, length)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, length: int) -> int:
    """Compare the first ``length`` bytes of both buffers.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_span("memcmp", first, 0, length)
    _check_span("memcmp", second, 0, length)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: count and size must not be negative")
    return bytearray(count * size)
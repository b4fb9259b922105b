"""String searching, comparison, copying and splitting helpers.

Text is handled as ordinary Python strings. Positions are returned as
indexes, with None where nothing is found. The end of a string counts as
a terminator with code 0, so searching for code 0 finds ``len(text)``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

__all__ = [
    "split",
    "strchr",
    "strdup",
    "striteri",
    "strjoin",
    "strlcat",
    "strlcpy",
    "strlen",
    "strmapi",
    "strncmp",
    "strnstr",
    "strrchr",
    "strtrim",
    "substr",
]


def _char_code(c: int | str) -> int:
    """Return the integer code of a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _search_code(c: int | str) -> int:
    """Reduce a positive search value to a byte, as the character search does."""
    code = _char_code(c)
    return code % 256 if code > 0 else code


def _code_at(text: str, index: int) -> int:
    """Code of the character at ``index``, or 0 past the end."""
    return ord(text[index]) if index < len(text) else 0


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when the compared parts are equal, otherwise the difference
    between the codes of the first characters that differ. The end of a
    string compares as code 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for index in range(n):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into room for ``size`` characters including a terminator.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which tells whether the copy was cut short.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a total room of ``size`` characters.

    Returns the resulting text and the length the full concatenation
    would have had. When ``dest`` is already longer than ``size`` it is
    left as it is and the length reported is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if len(dest) > size:
        return dest, len(src) + size
    room = max(0, size - len(dest) - 1)
    return dest + src[:room], len(dest) + len(src)


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``n`` characters.

    An empty needle is found at index 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return index if index >= 0 else None


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first occurrence of ``c`` in ``text``.

    Searching for code 0 gives the index of the terminator, ``len(text)``.
    """
    code = _search_code(c)
    if code == 0:
        return len(text)
    return next((i for i, ch in enumerate(text) if ord(ch) == code), None)


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last occurrence of ``c`` in ``text``.

    Searching for code 0 gives the index of the terminator, ``len(text)``.
    """
    code = _search_code(c)
    if code == 0:
        return len(text)
    return next(
        (i for i in reversed(range(len(text))) if ord(text[i]) == code), None
    )


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if not text or length == 0 or start > len(text):
        return ""
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    separator = chr(_char_code(sep))
    return [piece for piece in text.split(separator) if piece]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    buffer: MutableSequence[Any], func: Callable[[int, Any], Any]
) -> MutableSequence[Any]:
    """Call ``func(index, item)`` on every item of a mutable sequence.

    When ``func`` returns something other than None, that value replaces
    the item in place. The buffer is returned.
    """
    if func is None:
        raise TypeError("func must be callable")
    for index, item in enumerate(list(buffer)):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement
    return buffer
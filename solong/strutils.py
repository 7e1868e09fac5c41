"""String helpers with the conventions of the classic C string routines.

Positions are returned as indices, with ``None`` where nothing is found.
Functions that would write into a caller's buffer return the new text instead.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence

_NUL = "\0"


def _single_char(c: str, what: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def split(s: str, sep: str) -> list[str]:
    """Split s on the character sep, dropping empty pieces."""
    _single_char(sep, "separator")
    return [piece for piece in s.split(sep) if piece]


def strchr(s: str, c: str) -> int | None:
    """Index of the first c in s; the NUL character is found at len(s)."""
    _single_char(c, "character")
    index = s.find(c)
    if index == -1:
        return len(s) if c == _NUL else None
    return index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last c in s; the NUL character is found at len(s)."""
    _single_char(c, "character")
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def strcmp(a: str, b: str) -> int:
    """Difference of the first pair of differing character codes, else 0."""
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; return -1, 0 or 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    left, right = a[:n], b[:n]
    return (left > right) - (left < right)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of little inside the first length characters of big, or None.

    An empty needle is always found at 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index == -1 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the text that fits and the full length of src. A size of 0 copies
    nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst in a buffer of size characters including the terminator.

    Returns the resulting text and the length the full result would have had,
    with the length of dst counted as at most size.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    result = dst
    if size > 0 and len(dst) < size - 1:
        result = dst + src[:size - 1 - len(dst)]
    return result, min(len(dst), size) + len(src)


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call f(index, character) on each element; a non-None result replaces it in place."""
    for index, ch in enumerate(chars):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement
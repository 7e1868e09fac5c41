"""Formatted output with the small conversion set used by the game."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from solong.chars import itoa

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _to_uint32(value: int) -> int:
    return value % 2**32


def _to_hex(value: int, digits: str) -> str:
    if value < 16:
        return digits[value]
    return _to_hex(value // 16, digits) + digits[value % 16]


def _convert(spec: str, arg: Any) -> str:
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise ValueError(f"%c expects a single character, got {arg!r}")
            return arg
        return chr(arg % 256)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        address = 0 if arg is None else arg % 2**64
        if address == 0:
            return "(nil)"
        return "0x" + _to_hex(address, _HEX_LOWER)
    if spec in ("d", "i"):
        return str(_to_int32(arg))
    if spec == "u":
        return str(_to_uint32(arg))
    if spec == "x":
        return _to_hex(_to_uint32(arg), _HEX_LOWER)
    return _to_hex(_to_uint32(arg), _HEX_UPPER)


_TAKES_ARGUMENT = frozenset("cspdiuxX")


def format_string(fmt: str, *args: Any) -> str:
    """Expand %c %s %p %d %i %u %x %X in fmt; any other character after % is written as is."""
    if fmt is None:
        raise ValueError("format string must not be None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec not in _TAKES_ARGUMENT:
            pieces.append(spec)
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(_convert(spec, arg))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to file (standard output by default) and return its length."""
    text = format_string(fmt, *args)
    (file if file is not None else sys.stdout).write(text)
    return len(text)


def put_char(c: str, file: TextIO | None = None) -> None:
    """Write one character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    (file if file is not None else sys.stdout).write(c)


def put_str(s: str | None, file: TextIO | None = None) -> None:
    """Write a string; None writes nothing."""
    if s is None:
        return
    (file if file is not None else sys.stdout).write(s)


def put_endl(s: str | None, file: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, file)
    put_char("\n", file)


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    put_str(itoa(n), file)
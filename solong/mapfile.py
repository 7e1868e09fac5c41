"""Reading map files into grids of rows."""

from __future__ import annotations

import io
import os
from typing import Iterable

from solong.linereader import LineReader


class MapError(Exception):
    """A map could not be read or is not a valid map."""


def _rows(lines: Iterable[str]) -> list[str]:
    text_parts = []
    for line in lines:
        if line.startswith("\n"):
            raise MapError("Invalid new line in map.")
        text_parts.append(line)
    return [row for row in "".join(text_parts).split("\n") if row]


def parse_map(text: str) -> list[str]:
    """Split map text into rows, rejecting any empty line."""
    return _rows(LineReader(io.StringIO(text, newline="")))


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file into rows, rejecting any empty line."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return _rows(LineReader(stream))
    except OSError as exc:
        raise MapError(f"Cannot open map {os.fspath(path)!r}: {exc.strerror}") from exc
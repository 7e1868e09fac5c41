"""Read a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator

BUFFER_SIZE = 42


class LineReader:
    """Return one line at a time from a stream, newline included.

    The stream needs only a ``read(n)`` method and may give bytes or text.
    Data read past the end of a line is kept for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Any = None

    def read_line(self) -> Any:
        """Return the next line, or None once the stream is exhausted."""
        parts = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                self._pending = chunk
            newline = b"\n" if isinstance(self._pending, (bytes, bytearray)) else "\n"
            index = self._pending.find(newline)
            if index != -1:
                parts.append(self._pending[:index + 1])
                self._pending = self._pending[index + 1:]
                break
            parts.append(self._pending)
            self._pending = self._pending[:0]
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[Any]:
        while (line := self.read_line()) is not None:
            yield line
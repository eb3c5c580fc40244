"""Line-at-a-time reading from a stream, in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, AnyStr, Generic

BUFFER_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Read lines one at a time from a binary or text stream.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. Data is read ``buffer_size`` units at a time and whatever
    follows the returned line is kept for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline_index(data: AnyStr) -> int:
        """Return the position of the first newline in data, or -1."""
        newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"
        return data.find(newline)  # type: ignore[arg-type]

    def _fill(self) -> None:
        """Read until the pending data holds a newline or the stream ends."""
        while True:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if chunk:
                if self._pending is None:
                    self._pending = chunk
                else:
                    self._pending = self._pending + chunk
            if not chunk or self._newline_index(chunk) != -1:
                return

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        if pending is None or self._newline_index(pending) == -1:
            self._fill()
            pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = self._newline_index(pending)
        if end == -1:
            line, rest = pending, pending[:0]
        else:
            line, rest = pending[: end + 1], pending[end + 1 :]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line
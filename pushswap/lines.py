"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    Data is pulled ``buffer_size`` units at a time; whatever follows the
    returned line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._remain: Optional[AnyStr] = None

    def _newline_index(self) -> int:
        if not self._remain:
            return -1
        newline = b"\n" if isinstance(self._remain, bytes) else "\n"
        return self._remain.find(newline)

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted.

        A read error discards any buffered data and propagates.
        """
        while self._newline_index() < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._remain = None
                raise
            if not chunk:
                break
            self._remain = chunk if self._remain is None else self._remain + chunk
        if not self._remain:
            self._remain = None
            return None
        index = self._newline_index()
        end = len(self._remain) if index < 0 else index + 1
        line, self._remain = self._remain[:end], self._remain[end:]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)
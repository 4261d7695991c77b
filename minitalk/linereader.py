"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, AnyStr, Generic, IO, Iterator, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Returns one line at a time from a text or binary stream.

    Lines keep their trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[Any], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                index = self._pending.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1:]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                line, self._pending = self._pending, None
                return line or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line
"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 5

Chunk = Union[str, bytes]


class LineReader:
    """Return successive lines of ``stream``, each with its newline.

    The stream is read ``buffer_size`` units at a time. The last line is
    returned without a newline if the stream does not end with one.
    Works with text and binary streams alike.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def readline(self) -> Optional[Chunk]:
        """Return the next line, or None when the stream is exhausted."""
        while True:
            pending = self._pending
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    line, rest = pending[: index + 1], pending[index + 1:]
                    self._pending = rest or None
                    return line
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                self._pending = None
                return pending or None
            self._pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def read_lines(stream: Any, buffer_size: int = BUFFER_SIZE) -> Iterator[Chunk]:
    """Iterate over the lines of ``stream``."""
    return iter(LineReader(stream, buffer_size))
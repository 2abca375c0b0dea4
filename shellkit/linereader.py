"""Read a file descriptor line by line through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 10


class LineReader:
    """Return one line at a time from *fd*, keeping the trailing newline."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> str | None:
        """Return the next line, or None once the input is exhausted.

        A read error discards any buffered data and propagates.
        """
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending = b""
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        cut = self._pending.find(b"\n")
        if cut < 0:
            line, self._pending = self._pending, b""
        else:
            line = self._pending[: cut + 1]
            self._pending = self._pending[cut + 1 :]
        return line.decode("utf-8", errors="surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(fd: int, buffer_size: int = BUFFER_SIZE) -> Iterator[str]:
    """Yield every line readable from *fd*."""
    yield from LineReader(fd, buffer_size)
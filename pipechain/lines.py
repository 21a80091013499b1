"""Reading a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 10
MAX_FD = 4096


class LineReader:
    """Read newline-terminated lines from a raw file descriptor.

    Data is pulled with reads of at most ``buffer_size`` bytes until a full
    line is available. Each line keeps its trailing newline; the final line
    of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0 or fd > MAX_FD:
            raise ValueError(f"file descriptor out of range: {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                return
            if not chunk:
                return
            self._pending += chunk

    def readline(self) -> Optional[str]:
        """The next line, or None once the input is exhausted."""
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        end = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line
"""Reading a file descriptor one line at a time in fixed-size chunks."""

from __future__ import annotations

import os
from collections.abc import Iterator

DEFAULT_BUFFER_SIZE = 5


class LineReader:
    """Return the lines of a file descriptor, newline included, as bytes.

    Data is read ``buffer_size`` bytes at a time and kept between calls.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> bytes | None:
        """Next line, ending in a newline unless it is the last; None at end.

        A failed read discards any data kept from earlier calls and raises
        OSError.
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
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line, self._pending = self._pending[:cut], self._pending[cut:]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line
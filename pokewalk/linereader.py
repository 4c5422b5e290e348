"""Reading text one line at a time from a stream, in fixed-size chunks."""

from __future__ import annotations

import os
from typing import Iterator, List, Optional, TextIO, Union

DEFAULT_BUFFER_SIZE = 1


class LineReader:
    """Pull lines from a text stream, reading at most ``buffer_size`` characters at a time.

    Each line keeps its trailing newline; the final line of a stream that
    does not end with a newline is returned as it is.
    """

    def __init__(self, stream: TextIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        chunks = [self._pending]
        found = "\n" in self._pending
        while not found:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            chunks.append(chunk)
            found = "\n" in chunk
        pending = "".join(chunks)
        if not pending:
            self._pending = ""
            return None
        end = pending.find("\n")
        if end == -1:
            self._pending = ""
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(path: Union[str, "os.PathLike[str]"]) -> List[str]:
    """Read every line of the file at ``path``, newlines kept."""
    with open(path, "r", encoding="latin-1", newline="") as stream:
        return list(LineReader(stream))
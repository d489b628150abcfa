"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, Iterator

BUFFER_SIZE = 128


class LineReader:
    """Split the text read from ``stream`` into lines.

    Data is pulled ``buffer_size`` characters at a time. Any text left over
    after a newline is kept for the next call.
    """

    def __init__(self, stream: IO[str], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending = ""
        self._eof = False

    @property
    def at_eof(self) -> bool:
        """True once the stream is exhausted and nothing is pending."""
        return self._eof and not self._pending

    def read_line(self) -> str | None:
        """Return the next line without its newline.

        Text after the last newline is returned as a final line. Returns None
        when the input holds nothing more. Read errors propagate.
        """
        parts: list[str] = []
        while True:
            if not self._pending and not self._eof:
                chunk = self.stream.read(self.buffer_size)
                if not chunk:
                    self._eof = True
                else:
                    self._pending = chunk
            if self._pending:
                head, newline, rest = self._pending.partition("\n")
                parts.append(head)
                self._pending = rest
                if newline:
                    return "".join(parts)
                continue
            if self._eof:
                line = "".join(parts)
                return line if line else None

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line
"""Character-level editing of an input line on a terminal."""

from __future__ import annotations

import sys
from typing import TextIO

from minishell.state import BUFFER_SIZE

CURSOR_LEFT = "\b"
CURSOR_RIGHT = "\x1b[C"
CURSOR_TO_START = "\r"
CLEAR_TO_EOL = "\x1b[K"
PROMPT = ">> "


class LineEditor:
    """A bounded line buffer echoed to a terminal stream."""

    def __init__(self, out: TextIO | None = None, max_size: int = BUFFER_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.out = sys.stdout if out is None else out
        self.max_size = max_size
        self._buffer: list[str] = []

    def _emit(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def print_prompt(self) -> None:
        """Write the input prompt."""
        self._emit(PROMPT)

    def insert_char(self, char: str) -> None:
        """Append ``char`` and echo it, unless the buffer is full."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        if len(self._buffer) >= self.max_size - 1:
            return
        self._emit(char)
        self._buffer.append(char)

    def delete_char(self) -> None:
        """Remove the last character and redraw the buffer."""
        if not self._buffer:
            return
        self._buffer.pop()
        self.move_cursor_left()
        self.clear_line()
        self._emit(self.text())

    def move_cursor_left(self) -> None:
        self._emit(CURSOR_LEFT)

    def move_cursor_right(self) -> None:
        self._emit(CURSOR_RIGHT)

    def move_cursor_to_start(self) -> None:
        self._emit(CURSOR_TO_START)

    def clear_line(self) -> None:
        self._emit(CLEAR_TO_EOL)

    def text(self) -> str:
        """The characters currently in the buffer."""
        return "".join(self._buffer)
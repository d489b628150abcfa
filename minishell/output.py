"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
from typing import TextIO


def putchar_fd(char: str, stream: TextIO) -> None:
    """Write the single character ``char`` to ``stream``."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    stream.write(char)


def putstr_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is not None:
        stream.write(text)


def putendl_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is not None:
        stream.write(text)
        stream.write("\n")


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write the decimal text of the integer ``number`` to ``stream``."""
    value = operator.index(number)
    if value < 0:
        stream.write("-")
    stream.write(str(abs(value)))
"""Prompting for and reading one command line."""

from __future__ import annotations

import sys
from typing import TextIO

from minishell.paths import is_valid_input
from minishell.state import BUFFER_SIZE, ShellState


def read_command(
    state: ShellState,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> str | None:
    """Show the prompt and read a line.

    Returns the line without its final character, after recording it in the
    history, or None when it holds only spaces. Raises EOFError at end of input.
    """
    source = sys.stdin if stream is None else stream
    sink = sys.stdout if out is None else out
    sink.write(state.prompt_text())
    sink.flush()

    data = source.readline(BUFFER_SIZE)
    if not data:
        raise EOFError("end of input")
    text = data[:-1]
    if not is_valid_input(text):
        return None
    state.history.add(text)
    return text
"""Session state of the shell and its prompt."""

from __future__ import annotations

import os
import socket
from dataclasses import dataclass, field
from typing import Mapping

from minishell.history import History
from minishell.paths import split_path

RED = "\033[31;1m"
GREEN = "\033[0;32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
RESET = "\x1b[0m"

BUFFER_SIZE = 128


def _basename(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped:
        return "/" if path else "."
    return os.path.basename(stripped)


@dataclass
class ShellState:
    """Everything the shell keeps between command lines."""

    cwd: str
    user: str | None
    hostname: str
    bin_paths: list[str]
    history: History = field(default_factory=History)
    exit_status: int = 0

    def prompt_text(self) -> str:
        """Return the coloured ``user@host:dir$ `` prompt."""
        user = self.user if self.user is not None else "(null)"
        return (
            f"{GREEN}{user}@{self.hostname}{RESET}:"
            f"{RED}{self.cwd}{RESET}$ "
        )

    def refresh_cwd(self) -> None:
        """Update ``cwd`` to the base name of the working directory."""
        self.cwd = _basename(os.getcwd())


def init_shell(environ: Mapping[str, str] | None = None) -> ShellState:
    """Build the initial shell state from the environment."""
    env = os.environ if environ is None else environ
    return ShellState(
        cwd=_basename(os.getcwd()),
        user=env.get("USER"),
        hostname=socket.gethostname()[: BUFFER_SIZE - 1],
        bin_paths=split_path(env.get("PATH")),
    )
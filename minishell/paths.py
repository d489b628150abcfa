"""Lookup of executables in search directories and input checks."""

from __future__ import annotations

import os
from typing import Iterable


def split_path(value: str | None) -> list[str]:
    """Split a ``PATH``-style value on ':' dropping empty fields."""
    if value is None:
        return []
    return [part for part in value.split(":") if part]


def find_bin_path(cmd: str | None, paths: Iterable[str]) -> str | None:
    """Return ``dir/cmd`` for the first directory that lists ``cmd``."""
    if cmd is None:
        return None
    for directory in paths:
        try:
            with os.scandir(directory) as entries:
                if any(entry.name == cmd for entry in entries):
                    return f"{directory}/{cmd}"
        except OSError:
            continue
    return None


def is_valid_input(text: str | None) -> bool:
    """True when ``text`` holds anything other than spaces."""
    if text is None:
        return False
    return any(char != " " for char in text)
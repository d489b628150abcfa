"""Command history of an interactive session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded command line with its sequence number."""

    number: int
    command: str


class History:
    """Ordered record of entered command lines, numbered from 1."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def add(self, command: str) -> HistoryEntry:
        """Record ``command`` and return the new entry."""
        number = self._entries[-1].number + 1 if self._entries else 1
        entry = HistoryEntry(number, command)
        self._entries.append(entry)
        return entry

    @property
    def last(self) -> HistoryEntry | None:
        """The most recent entry, or None when empty."""
        return self._entries[-1] if self._entries else None

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
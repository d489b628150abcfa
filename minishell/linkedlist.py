"""A singly ordered list of arbitrary contents."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable, Iterator


class LinkedList:
    """An ordered sequence that grows at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def add_front(self, content: Any) -> None:
        """Put ``content`` at the start of the list."""
        self._items.appendleft(content)

    def add_back(self, content: Any) -> None:
        """Put ``content`` at the end of the list."""
        self._items.append(content)

    def last(self) -> Any:
        """Return the last content, or None when the list is empty."""
        return self._items[-1] if self._items else None

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, handing each content to ``delete`` in order."""
        while self._items:
            content = self._items.popleft()
            if delete is not None:
                delete(content)

    def iterate(self, func: Callable[[Any], Any] | None) -> None:
        """Call ``func`` on every content in order."""
        if func is None:
            return
        for content in self._items:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func`` applied to every content."""
        return LinkedList(func(content) for content in self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({list(self._items)!r})"
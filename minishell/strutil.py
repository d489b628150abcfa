"""String helpers with C string-library semantics on Python strings.

Positions are returned as indexes into the searched string, or None when
nothing is found. The string end acts as a terminating NUL character.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable

_NUL = "\0"


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def _count(n: int) -> int:
    if n < 0:
        raise ValueError("count must not be negative")
    return n


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    _single(sep)
    if sep == _NUL:
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def split_del(text: str, delims: str) -> list[str]:
    """Split ``text`` on any character of ``delims``, dropping empty words."""
    words: list[str] = []
    current: list[str] = []
    for char in text:
        if char in delims:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0:
        raise ValueError("start must not be negative")
    _count(length)
    return text[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Return the concatenation of ``first`` and ``second``."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters."""
    _count(length)
    if not needle:
        return 0
    found = haystack.find(needle, 0, length)
    return found if found >= 0 else None


def strstr(haystack: str, needle: str) -> int | None:
    """Find the first occurrence of ``needle`` in ``haystack``."""
    if not needle:
        return 0
    found = haystack.find(needle)
    return found if found >= 0 else None


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; NUL matches the string end."""
    _single(char)
    found = text.find(char)
    if found >= 0:
        return found
    return len(text) if char == _NUL else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; NUL matches the string end.

    The backward scan gives up at the last occurrence of the string's first
    character, so an earlier ``char`` before it is not reported.
    """
    _single(char)
    terminated = text + _NUL
    first = terminated[0]
    for index in range(len(text), -1, -1):
        current = terminated[index]
        if current == char:
            return index
        if current == first:
            return None
    return None


def strcmp(first: str, second: str) -> int:
    """Difference of the first differing characters, or 0 when equal."""
    for left, right in zip_longest(first, second, fillvalue=_NUL):
        if left != right:
            return ord(left) - ord(right)
        if left == _NUL:
            break
    return 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most the first ``n`` characters of the two strings."""
    _count(n)
    if n == 0:
        return 0
    return strcmp(first[:n], second[:n])


def strnrcmp(first: str, second: str, n: int) -> int:
    """Compare at most the last ``n`` characters, working from the end."""
    _count(n)
    return strncmp(first[::-1], second[::-1], n)
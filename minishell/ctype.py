"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def isalnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isalpha(c: int | str) -> bool:
    """True for ASCII letters."""
    return isupper(c) or islower(c)


def isascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def isblank(c: int | str) -> bool:
    """True for space and tab."""
    return _code(c) in (0x20, 0x09)


def iscntrl(c: int | str) -> bool:
    """True for control codes 0-31 and 127."""
    code = _code(c)
    return 0 <= code <= 31 or code == 127


def isdigit(c: int | str) -> bool:
    """True for '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def isgraph(c: int | str) -> bool:
    """True for printing characters other than space."""
    return 33 <= _code(c) <= 126


def islower(c: int | str) -> bool:
    """True for 'a' to 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def isprint(c: int | str) -> bool:
    """True for printing characters including space."""
    return 32 <= _code(c) <= 126


def ispunct(c: int | str) -> bool:
    """True for printing characters that are neither space nor alphanumeric."""
    code = _code(c)
    return (
        33 <= code <= 47 or 58 <= code <= 64 or 91 <= code <= 96 or 123 <= code <= 126
    )


def isspace(c: int | str) -> bool:
    """True for space, newline, tab, vertical tab, form feed and return."""
    return _code(c) in (0x20, 0x0A, 0x09, 0x0B, 0x0C, 0x0D)


def isupper(c: int | str) -> bool:
    """True for 'A' to 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def isxdigit(c: int | str) -> bool:
    """True for decimal digits and 'a'-'f' in either case."""
    code = _code(c)
    return isdigit(code) or ord("a") <= code <= ord("f") or ord("A") <= code <= ord("F")


_CASE_SHIFT = ord("a") - ord("A")


@overload
def tolower(c: str) -> str: ...
@overload
def tolower(c: int) -> int: ...
def tolower(c):
    """Map an upper-case ASCII letter to lower case; other values unchanged."""
    code = _code(c)
    if isupper(code):
        code += _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code


@overload
def toupper(c: str) -> str: ...
@overload
def toupper(c: int) -> int: ...
def toupper(c):
    """Map a lower-case ASCII letter to upper case; other values unchanged."""
    code = _code(c)
    if islower(code):
        code -= _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code
"""Conversions between numbers and their decimal text."""

from __future__ import annotations

import re

DIGITS = "0123456789"
HEXALOW = "0123456789abcdef"
HEXAUPP = "0123456789ABCDEF"
OCTAL = "01234567"

_ULL_MODULUS = 1 << 64
_INT_MODULUS = 1 << 32
_ATOI_RE = re.compile(r"[ \n\t\v\f\r]*([+-]?)([0-9]*)")
_ATOF_RE = re.compile(r"([+-]?)([0-9]*)(?:\.([0-9]*))?")


def ullitoa_base(n: int, base: str) -> str:
    """Write ``n`` as an unsigned 64-bit value using the digits in ``base``."""
    radix = len(base)
    if radix < 2:
        raise ValueError("base needs at least two digits")
    value = n % _ULL_MODULUS
    if value == 0:
        return base[0]
    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(base[remainder])
    return "".join(reversed(digits))


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(int(n))


def atoi(text: str) -> int:
    """Parse a leading integer like C ``atoi``, wrapping to 32 bits."""
    match = _ATOI_RE.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value + _INT_MODULUS // 2) % _INT_MODULUS - _INT_MODULUS // 2


def atof(text: str) -> float:
    """Parse a leading ``[+-]digits[.digits]`` number; no whitespace skipping."""
    match = _ATOF_RE.match(text)
    sign = -1.0 if match.group(1) == "-" else 1.0
    int_part = 0.0
    for digit in match.group(2):
        int_part = int_part * 10 + int(digit)
    dec_part = 0.0
    for position, digit in enumerate(match.group(3) or "", start=1):
        dec_part += 10.0 ** -position * int(digit)
    return sign * (int_part + dec_part)


def _digit_count(value: int) -> int:
    return len(str(value)) if value else 0


def _decimals(dec_int: int, dec_int_size: int, dec_len: int) -> str:
    zeros = max(dec_len + 1 - dec_int_size, 0)
    text = "." + "0" * zeros + ullitoa_base(dec_int, DIGITS)
    diff = len(text) - 1 - dec_len
    if diff > 0:
        text = "." + text[diff + 1 : diff + 1 + dec_len + 1]
    return text


def ftoa_rnd(n: float, dec_len: int, rnd: int) -> str:
    """Format ``|n|`` with ``dec_len`` decimals, rounding up at digit ``rnd``."""
    value = abs(float(n))
    int_part = int(value)
    dec_part = value - int_part

    dec_int_size = _digit_count(int(dec_part * 10.0**dec_len))
    dec_int = int(dec_part * 10.0 ** (dec_len + 1))
    if dec_int % 10 >= rnd:
        dec_int += 10
    size = _digit_count(dec_int)
    first = int(dec_part * 10)
    if (dec_len == 0 and first >= rnd) or (size > dec_int_size + 1 and first + 1 >= rnd):
        dec_int = 0
        int_part += 1
    dec_int //= 10
    if dec_int == 0:
        dec_int_size = 2

    decimals = _decimals(dec_int, dec_int_size, dec_len) if dec_len > 0 else ""
    return ullitoa_base(int_part, DIGITS) + decimals
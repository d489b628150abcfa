"""printf-style formatting with C conversion rules."""

from __future__ import annotations

import math
import operator
import sys
from dataclasses import dataclass
from typing import Any, Iterable

from minishell.numconv import DIGITS, HEXALOW, HEXAUPP, OCTAL, ftoa_rnd, ullitoa_base

FLAGS = "-+#0 "
ALL_FL = "-+#0 *.0123456789lh"
FSPECS = "cspdiuxX%onf"

_MAX_SET = 19


class FormatError(ValueError):
    """Raised for an invalid format string or unusable arguments.

    ``partial`` holds the text produced before the error was found.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


@dataclass
class _Spec:
    conversion: str
    minus: bool = False
    plus: bool = False
    space: bool = False
    hash: bool = False
    pad: str = " "
    width: int = 0
    point: bool = False
    precision: int = 0
    length: int = 0
    sign: str = ""
    print_n0: bool = False
    ulli: int = 0
    text: str = ""
    strlen: int = 0


class _Output:
    def __init__(self) -> None:
        self.parts: list[str] = []
        self.count = 0

    def write(self, text: str) -> None:
        if text:
            self.parts.append(text)
            self.count += len(text)

    def text(self) -> str:
        return "".join(self.parts)


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _as_int(value: Any) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise FormatError(f"expected an integer, got {type(value).__name__}") from None


class _Arguments:
    def __init__(self, args: Iterable[Any]) -> None:
        self._it = iter(args)

    def next(self) -> Any:
        try:
            return next(self._it)
        except StopIteration:
            raise FormatError("not enough arguments for format string") from None

    def next_int(self, bits: int = 32, signed: bool = True) -> int:
        return _wrap(_as_int(self.next()), bits, signed)


def _bits(length: int) -> int:
    return 32 if length <= 0 else 64


def _treat_star(spec: _Spec, args: _Arguments) -> None:
    value = args.next_int()
    if not spec.point:
        if value >= 0:
            spec.width = value
        else:
            spec.width = -value
            spec.pad = " "
            spec.minus = True
    elif value >= 0:
        spec.precision = value
    else:
        spec.point = False


def _treat_flags(spec: _Spec, flagset: str, args: _Arguments) -> None:
    size = len(flagset)
    j = 0
    while j < size and flagset[j] in FLAGS:
        if flagset[j] == "0":
            spec.pad = "0"
        j += 1
    if j < size and flagset[j] == "*":
        _treat_star(spec, args)
        j += 1
    while j < size and flagset[j] in DIGITS:
        spec.width = 10 * spec.width + int(flagset[j])
        j += 1
    if j < size and flagset[j] == ".":
        spec.point = True
        j += 1
        if j < size and flagset[j] == "*":
            _treat_star(spec, args)
            j += 1
        while j < size and flagset[j] in DIGITS:
            spec.precision = 10 * spec.precision + int(flagset[j])
            j += 1
    while j < size:
        char = flagset[j]
        j += 1
        if char != "l":
            break
        spec.length += 1
    while j < size:
        char = flagset[j]
        j += 1
        if char != "h":
            break
        spec.length -= 1


def _padding(out: _Output, spec: _Spec) -> None:
    out.write(spec.pad * max(spec.width - spec.precision, 0))


def _print_pct(out: _Output, spec: _Spec) -> None:
    if spec.minus:
        spec.pad = " "
    spec.precision = 1
    if not spec.minus:
        _padding(out, spec)
    out.write("%")
    if spec.minus:
        _padding(out, spec)


def _print_char(out: _Output, spec: _Spec, value: Any) -> None:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        char = value
    else:
        char = chr(_as_int(value) & 0xFF)
    spec.pad = " "
    spec.precision = 1
    if not spec.minus:
        _padding(out, spec)
    out.write(char)
    if spec.minus:
        _padding(out, spec)


def _print_string(out: _Output, spec: _Spec, value: Any) -> None:
    text = "(null)" if value is None else str(value)
    spec.pad = " "
    if (spec.point and spec.precision > len(text)) or not spec.point:
        spec.precision = len(text)
    if not spec.minus:
        _padding(out, spec)
    out.write(text[: spec.precision])
    if spec.minus:
        _padding(out, spec)


def _shows_sign(spec: _Spec) -> bool:
    return (
        spec.sign == "-"
        or (spec.plus and spec.sign == "+")
        or (spec.space and not spec.plus and spec.sign == "+")
    )


def _print_width(out: _Output, spec: _Spec) -> None:
    width = spec.width - 1 if _shows_sign(spec) else spec.width
    precision = max(spec.precision, spec.strlen)
    pad = spec.pad
    if (
        pad == "0"
        and (spec.minus or spec.point)
        and not (spec.conversion == "f" and not spec.minus)
    ):
        pad = " "
    out.write(pad * max(width - precision, 0))


def _print_zeros(out: _Output, spec: _Spec) -> None:
    if (spec.conversion == "x" and spec.hash) or spec.conversion == "p":
        out.write("0x")
    if spec.conversion == "X" and spec.hash:
        out.write("0X")
    if spec.conversion == "o" and spec.hash:
        out.write("0")
    if not spec.minus and spec.pad == "0":
        _print_width(out, spec)
    if spec.point:
        out.write("0" * max(spec.precision - spec.strlen, 0))


def _suppressed(spec: _Spec) -> bool:
    return spec.ulli == 0 and spec.point and spec.precision == 0


def _print_flags(out: _Output, spec: _Spec) -> None:
    spec.strlen = len(spec.text)
    if _suppressed(spec) and not spec.print_n0:
        spec.width += 1
    if (spec.conversion in "xX" and spec.hash) or spec.conversion == "p":
        spec.width -= 2
    if spec.conversion == "o" and spec.hash:
        spec.width -= 1
        if spec.point:
            spec.precision -= 1
    if spec.point and spec.conversion != "f":
        spec.pad = " "
    if not spec.minus and spec.pad == " ":
        _print_width(out, spec)
    if spec.sign == "-" or (spec.plus and spec.sign == "+"):
        out.write(spec.sign)
    if spec.space and not spec.plus and spec.sign == "+":
        out.write(" ")
    _print_zeros(out, spec)
    if not _suppressed(spec) or spec.print_n0:
        out.write(spec.text)
    if spec.minus:
        _print_width(out, spec)


def _pointer_value(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return _wrap(value, 64, False)
    return id(value)


def _print_pointer(out: _Output, spec: _Spec, value: Any) -> None:
    spec.sign = "u"
    spec.print_n0 = False
    spec.ulli = _pointer_value(value)
    spec.text = ullitoa_base(spec.ulli, HEXALOW)
    _print_flags(out, spec)


def _print_decimal(out: _Output, spec: _Spec, args: _Arguments) -> None:
    bits = _bits(spec.length)
    if spec.conversion in "id":
        value = args.next_int(bits, signed=True)
        spec.sign = "+" if value >= 0 else "-"
        spec.ulli = abs(value)
    else:
        spec.ulli = args.next_int(bits, signed=False)
        spec.sign = "u"
    spec.print_n0 = False
    spec.text = ullitoa_base(spec.ulli, DIGITS)
    _print_flags(out, spec)


def _print_hex(out: _Output, spec: _Spec, args: _Arguments) -> None:
    spec.ulli = args.next_int(_bits(spec.length), signed=False)
    spec.sign = "u"
    spec.print_n0 = False
    if spec.ulli == 0:
        spec.hash = False
    spec.text = ullitoa_base(spec.ulli, HEXALOW if spec.conversion == "x" else HEXAUPP)
    _print_flags(out, spec)


def _print_octal(out: _Output, spec: _Spec, args: _Arguments) -> None:
    spec.ulli = args.next_int(_bits(spec.length), signed=False)
    spec.sign = "u"
    spec.print_n0 = not (spec.point and spec.precision == 0 and not spec.hash)
    if spec.ulli == 0:
        spec.hash = False
    spec.text = ullitoa_base(spec.ulli, OCTAL)
    _print_flags(out, spec)


def _print_float(out: _Output, spec: _Spec, value: Any) -> None:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise FormatError(f"expected a number, got {type(value).__name__}") from None
    if not math.isfinite(number):
        raise FormatError("cannot format a non-finite number")
    spec.sign = "-" if math.copysign(1.0, number) < 0 else "+"
    spec.print_n0 = True
    if not spec.point:
        spec.precision = 6
    magnitude = abs(number)
    spec.ulli = int(magnitude)
    spec.text = ftoa_rnd(magnitude, spec.precision, 5)
    if spec.hash and spec.point and spec.precision == 0:
        spec.text += "."
    _print_flags(out, spec)


def _convert(out: _Output, spec: _Spec, args: _Arguments) -> None:
    match spec.conversion:
        case "%":
            _print_pct(out, spec)
        case "c":
            _print_char(out, spec, args.next())
        case "s":
            _print_string(out, spec, args.next())
        case "p":
            _print_pointer(out, spec, args.next())
        case "i" | "d" | "u":
            _print_decimal(out, spec, args)
        case "x" | "X":
            _print_hex(out, spec, args)
        case "o":
            _print_octal(out, spec, args)
        case "n":
            target = args.next()
            if not callable(target):
                raise FormatError("%n expects a callable that receives the count")
            target(out.count)
        case "f":
            _print_float(out, spec, args.next())


def _render(fmt: str, args: Iterable[Any], out: _Output) -> None:
    arguments = _Arguments(args)
    size = len(fmt)
    i = 0
    while i < size:
        percent = fmt.find("%", i)
        if percent < 0:
            out.write(fmt[i:])
            return
        out.write(fmt[i:percent])
        start = i = percent + 1
        while i < size and fmt[i] in ALL_FL and i - start < _MAX_SET:
            i += 1
        if i >= size or fmt[i] not in FSPECS:
            raise FormatError(f"invalid conversion specification at position {percent}")
        flagset = fmt[start:i]
        spec = _Spec(
            conversion=fmt[i],
            minus="-" in flagset,
            plus="+" in flagset,
            space=" " in flagset,
            hash="#" in flagset,
        )
        i += 1
        _treat_flags(spec, flagset, arguments)
        _convert(out, spec, arguments)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    out = _Output()
    try:
        _render(fmt, args, out)
    except FormatError as exc:
        exc.partial = out.text()
        raise
    return out.text()


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length.

    On a format error the text produced so far is written before raising.
    """
    try:
        text = format_printf(fmt, *args)
    except FormatError as exc:
        sys.stdout.write(exc.partial)
        sys.stdout.flush()
        raise
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
"""A printf-style formatter supporting the c, s, p, d, i, u, x, X and % conversions.

Supported flags are '-', '+', '#', '0', a width and a precision. How they
combine follows this formatter's own rules, which differ from C's printf in
several corner cases: the '+' flag only narrows the padding, '#' shifts the
digits, and a left-justified negative number carries its sign after the
digits.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterator

from printfmt.chars import atoi, is_digit, itoa
from printfmt.output import put_str

_CONVERSIONS = "cspdiuxX%"
_SPEC = re.compile(r"%(?P<flags>[^cspdiuxX%]*)(?P<symbol>[cspdiuxX%]|\Z)")
_WIDTH_PRECISION = re.compile(r"[-+ ]*([0-9]*)(?:\.([0-9]+))?")

_UINT_MASK = (1 << 32) - 1
_POINTER_MASK = (1 << 64) - 1

_DEMO_CASES = (
    ("%07i", -54),
    ("%08.5i", 34),
    ("%010.5i", -216),
    ("%08.5i", 0),
    ("%08.3i", 8375),
    ("%08.3i", -8473),
    ("%.0i", 0),
)


@dataclass
class Flags:
    """State gathered from one conversion specification."""

    spec: str = ""
    symbol: str = ""
    plus: bool = False
    minus: bool = False
    digit: bool = False
    point: bool = False
    hash: int = 0
    negative: int = 0
    pad: str = " "
    width: int = 0
    prec: int = 0
    diff: int = 0
    null: bool = False
    exist: bool = False
    cursor: int = 0

    def _note(self, c: str) -> None:
        """Record one character found between '%' and the conversion."""
        recognised = True
        if c == "+":
            self.plus = True
        elif c == "-":
            self.minus = True
        elif c == "#":
            self.hash = 1
        elif is_digit(c):
            self.digit = True
        elif c == ".":
            self.point = True
        else:
            recognised = False
        # Only the last character decides whether flags apply at all.
        self.exist = recognised and not (self.minus and not self.digit)
        self.prec = -1

    def _read_width_precision(self) -> None:
        """Read padding character, width and precision from the spec."""
        self.pad = "0" if self.spec.startswith("0") and not self.point else " "
        match = _WIDTH_PRECISION.match(self.spec)
        width, precision = match.groups()
        if width:
            self.width = atoi(width)
        if precision:
            self.prec = atoi(precision)
        self.cursor = match.end()


def _int32(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"an integer is required, got {value!r}")
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _uint32(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"an integer is required, got {value!r}")
    return value & _UINT_MASK


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c requires a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c requires a character or an integer, got {value!r}")


def _take(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _new_length(text: str, flags: Flags) -> int:
    length = len(text)
    if text.startswith("0") and flags.prec == 0:
        return 0
    if flags.symbol == "s" and flags.point:
        if flags.spec[flags.cursor:flags.cursor + 1] == ".":
            return 0
        if flags.prec < length and not flags.null:
            length = flags.prec
        if flags.null and flags.prec < length:
            length = 0
    elif flags.point and flags.digit:
        flags.diff = flags.prec - length if flags.prec >= length else 0
        length += flags.diff
    return max(length, 0)


def _build_body(text: str, flags: Flags) -> str:
    sign = 1 if flags.negative == 2 else 0
    length = _new_length(text, flags) + sign
    prefix = "0x" if flags.hash and flags.symbol != "s" else ""
    buffer = list(prefix + "0" * length)
    offset = flags.hash + max(flags.diff, 0) + sign
    # The text's terminator is copied too when the loop runs past it.
    for index, ch in enumerate((text + "\0")[:length]):
        position = index + offset
        if position >= len(buffer):
            break
        buffer[position] = ch
    if sign:
        buffer[0] = "-"
    return "".join(buffer).split("\0", 1)[0]


def _padding(flags: Flags, size: int) -> str:
    sign = ""
    if flags.negative == 1:
        if size:
            sign = "-"
        size -= 1
    return sign + flags.pad * max(0, size - int(flags.plus))


def _apply_flags(flags: Flags, text: str) -> str:
    if not flags.digit and flags.point and flags.symbol == "s":
        return ""
    flags._read_width_precision()
    body = _build_body(text, flags)
    length = len(body) + (1 if flags.null and not flags.exist else 0)
    pieces = []
    if flags.exist and not flags.minus:
        pieces.append(_padding(flags, flags.width - length))
    if not flags.null or not flags.exist:
        pieces.append(body)
    if flags.exist and flags.minus:
        pieces.append(_padding(flags, flags.width - length))
    return "".join(pieces)


def _render_str(value: Any, flags: Flags, verify: bool) -> str:
    if value is None:
        flags.null = True
        return _render_str("(null)", flags, True)
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string or None, got {value!r}")
    text = value.split("\0", 1)[0]
    return _apply_flags(flags, text) if verify else text


def _render_char(ch: str, flags: Flags, verify: bool) -> str:
    if verify:
        return _apply_flags(flags, "" if ch == "\0" else ch)
    return ch


def _render_number(number: int, flags: Flags, verify: bool) -> str:
    text = itoa(number)
    if number < 0:
        flags.negative = 1 + int(flags.point)
    if verify:
        return _apply_flags(flags, text[1:] if number < 0 else text)
    return text


def _render_pointer(value: Any, flags: Flags) -> str:
    if value is None or (isinstance(value, int) and value & _POINTER_MASK == 0):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    flags.hash = 2
    return _apply_flags(flags, f"{address & _POINTER_MASK:x}")


def _convert(flags: Flags, values: Iterator[Any]) -> str:
    symbol = flags.symbol
    if symbol == "%":
        return "%"
    value = _take(values)
    if symbol == "s":
        return _render_str(value, flags, flags.exist)
    if symbol == "c":
        return _render_char(_char(value), flags, flags.exist)
    if symbol == "p":
        return _render_pointer(value, flags)
    if symbol in "di":
        return _render_number(_int32(value), flags, flags.exist)
    if symbol == "u":
        text = str(_uint32(value))
    else:
        text = f"{_uint32(value):x}" if symbol == "x" else f"{_uint32(value):X}"
    return _apply_flags(flags, text) if flags.exist else text


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument."""
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {fmt!r}")
    fmt = fmt.split("\0", 1)[0]
    values = iter(args)
    pieces = []
    position = 0
    for match in _SPEC.finditer(fmt):
        pieces.append(fmt[position:match.start()])
        position = match.end()
        spec, symbol = match.group("flags", "symbol")
        if not symbol:
            # A lone '%' at the end is literal; an unfinished spec prints nothing.
            if not spec:
                pieces.append("%")
            continue
        flags = Flags(spec=spec + symbol, symbol=symbol)
        for c in spec:
            flags._note(c)
        pieces.append(_convert(flags, values))
    pieces.append(fmt[position:])
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    put_str(text)
    return len(text)


def main(argv: list[str] | None = None) -> int:
    """Print each demonstration case beside the built-in % operator's result."""
    for number, (fmt, value) in enumerate(_DEMO_CASES, start=13):
        put_str(f"\n------Test{number}------\n")
        reference = fmt % value
        put_str(f"{reference}|{len(reference)}|")
        put_str("\n")
        count = printf(fmt, value)
        put_str(f"|{count}|")
    return 0
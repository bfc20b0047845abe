"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_WHITESPACE = frozenset("\t\n\v\f\r ")


def _code(c: str | int) -> int:
    """Return the code of a one-character string, or the integer itself."""
    if isinstance(c, int):
        return c
    if isinstance(c, str) and len(c) == 1:
        return ord(c)
    raise ValueError(f"expected a single character or an integer code, got {c!r}")


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert_case(c: str | int, low: str, high: str, shift: int) -> str | int:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "a", "z", -32)


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "A", "Z", 32)


def _wrap_int(value: int) -> int:
    """Reduce a value to the range of a 32-bit signed integer."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped. If more than one sign character appears
    before the first digit, the result is 0. Digits are read until the first
    non-digit; the result wraps like a 32-bit signed integer.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    rest = text[pos:]

    signs = 0
    for ch in rest:
        if is_digit(ch):
            break
        if ch in "+-":
            signs += 1
    if signs > 1:
        return 0

    negative = False
    if rest.startswith("+"):
        rest = rest[1:]
    if rest.startswith("-"):
        negative = True
        rest = rest[1:]

    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading '-' if negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits
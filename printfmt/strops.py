"""String searching, comparison, slicing, joining, trimming and splitting."""

from __future__ import annotations

from typing import Callable, MutableSequence

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string; integers are taken as codes."""
    if isinstance(c, bool):
        raise TypeError(f"expected a character, got {c!r}")
    if isinstance(c, int):
        return chr(c)
    if isinstance(c, str) and len(c) == 1:
        return c
    raise ValueError(f"expected a single character or an integer code, got {c!r}")


def _non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns 0 when they match, otherwise the difference between the codes of
    the first differing characters; the end of a string counts as code 0.
    """
    _non_negative(n, "n")
    for i in range(min(n, max(len(s1), len(s2)))):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``, or None.

    An empty ``little`` is found at index 0.
    """
    _non_negative(length, "length")
    size = len(little)
    if size > len(big):
        return None
    if size == 0:
        return 0
    remaining = length
    for pos in range(len(big)):
        if remaining == 0:
            break
        if remaining >= size and big.startswith(little, pos):
            return pos
        remaining -= 1
    return None


def substr(s: str | None, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from index ``start``.

    Returns an empty string when ``s`` is None, ``length`` is 0 or ``start``
    lies past the end.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if s is None or length == 0 or len(s) < start:
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str:
    """Concatenate two strings; if either is None the result is empty."""
    if s1 is None or s2 is None:
        return ""
    return s1 + s2


def strtrim(s: str | None, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``.

    The result is empty when either argument is None, and also whenever the
    first kept character would be the last character of ``s``.
    """
    if s is None or charset is None:
        return ""
    last = max(len(s) - 1, 0)
    start = 0
    while start < len(s) and s[start] in charset:
        start += 1
    if start >= last:
        return ""
    end = last
    while s[end] in charset:
        end -= 1
    return s[start:end + 1]


def split(s: str | None, sep: str | int) -> list[str] | None:
    """Split ``s`` on ``sep``, dropping empty pieces; None gives None."""
    if s is None:
        return None
    ch = _char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str | None, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for each character of ``s``."""
    if s is None:
        return ""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str] | None,
    f: Callable[[int, str], str | None] | None,
) -> None:
    """Call ``f(index, char)`` on each character of ``s`` in place.

    A string returned by ``f`` replaces the character; None leaves it as is.
    Nothing happens when either argument is None.
    """
    if s is None or f is None:
        return
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; with ``size`` 0
    nothing is copied.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had
    (counting ``dst`` as at most ``size`` long).
    """
    _non_negative(size, "size")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, len(src) + dst_len
    room = max(size - dst_len - 1, 0)
    return dst + src[:room], len(src) + dst_len
"""Byte-buffer filling, copying, searching, comparing and allocation."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]

SIZE_MAX = (1 << 64) - 1


def _count(n: int, name: str = "n") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an integer, got {n!r}")
    if n < 0:
        raise ValueError(f"{name} must not be negative, got {n}")
    return n


def _check_room(buf: Buffer, n: int, name: str) -> None:
    if n > len(buf):
        raise ValueError(f"{name} holds {len(buf)} bytes, {n} requested")


def _byte(c: int) -> int:
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an integer byte value, got {c!r}")
    return c & 0xFF


def memset(buf: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buf`` to the low byte of ``c``."""
    _count(n)
    _check_room(buf, n, "buffer")
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> MutableBuffer:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def memcpy(
    dest: MutableBuffer | None, src: Buffer | None, n: int
) -> MutableBuffer | None:
    """Copy ``n`` bytes from ``src`` into the start of ``dest``.

    When both are None nothing happens and None is returned.
    """
    _count(n)
    if dest is None and src is None:
        return dest
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_room(dest, n, "destination")
    _check_room(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy ``n`` bytes from ``src`` into ``dest``; overlapping views are safe."""
    _count(n)
    if n == 0 or dest is src:
        return dest
    _check_room(dest, n, "destination")
    _check_room(src, n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memchr(buf: Buffer, c: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of ``c`` within ``n`` bytes."""
    _count(n)
    _check_room(buf, n, "buffer")
    index = bytes(buf[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare ``n`` bytes; 0 if equal, else the difference of the first mismatch."""
    _count(n)
    _check_room(s1, n, "first buffer")
    _check_room(s2, n, "second buffer")
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    _count(count, "count")
    _count(size, "size")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)
"""Byte-buffer helpers that fill, search, compare and copy raw bytes."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError("byte count must not be negative")
    if any(n > length for length in lengths):
        raise IndexError("byte count exceeds buffer length")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb`` elements of ``size`` bytes each.

    Raises OverflowError when the total would not fit in a machine size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("sizes must not be negative")
    if nmemb and size and SIZE_MAX // nmemb < size:
        raise OverflowError("requested size overflows")
    return bytearray(nmemb * size)


def memchr(buffer: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to ``c`` (taken modulo 256) among the
    first ``n`` bytes, or None if it is not there."""
    _check_count(n, len(buffer))
    index = bytes(buffer[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: bytes | bytearray, s2: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes within ``n``, or 0 if equal."""
    _check_count(n, len(s1), len(s2))
    for left, right in zip(s1[:n], s2[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` of one buffer.

    Overlapping regions are handled: the result is as if the source were
    copied out first.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    if dest != src:
        buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (taken modulo 256)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer
"""String helpers working on C-style semantics: positions instead of
pointers, a virtual terminating NUL at the end of every string."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import chain, islice, repeat

from pushswap.parsing import parse_long

_NUL = "\0"


def _as_char(c: int | str) -> str:
    """Turn a character code (truncated to a byte) or a one-character string
    into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return c
    return chr(c & 0xFF)


def _wrap_int32(n: int) -> int:
    return (n + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Read a leading integer after whitespace, wrapping as a 32-bit int."""
    return _wrap_int32(parse_long(text))


def itoa(n: int) -> str:
    """Decimal representation of an integer, with a leading minus if negative."""
    return str(n)


def strchr(text: str, c: int | str) -> int | None:
    """Position of the first occurrence of ``c``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    ch = _as_char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def strrchr(text: str, c: int | str) -> int | None:
    """Position of the last occurrence of ``c``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def _codes(text: str):
    return chain(map(ord, text), repeat(0))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first
    differing character codes, or 0 when they match."""
    if n < 0:
        raise ValueError("count must not be negative")
    for left, right in islice(zip(_codes(s1), _codes(s2)), n):
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Position of ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``;
    empty when ``start`` lies past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create; when
    ``size`` does not exceed ``len(dest)``, ``dest`` is unchanged and the
    length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(i, c) for i, c in enumerate(text))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character in place with ``func(index, char)``."""
    for i, c in enumerate(chars):
        chars[i] = func(i, c)
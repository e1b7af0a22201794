"""A small formatted printer supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any

_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1


def _wrap_int32(n: int) -> int:
    return (n + 2**31) % 2**32 - 2**31


def format_hex(n: int, uppercase: bool = False) -> str:
    """Hexadecimal form of ``n`` taken as a 32-bit unsigned integer."""
    return format(n & _UINT_MASK, "X" if uppercase else "x")


def format_pointer(address: int) -> str:
    """Address as ``0x`` and lower-case hex digits; ``(nil)`` for zero."""
    address &= _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def format_unsigned(n: int) -> str:
    """Decimal form of ``n`` taken as a 32-bit unsigned integer."""
    return str(n & _UINT_MASK)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(value & 0xFF)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_int(value: Any) -> str:
    return str(_wrap_int32(value))


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "p": format_pointer,
    "d": _format_int,
    "i": _format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args``.

    An unknown conversion character is dropped without using an argument,
    and a lone ``%`` at the end produces nothing.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    chars: Iterator[str] = iter(fmt)
    remaining = iter(args)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        out.append(convert(arg))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)
"""Reading and validating the integers handed to the sorter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_DIGITS = frozenset("0123456789")
_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the input is not a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def is_valid_number(token: str) -> bool:
    """Return True for an optional sign followed by one or more ASCII digits."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all(c in _DIGITS for c in body)


def parse_long(text: str) -> int:
    """Read a leading integer, skipping whitespace; 0 if there are no digits."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda c: c in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def count_words(text: str, sep: str) -> int:
    """Number of non-empty words between separators."""
    return len(split_words(text, sep))


def parse_numbers(tokens: Iterable[str]) -> list[int]:
    """Turn tokens into distinct 32-bit integers, or raise InputError."""
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        if not is_valid_number(token):
            raise InputError()
        n = parse_long(token)
        if not INT_MIN <= n <= INT_MAX or n in seen:
            raise InputError()
        seen.add(n)
        numbers.append(n)
    return numbers


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Parse command-line arguments; a lone argument is split on spaces."""
    if len(args) == 1:
        return parse_numbers(split_words(args[0], " "))
    return parse_numbers(args)
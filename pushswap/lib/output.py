"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(c)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string; nothing is written for None."""
    if s is not None:
        _target(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; nothing is written for None."""
    if s is not None:
        _target(stream).write(f"{s}\n")


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal, with a leading minus if negative."""
    _target(stream).write(str(n))
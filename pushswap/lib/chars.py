"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer character
code. The case converters return the same kind of value they were given.
"""

from __future__ import annotations

_LOWER = range(ord("a"), ord("z") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def _same_kind(original: int | str, code: int) -> int | str:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _LOWER or code in _UPPER


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGIT


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _LOWER:
        return _same_kind(c, code - _CASE_OFFSET)
    return c


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if code in _UPPER:
        return _same_kind(c, code + _CASE_OFFSET)
    return c
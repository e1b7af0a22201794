"""The two stacks of the push_swap puzzle and the eleven moves on them."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """A move on the stacks, named as it is written in a solution."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


_SWAPS_A = {Operation.SA, Operation.SS}
_SWAPS_B = {Operation.SB, Operation.SS}
_ROTATES_A = {Operation.RA, Operation.RR}
_ROTATES_B = {Operation.RB, Operation.RR}
_REVERSES_A = {Operation.RRA, Operation.RRR}
_REVERSES_B = {Operation.RRB, Operation.RRR}


def _swap(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(src: list[int], dest: list[int]) -> None:
    if src:
        dest.insert(0, src.pop(0))


def _rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if no value is greater than the one after it."""
    return all(left <= right for left, right in pairwise(values))


class PushSwap:
    """Stacks ``a`` and ``b``, top first, with a record of every move made.

    A move that finds too few elements leaves its stack unchanged but is
    still recorded, as it would still be written out.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"PushSwap(a={self.a!r}, b={self.b!r})"

    @property
    def solved(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        return not self.b and is_sorted(self.a)

    def apply(self, op: Operation | str) -> None:
        """Perform one move, given as an Operation or its name."""
        op = Operation(op)
        if op in _SWAPS_A:
            _swap(self.a)
        if op in _SWAPS_B:
            _swap(self.b)
        if op is Operation.PA:
            _push(self.b, self.a)
        if op is Operation.PB:
            _push(self.a, self.b)
        if op in _ROTATES_A:
            _rotate(self.a)
        if op in _ROTATES_B:
            _rotate(self.b)
        if op in _REVERSES_A:
            _reverse_rotate(self.a)
        if op in _REVERSES_B:
            _reverse_rotate(self.b)
        self.operations.append(op)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self.apply(Operation.SA)

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self.apply(Operation.SB)

    def ss(self) -> None:
        """Swap the top two elements of both stacks."""
        self.apply(Operation.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self.apply(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self.apply(Operation.PB)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self.apply(Operation.RA)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self.apply(Operation.RB)

    def rr(self) -> None:
        """Rotate both stacks."""
        self.apply(Operation.RR)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self.apply(Operation.RRA)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self.apply(Operation.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.apply(Operation.RRR)
"""The cost-driven sorting strategy for the push_swap puzzle.

Every element of ``a`` but three is moved to ``b``, each time picking the
element that is cheapest to place just above its closest smaller value.
The last three are sorted in place, then ``b`` is poured back onto ``a``,
each element landing above its closest larger value.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pushswap.stacks import Operation, PushSwap, is_sorted


def above_median(position: int, length: int) -> bool:
    """True when a position is reached faster by rotating than reverse-rotating."""
    return position <= length // 2


def _distance(position: int, length: int) -> int:
    """Moves needed to bring a position to the top, in its cheaper direction."""
    return position if above_median(position, length) else length - position


def _position_of_max(values: Sequence[int]) -> int:
    return max(range(len(values)), key=values.__getitem__)


def _position_of_min(values: Sequence[int]) -> int:
    return min(range(len(values)), key=values.__getitem__)


def targets_in_b(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each element of ``a``, the position in ``b`` it should land on.

    That is the largest value of ``b`` below it, or the largest value of
    ``b`` when none is below it.
    """
    if a and not b:
        raise ValueError("stack b is empty")
    targets = []
    for value in a:
        smaller = [pos for pos, other in enumerate(b) if other < value]
        if smaller:
            targets.append(max(smaller, key=b.__getitem__))
        else:
            targets.append(_position_of_max(b))
    return targets


def targets_in_a(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """For each element of ``b``, the position in ``a`` it should land on.

    That is the smallest value of ``a`` above it, or the smallest value of
    ``a`` when none is above it.
    """
    if b and not a:
        raise ValueError("stack a is empty")
    targets = []
    for value in b:
        larger = [pos for pos, other in enumerate(a) if other > value]
        if larger:
            targets.append(min(larger, key=a.__getitem__))
        else:
            targets.append(_position_of_min(a))
    return targets


def push_costs(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Moves needed to bring each element of ``a`` and its target to the tops."""
    len_a, len_b = len(a), len(b)
    return [
        _distance(pos, len_a) + _distance(target, len_b)
        for pos, target in enumerate(targets_in_b(a, b))
    ]


def cheapest_position(a: Sequence[int], b: Sequence[int]) -> int:
    """Position in ``a`` of the first element with the lowest push cost."""
    costs = push_costs(a, b)
    if not costs:
        raise ValueError("stack a is empty")
    return min(range(len(costs)), key=costs.__getitem__)


def _bring_to_top(stacks: PushSwap, name: str, value: int, upward: bool) -> None:
    stack = stacks.a if name == "a" else stacks.b
    if upward:
        move = stacks.ra if name == "a" else stacks.rb
    else:
        move = stacks.rra if name == "a" else stacks.rrb
    while stack[0] != value:
        move()


def _push_cheapest_to_b(stacks: PushSwap) -> None:
    a, b = stacks.a, stacks.b
    position = cheapest_position(a, b)
    target_position = targets_in_b(a, b)[position]
    value, target = a[position], b[target_position]
    a_up = above_median(position, len(a))
    b_up = above_median(target_position, len(b))

    if a_up and b_up:
        while a[0] != value and b[0] != target:
            stacks.rr()
    elif not a_up and not b_up:
        while a[0] != value and b[0] != target:
            stacks.rrr()

    _bring_to_top(stacks, "a", value, above_median(a.index(value), len(a)))
    _bring_to_top(stacks, "b", target, above_median(b.index(target), len(b)))
    stacks.pb()


def sort_three(stacks: PushSwap) -> None:
    """Sort a stack ``a`` of three elements in at most two moves."""
    a = stacks.a
    if len(a) < 2:
        return
    largest = max(a)
    if a[0] == largest:
        stacks.ra()
    elif a[1] == largest:
        stacks.rra()
    if a[0] > a[1]:
        stacks.sa()


def sort_stacks(stacks: PushSwap) -> None:
    """Sort ``a`` using ``b`` as scratch space, recording every move."""
    a, b = stacks.a, stacks.b
    if len(a) > 3 and not is_sorted(a):
        stacks.pb()
    while len(a) > 3 and not is_sorted(a):
        _push_cheapest_to_b(stacks)
    sort_three(stacks)

    while b:
        target_position = targets_in_a(a, b)[0]
        _bring_to_top(
            stacks, "a", a[target_position], above_median(target_position, len(a))
        )
        stacks.pa()

    if a:
        smallest_position = _position_of_min(a)
        _bring_to_top(
            stacks, "a", a[smallest_position], above_median(smallest_position, len(a))
        )


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the moves that sort distinct integers, first element on top."""
    stacks = PushSwap(values)
    if len(set(stacks.a)) != len(stacks.a):
        raise ValueError("values must be distinct")
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        else:
            sort_stacks(stacks)
    return list(stacks.operations)
"""The sorting strategy that produces the list of operations."""

from __future__ import annotations

from typing import Callable, Sequence

from pushswap.optimize import optimize_ops
from pushswap.placement import (
    RotateType,
    cheapest_index_ab,
    get_rotate_type,
    push_index_ab,
    push_index_ba,
)
from pushswap.stacks import Stacks, is_sorted


def stack_a_is_ordered(stacks: Stacks) -> bool:
    """Return True if ``a`` is sorted up to a rotation, with exactly one descent."""
    a = stacks.a
    if not a:
        return False
    wrapped = a[1:] + a[:1]
    descents = sum(1 for current, following in zip(a, wrapped) if current > following)
    return descents == 1


def rotate_rarb(stacks: Stacks, index_a: int, index_b: int) -> None:
    """Rotate ``a`` and ``b`` forwards until both indices reach the top."""
    for _ in range(index_a):
        stacks.ra()
    for _ in range(index_b):
        stacks.rb()


def rotate_rarrb(stacks: Stacks, index_a: int, index_b: int) -> None:
    """Rotate ``a`` forwards and ``b`` backwards until both indices reach the top."""
    for _ in range(index_a):
        stacks.ra()
    for _ in range(len(stacks.b) - index_b):
        stacks.rrb()


def rotate_rrarb(stacks: Stacks, index_a: int, index_b: int) -> None:
    """Rotate ``a`` backwards and ``b`` forwards until both indices reach the top."""
    for _ in range(len(stacks.a) - index_a):
        stacks.rra()
    for _ in range(index_b):
        stacks.rb()


def rotate_rrarrb(stacks: Stacks, index_a: int, index_b: int) -> None:
    """Rotate ``a`` and ``b`` backwards until both indices reach the top."""
    for _ in range(len(stacks.a) - index_a):
        stacks.rra()
    for _ in range(len(stacks.b) - index_b):
        stacks.rrb()


_ROTATIONS: dict[RotateType, Callable[[Stacks, int, int], None]] = {
    RotateType.RARB: rotate_rarb,
    RotateType.RARRB: rotate_rarrb,
    RotateType.RRARB: rotate_rrarb,
    RotateType.RRARRB: rotate_rrarrb,
}


def _push_ab(stacks: Stacks, index_a: int, index_b: int) -> None:
    rotate_type = get_rotate_type(index_a, len(stacks.a), index_b, len(stacks.b))
    _ROTATIONS[rotate_type](stacks, index_a, index_b)
    stacks.pb()


def _push_ba(stacks: Stacks) -> None:
    index_a = push_index_ba(stacks.a, stacks.b[0])
    size_a = len(stacks.a)
    if index_a > size_a // 2:
        for _ in range(size_a - index_a):
            stacks.rra()
    else:
        for _ in range(index_a):
            stacks.ra()
    stacks.pa()


def sort_ordered(stacks: Stacks) -> None:
    """Rotate ``a``, already in cyclic order, until rank 0 is on top."""
    position = stacks.a.index(0)
    step = stacks.ra if position < len(stacks.a) // 2 else stacks.rra
    while stacks.a[0] != 0:
        step()


def sort_three(stacks: Stacks) -> None:
    """Sort the three elements of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("stack a holds fewer than three elements")
    first, second, third = stacks.a[:3]
    if third > first > second:
        stacks.sa()
    elif second > first > third:
        stacks.rra()
    elif first > third > second:
        stacks.ra()
    elif first > second > third:
        stacks.sa()
        stacks.rra()
    elif second > third > first:
        stacks.sa()
        stacks.ra()


def sort_algorithm(stacks: Stacks) -> None:
    """Sort a stack of more than three ranks by cheapest insertion into ``b``."""
    stacks.pb()
    if len(stacks.a) > 3:
        stacks.pb()
    while len(stacks.a) > 3:
        index_a = cheapest_index_ab(stacks)
        index_b = push_index_ab(stacks.b, stacks.a[index_a])
        _push_ab(stacks, index_a, index_b)
    sort_three(stacks)
    while stacks.b:
        _push_ba(stacks)
    sort_ordered(stacks)


def solve(ranks: Sequence[int]) -> list[str]:
    """Return the optimised operations that sort the given ranks."""
    stacks = Stacks(list(ranks))
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.ra()
        elif len(stacks.a) == 3:
            sort_three(stacks)
        elif stack_a_is_ordered(stacks):
            sort_ordered(stacks)
        else:
            sort_algorithm(stacks)
    return optimize_ops(stacks.ops)
"""Earlier sorting strategies: binary radix and median bands."""

from __future__ import annotations

from pushswap.placement import push_index_ab, push_index_ba
from pushswap.sorting import sort_ordered, sort_three
from pushswap.stacks import Stacks, is_sorted


def _digit_count(values: list[int]) -> int:
    return max(1, max(values, default=0).bit_length())


def sort_radix(stacks: Stacks) -> None:
    """Sort the ranks in ``a`` by binary radix, one bit per pass."""
    size = len(stacks.a)
    for bit in range(_digit_count(stacks.a)):
        for _ in range(size):
            if is_sorted(stacks.a):
                break
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        while stacks.b:
            stacks.pa()


def _push_ab(stacks: Stacks) -> None:
    if stacks.b:
        index_b = push_index_ab(stacks.b, stacks.a[0])
        size_b = len(stacks.b)
        if index_b > size_b // 3 * 2:
            for _ in range(size_b - index_b):
                stacks.rrb()
        else:
            for _ in range(index_b):
                stacks.rb()
    stacks.pb()


def _push_ba(stacks: Stacks) -> None:
    index_a = push_index_ba(stacks.a, stacks.b[0])
    size_a = len(stacks.a)
    if index_a > size_a // 2 - 1:
        for _ in range(size_a - index_a):
            stacks.rra()
    else:
        for _ in range(index_a):
            stacks.ra()
    stacks.pa()


def sort_large(stacks: Stacks, n: int, f: int) -> None:
    """Sort ranks by pushing bands around the median, widened by ``f`` each pass.

    The band starts at half-width ``n``; ``n`` and ``f`` should be positive or
    the passes may never empty ``a`` down to three elements.
    """
    median = len(stacks.a) // 2
    while len(stacks.a) > 3:
        for _ in range(len(stacks.a)):
            if median - n < stacks.a[0] < median + n:
                _push_ab(stacks)
            else:
                stacks.ra()
            if len(stacks.a) <= 3:
                break
        n += f
    sort_three(stacks)
    while stacks.b:
        _push_ba(stacks)
    sort_ordered(stacks)
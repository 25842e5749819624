"""Where to insert a value on a stack and how many rotations that costs."""

from __future__ import annotations

from enum import IntEnum
from itertools import pairwise
from typing import Sequence

from pushswap.stacks import Stacks


class RotateType(IntEnum):
    """How stacks ``a`` and ``b`` are turned before a push from ``a`` to ``b``."""

    RARB = 1
    RARRB = 2
    RRARB = 3
    RRARRB = 4


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("stack is empty")


def max_index(values: Sequence[int]) -> int:
    """Return the last index holding the largest value."""
    _require_values(values)
    largest = max(values)
    return max(i for i, value in enumerate(values) if value == largest)


def min_index(values: Sequence[int]) -> int:
    """Return the last index holding the smallest value."""
    _require_values(values)
    smallest = min(values)
    return max(i for i, value in enumerate(values) if value == smallest)


def push_index_ab(stack: Sequence[int], value: int) -> int:
    """Return the index of ``b`` to bring to the top before pushing ``value``.

    Stack ``b`` is kept in descending order up to a rotation.
    """
    _require_values(stack)
    if stack[0] < value < stack[-1]:
        return 0
    if value > max(stack) or value < min(stack):
        return max_index(stack)
    for i, (upper, lower) in enumerate(pairwise(stack)):
        if upper >= value >= lower:
            return i + 1
    return 0


def push_index_ba(stack: Sequence[int], value: int) -> int:
    """Return the index of ``a`` to bring to the top before pushing ``value``.

    Stack ``a`` is kept in ascending order up to a rotation.
    """
    _require_values(stack)
    if stack[-1] < value < stack[0]:
        return 0
    if value > max(stack) or value < min(stack):
        return min_index(stack)
    for i, (upper, lower) in enumerate(pairwise(stack)):
        if upper <= value <= lower:
            return i + 1
    return 0


def count_rarb(index_a: int, index_b: int) -> int:
    """Operations needed when both stacks are rotated forwards."""
    return max(index_a, index_b)


def count_rrarrb(index_a: int, size_a: int, index_b: int, size_b: int) -> int:
    """Operations needed when both stacks are rotated backwards."""
    return max(size_a - index_a, size_b - index_b)


def count_rarrb(index_a: int, index_b: int, size_b: int) -> int:
    """Operations needed when ``a`` turns forwards and ``b`` backwards."""
    return index_a + (size_b - index_b)


def count_rrarb(index_a: int, size_a: int, index_b: int) -> int:
    """Operations needed when ``a`` turns backwards and ``b`` forwards."""
    return (size_a - index_a) + index_b


def _counts(index_a: int, size_a: int, index_b: int, size_b: int) -> dict[RotateType, int]:
    # Insertion order fixes which type wins a tie.
    return {
        RotateType.RARB: count_rarb(index_a, index_b),
        RotateType.RRARRB: count_rrarrb(index_a, size_a, index_b, size_b),
        RotateType.RRARB: count_rrarb(index_a, size_a, index_b),
        RotateType.RARRB: count_rarrb(index_a, index_b, size_b),
    }


def rotate_count(index_a: int, size_a: int, index_b: int, size_b: int) -> int:
    """Return the fewest operations that bring both indices to the top."""
    return min(_counts(index_a, size_a, index_b, size_b).values())


def get_rotate_type(index_a: int, size_a: int, index_b: int, size_b: int) -> RotateType:
    """Return the rotation strategy that costs the fewest operations."""
    counts = _counts(index_a, size_a, index_b, size_b)
    return min(counts, key=counts.__getitem__)


def cheapest_index_ab(stacks: Stacks) -> int:
    """Return the first index of ``a`` that is cheapest to push onto ``b``."""
    a, b = stacks.a, stacks.b
    _require_values(a)

    def cost(index: int) -> int:
        return rotate_count(index, len(a), push_index_ab(b, a[index]), len(b))

    return min(range(len(a)), key=cost)
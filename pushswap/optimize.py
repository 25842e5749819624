"""Merging of single-stack rotations into double rotations."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence


def merge_rotations(segment: Sequence[str], first: str, second: str, combined: str) -> list[str]:
    """Pair up ``first`` and ``second`` in the segment into ``combined``.

    The more frequent of the two (``first`` on a tie) has its leading
    occurrences turned into ``combined``; as many leading occurrences of the
    other are dropped.
    """
    count_first = segment.count(first)
    count_second = segment.count(second)
    if not count_first or not count_second:
        return list(segment)
    if count_first >= count_second:
        keep, drop = first, second
    else:
        keep, drop = second, first
    pairs = min(count_first, count_second)
    dropped = replaced = 0
    result = []
    for op in segment:
        if op == drop and dropped < pairs:
            dropped += 1
        elif op == keep and replaced < pairs:
            replaced += 1
            result.append(combined)
        else:
            result.append(op)
    return result


def optimize_ops(ops: Sequence[str]) -> list[str]:
    """Return the operations with rotations between pushes to ``b`` combined."""
    pushes = [i for i, op in enumerate(ops) if op == "pb"]
    if not pushes:
        return list(ops)
    result = list(ops[: pushes[0]])
    for start, end in pairwise(pushes):
        result.append(ops[start])
        segment = merge_rotations(ops[start + 1 : end], "ra", "rb", "rr")
        result.extend(merge_rotations(segment, "rra", "rrb", "rrr"))
    result.extend(ops[pushes[-1] :])
    return result
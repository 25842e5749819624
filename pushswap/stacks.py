"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Sequence

OPERATIONS = ("pa", "pb", "sa", "sb", "ss", "ra", "rb", "rr", "rra", "rrb", "rrr")


class StackError(Exception):
    """An operation is unknown or cannot be applied to the stacks as they are."""


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if the values are in non-decreasing order."""
    return all(left <= right for left, right in pairwise(values))


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, with the operations applied so far in ``ops``.

    The top of each stack is at index 0.  When ``record`` is false the
    operations are applied without being logged.
    """

    a: list[int]
    b: list[int] = field(default_factory=list)
    ops: list[str] = field(default_factory=list)
    record: bool = True

    def __post_init__(self) -> None:
        self.a = list(self.a)
        self.b = list(self.b)

    def _log(self, name: str) -> None:
        if self.record:
            self.ops.append(name)

    @staticmethod
    def _require(name: str, *sizes_needed: tuple[list[int], int]) -> None:
        for stack, needed in sizes_needed:
            if len(stack) < needed:
                raise StackError(f"cannot apply {name}: stack too small")

    @staticmethod
    def _swap(stack: list[int]) -> None:
        stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _rotate(stack: list[int]) -> None:
        stack.append(stack.pop(0))

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> None:
        stack.insert(0, stack.pop())

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._require("pa", (self.b, 1))
        self.a.insert(0, self.b.pop(0))
        self._log("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._require("pb", (self.a, 1))
        self.b.insert(0, self.a.pop(0))
        self._log("pb")

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._require("sa", (self.a, 2))
        self._swap(self.a)
        self._log("sa")

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._require("sb", (self.b, 2))
        self._swap(self.b)
        self._log("sb")

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        self._require("ss", (self.a, 2), (self.b, 2))
        self._swap(self.a)
        self._swap(self.b)
        self._log("ss")

    def ra(self) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        self._require("ra", (self.a, 1))
        self._rotate(self.a)
        self._log("ra")

    def rb(self) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        self._require("rb", (self.b, 1))
        self._rotate(self.b)
        self._log("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._require("rr", (self.a, 1), (self.b, 1))
        self._rotate(self.a)
        self._rotate(self.b)
        self._log("rr")

    def rra(self) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        self._require("rra", (self.a, 1))
        self._reverse_rotate(self.a)
        self._log("rra")

    def rrb(self) -> None:
        """Rotate ``b`` so its bottom comes to the top."""
        self._require("rrb", (self.b, 1))
        self._reverse_rotate(self.b)
        self._log("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._require("rrr", (self.a, 1), (self.b, 1))
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._log("rrr")

    def execute(self, name: str) -> None:
        """Apply the operation with the given name."""
        if name not in OPERATIONS:
            raise StackError(f"unknown operation {name!r}")
        getattr(self, name)()

    def is_solved(self) -> bool:
        """Return True if ``a`` is sorted and ``b`` is empty."""
        return is_sorted(self.a) and not self.b
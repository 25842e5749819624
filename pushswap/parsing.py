"""Validation of command-line numbers and their conversion to ranks."""

from __future__ import annotations

from bisect import bisect_left
from typing import Iterable, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
INT_MAXLEN = 11

_DIGITS = frozenset("0123456789")
_SPACES = " \t\n\v\f\r"


class InputError(ValueError):
    """The arguments are not a list of distinct integers."""


def _is_number(arg: str) -> bool:
    if not arg:
        return True
    head, tail = arg[0], arg[1:]
    return (head in "+-" or head in _DIGITS) and all(c in _DIGITS for c in tail)


def _atoi(text: str) -> int:
    text = text.lstrip(_SPACES)
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    value = 0
    for char in text:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
    return sign * value


def is_numeric(args: Sequence[str]) -> bool:
    """Return True if every argument is an optional sign followed by digits."""
    return all(_is_number(arg) for arg in args)


def is_int_range(args: Sequence[str]) -> bool:
    """Return True if every argument fits a signed 32-bit integer."""
    for arg in args:
        if len(arg) > INT_MAXLEN:
            return False
        digits = "".join(c for c in arg if c in _DIGITS)
        value = int(digits) if digits else 0
        if arg.startswith("-"):
            value = -value
        if not INT_MIN <= value <= INT_MAX:
            return False
    return True


def is_unique(args: Sequence[str]) -> bool:
    """Return True if no two arguments denote the same number."""
    values = [_atoi(arg) for arg in args]
    return len(set(values)) == len(values)


def to_ranks(args: Sequence[str]) -> list[int]:
    """Replace each number by how many of the others are smaller than it."""
    values = [_atoi(arg) for arg in args]
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate the arguments and return their ranks, raising InputError."""
    args = list(args)
    if not (is_numeric(args) and is_int_range(args) and is_unique(args)):
        raise InputError("Error")
    return to_ranks(args)
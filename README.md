# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and only
these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | push the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

The package has a solver that prints a sequence of operations, and a checker
that replays a sequence and tells you whether it sorts the input.

## Installation

```
pip install .
```

## Solving

```
push-swap 3 2 5 1 4
```

This prints one operation per line on standard output. If the input is
already sorted, it prints nothing. The same command is available as
`python -m pushswap.cli`.

Each argument must be an integer within the signed 32-bit range, optionally
preceded by `+` or `-`, and no value may appear twice (`+1` and `1` count as
the same value). If any argument is invalid, the program writes `Error` to
standard error and exits with status 1. Running it with no arguments also
exits with status 1, silently.

Two elements are sorted with `ra`, three with at most two operations, and an
input that is already in order up to a rotation is only rotated. Larger
inputs are sorted by repeatedly pushing onto `b` the element of `a` that is
cheapest to place, then pushing everything back. Rotations of `a` and `b`
between two `pb` operations are then merged into `rr` and `rrr` where
possible.

## Checking

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

The checker reads operations from standard input, one per line, and applies
them to the numbers given as arguments. It prints `OK` if stack `a` ends up
sorted and stack `b` is empty, and `KO` otherwise. It writes `Error` to
standard error and exits with status 1 when:

* an argument is invalid;
* a line is not one of the eleven operations;
* an operation cannot be applied, for example `pa` when `b` is empty;
* the text after the last newline is longer than four characters.

A final line that is not ended by a newline is not applied. With no
arguments the checker exits with status 1 and prints nothing.

## Using it from Python

```python
from pushswap.sorting import solve
from pushswap.parsing import parse_arguments
from pushswap.stacks import Stacks

ranks = parse_arguments(["3", "2", "5", "1", "4"])
ops = solve(ranks)

stacks = Stacks(ranks)
for op in ops:
    stacks.execute(op)
assert stacks.is_solved()
```

* `pushswap.parsing`: `parse_arguments` validates the arguments and replaces
  each value with its rank, from 0 for the smallest up to n - 1, raising
  `InputError` (a `ValueError`) on bad input. The checks are also available
  on their own as `is_numeric`, `is_int_range` and `is_unique`, and the rank
  conversion as `to_ranks`.
* `pushswap.stacks`: `Stacks` holds `a`, `b` and the list `ops` of
  operations applied so far (not logged when `record=False`). The operations
  are methods: `pa`, `pb`, `sa`, `sb`, `ss`, `ra`, `rb`, `rr`, `rra`, `rrb`
  and `rrr`; `execute(name)` applies one by name. An unknown operation, or one
  that cannot be applied, raises `StackError`. `is_sorted(values)` tests for
  non-decreasing order.
* `pushswap.sorting`: `solve(ranks)` returns the optimised list of operation
  names. The steps are exposed too: `sort_three`, `sort_ordered`,
  `sort_algorithm`, `stack_a_is_ordered` and the `rotate_*` helpers, all
  acting on a `Stacks`.
* `pushswap.placement`: insertion positions (`push_index_ab`,
  `push_index_ba`), rotation costs (`count_rarb`, `count_rrarrb`,
  `count_rarrb`, `count_rrarb`, `rotate_count`), the cheapest strategy
  (`get_rotate_type`, returning a `RotateType`) and `cheapest_index_ab`.
* `pushswap.optimize`: `optimize_ops(ops)` merges rotations into `rr` and
  `rrr`; `merge_rotations` does this for one segment.
* `pushswap.legacy`: two earlier strategies for comparison, `sort_radix(stacks)`
  and `sort_large(stacks, n, f)`. They apply their operations to the given
  `Stacks` and do not optimise them.

## What it does not do

There is no graphical or animated view of the stacks while operations run;
the package only prints operations and checks them.
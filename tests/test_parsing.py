import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    InputError,
    is_int_range,
    is_numeric,
    is_unique,
    parse_arguments,
    to_ranks,
)

ints32 = st.integers(min_value=INT_MIN, max_value=INT_MAX)


@pytest.mark.parametrize("args", [["1", "+2", "-3"], ["0"], ["007"], []])
def test_is_numeric_accepts(args):
    assert is_numeric(args) is True


@pytest.mark.parametrize("args", [["a"], ["1", "4a"], ["5-"], ["1.5"], [" 1"], ["+-1"]])
def test_is_numeric_rejects(args):
    assert is_numeric(args) is False


def test_is_numeric_rejects_non_ascii_digits():
    assert is_numeric(["\u0661"]) is False


def test_is_int_range_limits():
    assert is_int_range(["2147483647", "-2147483648"]) is True
    assert is_int_range(["2147483648"]) is False
    assert is_int_range(["-2147483649"]) is False
    assert is_int_range(["+2147483648"]) is False


def test_is_int_range_rejects_overlong_text():
    assert is_int_range(["0" * 12]) is False
    assert is_int_range(["0" * 11]) is True


def test_is_unique():
    assert is_unique(["1", "2", "3"]) is True
    assert is_unique(["1", "2", "+1"]) is False
    assert is_unique(["-0", "0"]) is False


def test_to_ranks_example():
    assert to_ranks(["42", "-7", "100"]) == [1, 0, 2]


@given(st.lists(ints32, unique=True, max_size=40))
def test_to_ranks_is_order_preserving_permutation(values):
    ranks = to_ranks([str(v) for v in values])
    assert sorted(ranks) == list(range(len(values)))
    for i, left in enumerate(values):
        for j, right in enumerate(values):
            assert (left < right) == (ranks[i] < ranks[j])


@given(st.lists(ints32, unique=True, min_size=1, max_size=40))
def test_parse_arguments_accepts_valid_numbers(values):
    args = [str(v) for v in values]
    assert parse_arguments(args) == to_ranks(args)


@pytest.mark.parametrize(
    "args",
    [
        ["1", "x"],
        ["1", "1"],
        ["3", "+3"],
        ["2147483648"],
        ["1", "2", "99999999999"],
    ],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_parse_arguments_accepts_iterables():
    assert parse_arguments(iter(["5", "-5"])) == [1, 0]


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["1", "1"])
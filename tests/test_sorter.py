import itertools
import random

import pytest

from pushswap.parsing import INT_MAX, INT_MIN
from pushswap.sorter import push_swap, sort, sort_three
from pushswap.stacks import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for name in operations:
        getattr(stacks, name)()
    return stacks


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3])))
def test_sort_three_all_permutations(values):
    stacks = Stacks(values)
    sort_three(stacks)
    assert stacks.values_a() == [1, 2, 3]
    assert len(stacks.operations) <= 2


def test_sort_three_reverse_order():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert stacks.operations == ["sa", "rra"]


def test_sort_three_needs_three():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1]))


def test_two_elements_swapped():
    assert push_swap([2, 1]) == ["sa"]


@pytest.mark.parametrize("values", [[], [5], [1, 2], [-3, 0, 7, 10]])
def test_already_sorted_needs_nothing(values):
    assert push_swap(values) == []


@pytest.mark.parametrize(
    "values",
    list(itertools.permutations([1, 2, 3, 4])) + list(itertools.permutations([5, 1, 4, 2, 3])),
)
def test_small_permutations_are_sorted(values):
    stacks = _replay(values, push_swap(values))
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


def test_extreme_values_are_sorted():
    values = [0, INT_MAX, -7, INT_MIN, 42, 3]
    stacks = _replay(values, push_swap(values))
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


@pytest.mark.parametrize("seed", [1, 7, 23])
def test_hundred_random_values(seed):
    values = random.Random(seed).sample(range(-1000, 1000), 100)
    stacks = _replay(values, push_swap(values))
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []


def test_sort_mutates_stacks():
    values = [9, -2, 14, 3, 0, 7, 1]
    stacks = Stacks(values)
    sort(stacks)
    assert stacks.values_a() == sorted(values)
    assert stacks.values_b() == []
    assert _replay(values, stacks.operations).values_a() == sorted(values)
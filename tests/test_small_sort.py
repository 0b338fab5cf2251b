import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.small_sort import drain_b, max_with_index, sort_small, sort_three
from pushswap.stacks import Op, Stacks


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        getattr(stacks, op.value)()
    return stacks


def test_max_with_index_finds_first_maximum():
    values = [4, 9, 1, 9, 3]
    value, index = max_with_index(values)
    assert value == max(values)
    assert values[index] == value
    assert all(v < value for v in values[:index])


def test_max_with_index_single_element_reports_zero():
    assert max_with_index([42]) == (0, 0)


def test_max_with_index_empty_raises():
    with pytest.raises(ValueError):
        max_with_index([])


@given(st.lists(st.integers(-1000, 1000), min_size=2, max_size=30))
def test_max_with_index_invariant(values):
    value, index = max_with_index(values)
    assert value == max(values)
    assert index == values.index(value)


def test_sort_three_single_swap():
    stacks = Stacks([2, 1, 3])
    sort_three(stacks)
    assert stacks.ops == [Op.SA]


def test_sort_three_reverse_order():
    stacks = Stacks([3, 2, 1])
    sort_three(stacks)
    assert stacks.ops == [Op.SA, Op.RRA]


@pytest.mark.parametrize("perm", list(itertools.permutations([5, -2, 11])))
def test_sort_three_every_permutation(perm):
    stacks = Stacks(perm)
    sort_three(stacks)
    assert list(stacks.a) == sorted(perm)
    assert not stacks.b
    assert list(_replay(perm, stacks.ops).a) == sorted(perm)


def test_sort_three_two_elements():
    stacks = Stacks([7, 3])
    sort_three(stacks)
    assert list(stacks.a) == [3, 7]


def test_sort_three_sorted_makes_no_moves():
    stacks = Stacks([1, 2, 3])
    sort_three(stacks)
    assert stacks.ops == []


def test_sort_three_rejects_four_elements():
    with pytest.raises(ValueError):
        sort_three(Stacks([4, 3, 2, 1]))


def test_sort_three_rejects_duplicates():
    with pytest.raises(ValueError):
        sort_three(Stacks([2, 1, 1]))


@pytest.mark.parametrize("perm", list(itertools.permutations([1, 2, 3, 4, 5])))
def test_sort_small_every_permutation_of_five(perm):
    stacks = Stacks(perm)
    sort_small(stacks)
    assert list(stacks.a) == [1, 2, 3, 4, 5]
    assert not stacks.b


@settings(max_examples=100, deadline=None)
@given(st.lists(st.integers(-10**6, 10**6), min_size=3, max_size=10, unique=True))
def test_sort_small_sorts_and_replays(values):
    stacks = Stacks(values)
    sort_small(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    replayed = _replay(values, stacks.ops)
    assert list(replayed.a) == sorted(values)


def test_sort_small_rejects_short_stack():
    with pytest.raises(ValueError):
        sort_small(Stacks([2, 1]))


def test_sort_small_rejects_duplicates():
    with pytest.raises(ValueError):
        sort_small(Stacks([3, 1, 3, 2]))


@settings(max_examples=100, deadline=None)
@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=40, unique=True))
def test_drain_b_builds_sorted_a(values):
    stacks = Stacks([])
    stacks.b.extend(values)
    drain_b(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    assert stacks.ops.count(Op.PA) == len(values)
    assert set(stacks.ops) <= {Op.PA, Op.RB, Op.RRB}


def test_drain_b_on_empty_b_does_nothing():
    stacks = Stacks([1, 2])
    drain_b(stacks)
    assert list(stacks.a) == [1, 2]
    assert stacks.ops == []
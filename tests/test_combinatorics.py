import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from iterkit.combinatorics import (
    Combinations,
    CombinationsWithReplacement,
    binomial,
    combinations,
    combinations_with_replacement,
)


def test_binomial_recurrence():
    limit = 500
    row = [0] * (limit + 1)
    row[0] = 1
    for n in range(limit + 1):
        for k in range(limit + 1):
            assert row[k] == binomial(n, k)
        row = [1] + [row[k - 1] + row[k] for k in range(1, limit + 1)]


def test_binomial_values():
    assert binomial(5, 2) == 10
    assert binomial(3, 5) == 0
    assert binomial(0, 0) == 1


def test_binomial_negative():
    with pytest.raises(ValueError):
        binomial(-1, 2)


def test_combinations_values():
    assert list(combinations([1, 2, 3, 4], 2)) == [
        [1, 2],
        [1, 3],
        [1, 4],
        [2, 3],
        [2, 4],
        [3, 4],
    ]


def test_combinations_zero_length():
    assert list(combinations([1, 2], 0)) == [[]]
    assert list(combinations([], 0)) == [[]]


def test_combinations_too_long():
    assert list(combinations([1, 2], 3)) == []


def test_combinations_negative_k():
    with pytest.raises(ValueError):
        combinations([1, 2], -1)
    with pytest.raises(ValueError):
        combinations_with_replacement([1, 2], -1)


def test_combinations_lazy_over_infinite_source():
    it = combinations(itertools.count(), 2)
    assert it.n() == 0
    assert it.k() == 2
    assert next(it) == [0, 1]
    assert it.n() == 2
    assert next(it) == [0, 2]
    assert next(it) == [0, 3]


def test_combinations_count_fresh_and_exhausts():
    it = combinations(range(5), 2)
    assert it.count() == 10
    assert list(it) == []


def test_combinations_is_fused():
    it = combinations([1, 2], 2)
    assert list(it) == [[1, 2]]
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)


def test_cwr_values():
    assert list(combinations_with_replacement("abc", 2)) == [
        ["a", "a"],
        ["a", "b"],
        ["a", "c"],
        ["b", "b"],
        ["b", "c"],
        ["c", "c"],
    ]


def test_cwr_edge_cases():
    assert list(combinations_with_replacement([], 0)) == [[]]
    assert list(combinations_with_replacement([], 1)) == []
    assert list(combinations_with_replacement([7], 3)) == [[7, 7, 7]]


def test_cwr_lazy_over_infinite_source():
    it = combinations_with_replacement(itertools.count(), 2)
    assert [next(it) for _ in range(3)] == [[0, 0], [0, 1], [0, 2]]


def test_cwr_count_fresh():
    assert combinations_with_replacement(range(4), 6).count() == 84
    assert combinations_with_replacement([], 0).count() == 1
    assert combinations_with_replacement([], 2).count() == 0


small_lists = st.lists(st.integers(min_value=0, max_value=255), max_size=8)


@settings(max_examples=60)
@given(small_lists, st.integers(min_value=0, max_value=3))
def test_combinations_match_stdlib(values, k):
    expected = [list(c) for c in itertools.combinations(values, k)]
    assert list(combinations(values, k)) == expected


@settings(max_examples=60)
@given(small_lists, st.integers(min_value=0, max_value=3), st.integers(0, 6))
def test_combinations_count_after_advancing(values, k, steps):
    total = len(list(combinations(values, k)))
    it = Combinations(values, k)
    for _ in itertools.islice(it, steps):
        pass
    rest = Combinations(values, k)
    for _ in itertools.islice(rest, steps):
        pass
    assert it.count() == len(list(rest))
    assert len(list(rest)) == 0
    assert total == binomial(len(values), k)


@settings(max_examples=60)
@given(st.lists(st.integers(0, 255), max_size=7), st.integers(0, 3))
def test_cwr_match_stdlib(values, k):
    expected = [list(c) for c in itertools.combinations_with_replacement(values, k)]
    if not values and k == 0:
        expected = [[]]
    assert list(combinations_with_replacement(values, k)) == expected


@settings(max_examples=60)
@given(st.lists(st.integers(0, 255), max_size=7), st.integers(0, 3), st.integers(0, 6))
def test_cwr_count_after_advancing(values, k, steps):
    counted = CombinationsWithReplacement(values, k)
    listed = CombinationsWithReplacement(values, k)
    for _ in itertools.islice(counted, steps):
        pass
    for _ in itertools.islice(listed, steps):
        pass
    assert counted.count() == len(list(listed))
import itertools
import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.coalesce import (
    coalesce,
    dedup,
    dedup_by,
    dedup_by_with_count,
    dedup_with_count,
)
from iterkit.results import Err, Ok

small_lists = st.lists(st.integers(min_value=0, max_value=5), max_size=30)


def _join_equal(x, y):
    return Ok(x) if x == y else Err((x, y))


def _same_sign(x, y):
    if (x >= 0.0) == (y >= 0.0):
        return Ok(x + y)
    return Err((x, y))


def test_coalesce_sums_runs_of_same_sign():
    data = [-1.0, -2.0, -3.0, 3.0, 1.0, 0.0, -1.0]
    assert list(coalesce(data, _same_sign)) == [-6.0, 4.0, -1.0]


def test_coalesce_empty_input():
    assert list(coalesce([], _join_equal)) == []


def test_coalesce_single_element():
    assert list(coalesce([7], _join_equal)) == [7]


def test_coalesce_is_lazy_on_infinite_input():
    pairs = coalesce(itertools.count(), lambda x, y: Err((x, y)))
    assert list(itertools.islice(pairs, 4)) == [0, 1, 2, 3]


def test_coalesce_rejects_bad_return():
    with pytest.raises(TypeError):
        list(coalesce([1, 2], lambda x, y: x + y))


def test_coalesce_is_fused():
    it = coalesce([1, 1, 2], _join_equal)
    assert list(it) == [1, 2]
    assert next(it, "end") == "end"


@given(small_lists)
def test_coalesce_with_equality_matches_dedup(values):
    assert list(coalesce(values, _join_equal)) == list(dedup(values))


@given(small_lists)
def test_dedup_matches_groupby_keys(values):
    assert list(dedup(values)) == [k for k, _ in itertools.groupby(values)]


@given(small_lists)
def test_dedup_has_no_adjacent_equal(values):
    out = list(dedup(values))
    assert all(a != b for a, b in zip(out, out[1:]))
    assert set(out) == set(values)


def test_dedup_example():
    assert list(dedup([1, 1, 2, 3, 3, 3, 1])) == [1, 2, 3, 1]


def test_dedup_by_compares_with_first_of_run():
    assert list(dedup_by([1, 0, 2, 1], operator.ge)) == [1, 2]


@given(small_lists)
def test_dedup_by_ge_yields_strictly_increasing(values):
    out = list(dedup_by(values, operator.ge))
    assert all(a < b for a, b in zip(out, out[1:]))
    if values:
        assert out[0] == values[0]


@given(small_lists)
def test_dedup_with_count_expands_back(values):
    runs = list(dedup_with_count(values))
    expanded = [item for count, item in runs for _ in range(count)]
    assert expanded == values
    assert [item for _, item in runs] == list(dedup(values))


def test_dedup_with_count_example():
    assert list(dedup_with_count("aabccc")) == [(2, "a"), (1, "b"), (3, "c")]


@given(small_lists)
def test_dedup_by_with_count_totals(values):
    runs = list(dedup_by_with_count(values, operator.ge))
    assert sum(count for count, _ in runs) == len(values)
    assert [item for _, item in runs] == list(dedup_by(values, operator.ge))


@given(small_lists)
def test_count_after_advancing_matches_remaining(values):
    full = list(dedup(values))
    for skip in range(min(len(full), 5) + 1):
        it = dedup(values)
        for _ in range(skip):
            next(it)
        assert list(it) == full[skip:]
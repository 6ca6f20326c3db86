import pytest
from hypothesis import given
from hypothesis import strategies as st

from iterkit.duplicates import duplicates, duplicates_by


def test_duplicates_basic():
    assert list(duplicates([1, 2, 1, 3, 2, 1])) == [1, 2]


def test_duplicates_order_is_second_occurrence():
    assert list(duplicates([3, 1, 1, 3])) == [1, 3]


def test_duplicates_none():
    assert list(duplicates([1, 2, 3])) == []


def test_duplicates_is_lazy():
    gen = duplicates(iter([1, 1, 2]))
    assert next(gen) == 1
    with pytest.raises(StopIteration):
        next(gen)


def test_duplicates_by_key():
    assert list(duplicates_by([1, 11, 2, 21, 31], lambda x: x % 10)) == [11]


def test_duplicates_unhashable_raises():
    with pytest.raises(TypeError):
        list(duplicates([[1], [1]]))


@given(st.lists(st.integers(min_value=0, max_value=20)))
def test_duplicates_invariants(values):
    out = list(duplicates(values))
    assert len(out) == len(set(out))
    assert set(out) == {v for v in values if values.count(v) >= 2}


@given(st.lists(st.integers(min_value=0, max_value=255)))
def test_duplicates_by_invariants(values):
    out = list(duplicates_by(values, lambda x: x % 10))
    keys = [x % 10 for x in out]
    assert len(keys) == len(set(keys))
    all_keys = [v % 10 for v in values]
    assert set(keys) == {k for k in all_keys if all_keys.count(k) >= 2}
"""All minimal or maximal elements of an iterable, ties kept in order."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _min_set_impl(
    iterable: Iterable[T],
    key_for: Callable[[T], K],
    compare: Callable[[T, T, K, K], int],
) -> List[T]:
    it = iter(iterable)
    try:
        first = next(it)
    except StopIteration:
        return []
    current_key = key_for(first)
    result = [first]
    for element in it:
        key = key_for(element)
        order = compare(element, result[0], key, current_key)
        if order < 0:
            result = [element]
            current_key = key
        elif order == 0:
            result.append(element)
    return result


def _max_set_impl(
    iterable: Iterable[T],
    key_for: Callable[[T], K],
    compare: Callable[[T, T, K, K], int],
) -> List[T]:
    return _min_set_impl(
        iterable, key_for, lambda e1, e2, k1, k2: compare(e2, e1, k2, k1)
    )


def _identity(x: T) -> T:
    return x


def _by_key(_e1: Any, _e2: Any, k1: Any, k2: Any) -> int:
    return _cmp(k1, k2)


def min_set(iterable: Iterable[T], key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """Every element whose key is minimal, in the order they appear."""
    return _min_set_impl(iterable, key or _identity, _by_key)


def max_set(iterable: Iterable[T], key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """Every element whose key is maximal, in the order they appear."""
    return _max_set_impl(iterable, key or _identity, _by_key)


def min_set_by(iterable: Iterable[T], compare: Callable[[T, T], int]) -> List[T]:
    """Every minimal element under ``compare`` (negative, zero or positive result)."""
    return _min_set_impl(iterable, _identity, lambda e1, e2, _k1, _k2: compare(e1, e2))


def max_set_by(iterable: Iterable[T], compare: Callable[[T, T], int]) -> List[T]:
    """Every maximal element under ``compare`` (negative, zero or positive result)."""
    return _max_set_impl(iterable, _identity, lambda e1, e2, _k1, _k2: compare(e1, e2))
"""Yield the elements that occur more than once, each a single time."""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T")


def duplicates_by(iterable: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield each element whose key was already seen, once per key.

    The element yielded is the second one with that key, at the moment it is met.
    """
    produced: Dict[Any, bool] = {}
    for item in iterable:
        k = key(item)
        state = produced.get(k)
        if state is None:
            produced[k] = False
        elif not state:
            produced[k] = True
            yield item


def duplicates(iterable: Iterable[T]) -> Iterator[T]:
    """Yield each element that occurs more than once, on its second occurrence."""
    return duplicates_by(iterable, lambda item: item)
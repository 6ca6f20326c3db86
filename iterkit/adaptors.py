"""General iterator adaptors: interleaving, products, batching, stepping and more."""

from __future__ import annotations

import itertools
from collections import deque
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
)

from iterkit.putback import PutBack

T = TypeVar("T")
U = TypeVar("U")

_END: Any = object()


def interleave(i: Iterable[T], j: Iterable[T]) -> Iterator[T]:
    """Alternate elements from ``i`` and ``j``; once one runs out, finish the other."""
    a = iter(i)
    b = iter(j)
    while True:
        x = next(a, _END)
        if x is _END:
            yield from b
            return
        yield x
        y = next(b, _END)
        if y is _END:
            yield from a
            return
        yield y


def interleave_shortest(i: Iterable[T], j: Iterable[T]) -> Iterator[T]:
    """Alternate elements from ``i`` and ``j``, stopping as soon as the one due runs out."""
    a = iter(i)
    b = iter(j)
    while True:
        x = next(a, _END)
        if x is _END:
            return
        yield x
        y = next(b, _END)
        if y is _END:
            return
        yield y


def cartesian_product(i: Iterable[T], j: Iterable[U]) -> Iterator[Tuple[T, U]]:
    """Every pair ``(a, b)`` with ``a`` from ``i`` and ``b`` from ``j``, ``b`` varying fastest.

    ``j`` is read in full when iteration starts; ``i`` is read lazily and not at
    all when ``j`` is empty.
    """
    it_i = iter(i)
    pool = tuple(j)
    if not pool:
        return
    for a in it_i:
        for b in pool:
            yield a, b


def batching(
    iterable: Iterable[T], f: Callable[[Iterator[T]], Optional[U]]
) -> Iterator[U]:
    """Call ``f`` with the underlying iterator repeatedly, yielding its results until None."""
    it = iter(iterable)
    while True:
        value = f(it)
        if value is None:
            return
        yield value


def step(iterable: Iterable[T], n: int) -> Iterator[T]:
    """Yield the first element, then every ``n``-th after it; ``n`` must be positive."""
    if n <= 0:
        raise ValueError("step must be positive")
    return _step(iter(iterable), n)


def _step(it: Iterator[T], n: int) -> Iterator[T]:
    for element in it:
        yield element
        deque(itertools.islice(it, n - 1), maxlen=0)


def take_while_ref(iterator: PutBack[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Yield from ``iterator`` while ``predicate`` holds.

    The first element rejected is put back onto ``iterator``, so it remains
    available to the caller afterwards.
    """
    if not isinstance(iterator, PutBack):
        raise TypeError("take_while_ref needs a PutBack iterator to restore the rejected element")
    return _take_while_ref(iterator, predicate)


def _take_while_ref(iterator: PutBack[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    while True:
        element = next(iterator, _END)
        if element is _END:
            return
        if not predicate(element):
            iterator.put_back(element)
            return
        yield element


def while_some(iterable: Iterable[Optional[T]]) -> Iterator[T]:
    """Yield elements up to, not including, the first None."""
    for element in iterable:
        if element is None:
            return
        yield element


def tuple_combinations(iterable: Iterable[T], k: int) -> Iterator[Tuple[T, ...]]:
    """Every ``k``-element combination of ``iterable`` as a tuple; ``k`` must be at least 1."""
    if k < 1:
        raise ValueError("tuple combinations need at least one element per tuple")
    return itertools.combinations(iterable, k)


def positions(iterable: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[int]:
    """The indices of the elements for which ``predicate`` holds."""
    for index, element in enumerate(iterable):
        if predicate(element):
            yield index


def update(iterable: Iterable[T], f: Callable[[T], Any]) -> Iterator[T]:
    """Call ``f`` on each element, which it may change in place, then yield the element."""
    for element in iterable:
        f(element)
        yield element
"""Lazy combinations, with and without replacement, and binomial coefficients."""

from __future__ import annotations

import math
from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def binomial(n: int, k: int) -> int:
    """The number of ways to choose ``k`` items out of ``n``; zero when ``k > n``."""
    if n < 0 or k < 0:
        raise ValueError("binomial arguments must be non-negative")
    return math.comb(n, k)


class _LazyBuffer(Generic[T]):
    """Elements drawn from an iterator only as they are needed, kept for reuse."""

    def __init__(self, iterable: Iterable[T]) -> None:
        self._it: Iterator[T] = iter(iterable)
        self._buffer: List[T] = []
        self._done = False

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index: int) -> T:
        return self._buffer[index]

    def get_next(self) -> bool:
        """Pull one more element into the buffer; False once the source is spent."""
        if self._done:
            return False
        try:
            self._buffer.append(next(self._it))
        except StopIteration:
            self._done = True
            return False
        return True

    def prefill(self, size: int) -> None:
        """Pull elements until the buffer holds ``size`` or the source is spent."""
        while len(self._buffer) < size and self.get_next():
            pass

    def count(self) -> int:
        """Total number of elements, buffered and still to come; drains the source."""
        remaining = 0 if self._done else sum(1 for _ in self._it)
        self._done = True
        return len(self._buffer) + remaining


def _check_k(k: int) -> None:
    if k < 0:
        raise ValueError("combination length must be non-negative")


class Combinations(Generic[T]):
    """Every ``k``-length combination of an iterable's elements, in lexicographic order."""

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        _check_k(k)
        self._indices: List[int] = list(range(k))
        self._pool: _LazyBuffer[T] = _LazyBuffer(iterable)
        self._first = True

    def k(self) -> int:
        """Length of each combination produced."""
        return len(self._indices)

    def n(self) -> int:
        """Number of source elements drawn so far; may grow while iterating."""
        return len(self._pool)

    def __iter__(self) -> "Combinations[T]":
        return self

    def __next__(self) -> List[T]:
        indices = self._indices
        pool = self._pool
        k = len(indices)
        if self._first:
            pool.prefill(k)
            if k > len(pool):
                raise StopIteration
            self._first = False
        elif not indices:
            raise StopIteration
        else:
            i = k - 1
            if indices[i] == len(pool) - 1:
                pool.get_next()
            while indices[i] == i + len(pool) - k:
                if i == 0:
                    raise StopIteration
                i -= 1
            indices[i] += 1
            indices[i + 1 :] = range(indices[i] + 1, indices[i] + k - i)
        return [pool[index] for index in indices]

    def _remaining_for(self, n: int) -> int:
        k = len(self._indices)
        if n < k:
            return 0
        if self._first:
            return binomial(n, k)
        return sum(
            binomial(n - 1 - n0, k - i) for i, n0 in enumerate(self._indices)
        )

    def count(self) -> int:
        """Number of combinations still to come; exhausts the iterator."""
        n = self._pool.count()
        result = self._remaining_for(n)
        self._first = False
        self._indices = []
        return result


def combinations(iterable: Iterable[T], k: int) -> Combinations[T]:
    """Lazily produce every ``k``-length combination of ``iterable`` as a list."""
    return Combinations(iterable, k)


class CombinationsWithReplacement(Generic[T]):
    """Every ``k``-length combination of an iterable's elements, repetition allowed."""

    def __init__(self, iterable: Iterable[T], k: int) -> None:
        _check_k(k)
        self._indices: List[int] = [0] * k
        self._pool: _LazyBuffer[T] = _LazyBuffer(iterable)
        self._first = True

    def __iter__(self) -> "CombinationsWithReplacement[T]":
        return self

    def _current(self) -> List[T]:
        return [self._pool[index] for index in self._indices]

    def __next__(self) -> List[T]:
        if self._first:
            if not (not self._indices or self._pool.get_next()):
                raise StopIteration
            self._first = False
            return self._current()

        self._pool.get_next()
        top = len(self._pool) - 1
        for i in reversed(range(len(self._indices))):
            value = self._indices[i]
            if value < top:
                self._indices[i:] = [value + 1] * (len(self._indices) - i)
                return self._current()
        raise StopIteration

    def _remaining_for(self, n: int) -> int:
        def count(n: int, k: int) -> int:
            positions = max(k - 1, 0) if n == 0 else n - 1 + k
            return binomial(positions, k)

        k = len(self._indices)
        if self._first:
            return count(n, k)
        return sum(count(n - 1 - n0, k - i) for i, n0 in enumerate(self._indices))

    def count(self) -> int:
        """Number of combinations still to come; exhausts the iterator."""
        n = self._pool.count()
        result = self._remaining_for(n)
        self._first = False
        self._indices = []
        return result


def combinations_with_replacement(
    iterable: Iterable[T], k: int
) -> CombinationsWithReplacement[T]:
    """Lazily produce every ``k``-length multiset of ``iterable``'s elements as a list."""
    return CombinationsWithReplacement(iterable, k)
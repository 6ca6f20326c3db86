"""An iterator that lets a single value be pushed back onto its front."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")

_EMPTY: Any = object()


class PutBack(Generic[T]):
    """Wraps an iterator and holds at most one value to yield before it."""

    __slots__ = ("_top", "_iter")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._top: Any = _EMPTY
        self._iter: Iterator[T] = iter(iterable)

    def with_value(self, value: T) -> "PutBack[T]":
        """Put ``value`` back and return this iterator, for chaining."""
        self.put_back(value)
        return self

    def into_parts(self) -> Tuple[Optional[T], Iterator[T]]:
        """The put-back value (None if there is none) and the wrapped iterator."""
        top = None if self._top is _EMPTY else self._top
        return top, self._iter

    def put_back(self, value: T) -> None:
        """Make ``value`` the next element; a value already put back is replaced."""
        self._top = value

    def __iter__(self) -> "PutBack[T]":
        return self

    def __next__(self) -> T:
        if self._top is _EMPTY:
            return next(self._iter)
        value = self._top
        self._top = _EMPTY
        return value

    def __repr__(self) -> str:
        top = "<empty>" if self._top is _EMPTY else repr(self._top)
        return f"PutBack(top={top}, iter={self._iter!r})"


def put_back(iterable: Iterable[T]) -> PutBack[T]:
    """Wrap ``iterable`` in an iterator that accepts one put-back value."""
    return PutBack(iterable)
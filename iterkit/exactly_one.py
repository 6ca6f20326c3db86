"""Take the single element of an iterable, or fail with the elements kept."""

from __future__ import annotations

from collections import deque
from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class ExactlyOneError(ValueError, Generic[T]):
    """Raised when an iterable does not hold exactly one element.

    Iterating the error yields every element of the original iterable,
    including those already consumed while checking.
    """

    def __init__(self, first_two: Sequence[T], inner: Iterator[T]) -> None:
        if first_two:
            message = "got at least 2 elements when exactly one was expected"
        else:
            message = "got zero elements when exactly one was expected"
        super().__init__(message)
        self._pending: deque = deque(first_two)
        self._inner = inner

    def __iter__(self) -> "ExactlyOneError[T]":
        return self

    def __next__(self) -> T:
        if self._pending:
            return self._pending.popleft()
        return next(self._inner)


def _first_two(iterable: Iterable[T]):
    it = iter(iterable)
    first = next(it, _MISSING)
    if first is _MISSING:
        return it, ()
    second = next(it, _MISSING)
    if second is _MISSING:
        return it, (first,)
    return it, (first, second)


def exactly_one(iterable: Iterable[T]) -> T:
    """Return the only element; raise :class:`ExactlyOneError` otherwise."""
    it, head = _first_two(iterable)
    if len(head) == 1:
        return head[0]
    raise ExactlyOneError(head, it)


def at_most_one(iterable: Iterable[T]) -> Optional[T]:
    """Return the only element, or None if empty; raise on two or more."""
    it, head = _first_two(iterable)
    if len(head) == 2:
        raise ExactlyOneError(head, it)
    return head[0] if head else None
"""Cartesian product of any number of iterables, yielding lists."""

from __future__ import annotations

from typing import Any, Generic, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

_NONE: Any = object()


class _Slot(Generic[T]):
    """One factor of the product: its values, read position and current value."""

    __slots__ = ("values", "pos", "cur")

    def __init__(self, values: Sequence[T]) -> None:
        self.values = values
        self.pos = 0
        self.cur: Any = _NONE

    def iterate(self) -> None:
        if self.pos < len(self.values):
            self.cur = self.values[self.pos]
            self.pos += 1
        else:
            self.cur = _NONE

    def reset(self) -> None:
        self.pos = 0

    def in_progress(self) -> bool:
        return self.cur is not _NONE

    def remaining(self) -> int:
        return len(self.values) - self.pos


def _iterate_last(slots: List[_Slot], on_first: Optional[bool]) -> bool:
    """Advance the rightmost slot, carrying into the slots to its left.

    ``on_first`` is None at the start of a step, then whether this is the first step.
    """
    if not slots:
        return False if on_first is None else on_first
    *rest, last = slots
    if on_first is None:
        on_first = not last.in_progress()
    if not on_first:
        last.iterate()
    if last.in_progress():
        return True
    if _iterate_last(rest, on_first):
        last.reset()
        last.iterate()
        return last.in_progress()
    return False


class MultiProduct(Generic[T]):
    """Every combination taking one element from each iterable, last varying fastest.

    Each iterable is read in full when the product is built. With no iterables
    the product yields nothing.
    """

    def __init__(self, iterables: Iterable[Iterable[T]]) -> None:
        self._slots: List[_Slot[T]] = [_Slot(tuple(values)) for values in iterables]
        self._done = False

    def __iter__(self) -> "MultiProduct[T]":
        return self

    def __next__(self) -> List[T]:
        if self._done or not _iterate_last(self._slots, None):
            self._done = True
            raise StopIteration
        return [slot.cur for slot in self._slots]

    def _in_progress(self) -> bool:
        return bool(self._slots) and self._slots[-1].in_progress()

    def count(self) -> int:
        """Number of combinations still to come; exhausts the iterator."""
        if self._done or not self._slots:
            total = 0
        elif not self._in_progress():
            total = 1
            for slot in self._slots:
                total *= slot.remaining()
        else:
            total = 0
            for slot in self._slots:
                total = total * len(slot.values) + slot.remaining()
        self._done = True
        return total

    def last(self) -> Optional[List[T]]:
        """The final combination still to come, or None; exhausts the iterator."""
        result: Optional[List[T]] = None
        for result in self:
            pass
        return result


def multi_cartesian_product(iterables: Iterable[Iterable[T]]) -> MultiProduct[T]:
    """Lazily produce the cartesian product of ``iterables`` as lists."""
    return MultiProduct(iterables)
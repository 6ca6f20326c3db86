"""Join adjacent elements of an iterable, and drop repeated runs."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, Tuple, TypeVar

from iterkit.results import Err, Ok

T = TypeVar("T")
C = TypeVar("C")


def _coalesce_by(
    iterable: Iterable[T],
    start: Callable[[T], C],
    join: Callable[[C, T], Any],
) -> Iterator[C]:
    it = iter(iterable)
    try:
        last = start(next(it))
    except StopIteration:
        return
    for item in it:
        outcome = join(last, item)
        if isinstance(outcome, Ok):
            last = outcome.value
        elif isinstance(outcome, Err):
            done, last = outcome.error
            yield done
        else:
            raise TypeError(
                f"coalesce function must return Ok or Err, got {type(outcome).__name__}"
            )
    yield last


def _identity(item: T) -> T:
    return item


def coalesce(iterable: Iterable[T], f: Callable[[T, T], Any]) -> Iterator[T]:
    """Merge neighbouring elements with ``f``.

    ``f(previous, current)`` returns ``Ok(joined)`` to merge the two, or
    ``Err((previous, current))`` to yield ``previous`` and carry on from ``current``.
    """
    return _coalesce_by(iterable, _identity, f)


def dedup_by(iterable: Iterable[T], same: Callable[[T, T], bool]) -> Iterator[T]:
    """Drop each element for which ``same(kept, element)`` holds, ``kept`` being the
    first element of the current run."""

    def join(kept: T, item: T) -> Any:
        return Ok(kept) if same(kept, item) else Err((kept, item))

    return _coalesce_by(iterable, _identity, join)


def dedup(iterable: Iterable[T]) -> Iterator[T]:
    """Collapse runs of equal elements to their first element."""
    return dedup_by(iterable, operator.eq)


def dedup_by_with_count(
    iterable: Iterable[T], same: Callable[[T, T], bool]
) -> Iterator[Tuple[int, T]]:
    """Like :func:`dedup_by`, yielding ``(run_length, first_element)`` pairs."""

    def start(item: T) -> Tuple[int, T]:
        return 1, item

    def join(run: Tuple[int, T], item: T) -> Any:
        count, kept = run
        if same(kept, item):
            return Ok((count + 1, kept))
        return Err(((count, kept), (1, item)))

    return _coalesce_by(iterable, start, join)


def dedup_with_count(iterable: Iterable[T]) -> Iterator[Tuple[int, T]]:
    """Collapse runs of equal elements to ``(run_length, element)`` pairs."""
    return dedup_by_with_count(iterable, operator.eq)
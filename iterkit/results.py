"""Adaptors over iterables of ``Ok``/``Err`` results, and element conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A successful result carrying ``value``."""

    value: T

    def is_ok(self) -> bool:
        """Always True."""
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed result carrying ``error``."""

    error: E

    def is_ok(self) -> bool:
        """Always False."""
        return False


Result = Union[Ok[T], Err[E]]


def _check(item: Any) -> None:
    if not isinstance(item, (Ok, Err)):
        raise TypeError(f"expected Ok or Err, got {type(item).__name__}")


def map_ok(iterable: Iterable[Result], f: Callable[[Any], Any]) -> Iterator[Result]:
    """Apply ``f`` to every ``Ok`` value; ``Err`` items pass through unchanged."""
    for item in iterable:
        _check(item)
        yield Ok(f(item.value)) if isinstance(item, Ok) else item


def filter_ok(iterable: Iterable[Result], predicate: Callable[[Any], bool]) -> Iterator[Result]:
    """Keep the ``Ok`` items whose value satisfies ``predicate``, and every ``Err``."""
    for item in iterable:
        _check(item)
        if isinstance(item, Err) or predicate(item.value):
            yield item


def filter_map_ok(
    iterable: Iterable[Result], f: Callable[[Any], Optional[Any]]
) -> Iterator[Result]:
    """Map ``Ok`` values through ``f``, dropping those for which it returns None."""
    for item in iterable:
        _check(item)
        if isinstance(item, Err):
            yield item
            continue
        mapped = f(item.value)
        if mapped is not None:
            yield Ok(mapped)


def flatten_ok(iterable: Iterable[Result]) -> Iterator[Result]:
    """Yield ``Ok(x)`` for each ``x`` inside every ``Ok`` value; ``Err`` passes through."""
    for item in iterable:
        _check(item)
        if isinstance(item, Err):
            yield item
        else:
            for inner in item.value:
                yield Ok(inner)


def map_into(iterable: Iterable[T], target: Callable[[T], U]) -> Iterator[U]:
    """Convert every element with ``target``, typically a type such as ``float``."""
    for item in iterable:
        yield target(item)
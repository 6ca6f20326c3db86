"""Joining the items of an iterable into one, and flattening nested tuples."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Iterator, Tuple


def _extend(acc: Any, items: Any) -> Any:
    if hasattr(acc, "extend"):
        acc.extend(items)
        return acc
    if hasattr(acc, "update"):
        acc.update(items)
        return acc
    if isinstance(acc, frozenset):
        return acc | frozenset(items)
    return acc + items


def concat(iterable: Iterable[Any], default: Any = None) -> Any:
    """Extend the first item with each later item; ``default`` if there are none.

    The first item is copied before being extended, so the input is left intact.
    """
    it = iter(iterable)
    try:
        first = next(it)
    except StopIteration:
        return default
    acc = copy.copy(first)
    for item in it:
        acc = _extend(acc, item)
    return acc


def cons_tuples(iterable: Iterable[Tuple[Tuple[Any, ...], Any]]) -> Iterator[Tuple[Any, ...]]:
    """Map items shaped ``((a, b, ...), x)`` to ``(a, b, ..., x)``."""
    for head, last in iterable:
        yield (*head, last)
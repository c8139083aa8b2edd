"""Small generic utilities shared by resources."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

T = TypeVar("T")


def max_by(items: Iterable[T], key: Callable[[T], float]) -> T:
    """Return the first item with the largest key.

    Ties keep the earliest item, so callers control tie-breaking through
    iteration order.

    Raises:
        ValueError: If `items` is empty.
    """
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        msg = "max_by() arg is an empty iterable"
        raise ValueError(msg) from None
    best_key = key(best)
    for item in iterator:
        item_key = key(item)
        if item_key > best_key:
            best, best_key = item, item_key
    return best


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up."""
    return math.floor(value + 0.5)

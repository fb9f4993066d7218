"""Helpers for working with lists and other sequences."""

from __future__ import annotations

import builtins
import functools
import itertools
import random
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

__all__ = [
    "ArrayError",
    "range",
    "chunk",
    "first",
    "last",
    "count_by",
    "diff",
    "fork",
    "max",
    "min",
    "sum",
    "sum_direct",
    "unique",
    "shuffle",
    "find_index",
    "find",
    "some",
    "every",
    "filter",
    "map",
    "reduce",
    "includes",
    "index_of",
    "join",
    "reverse",
    "slice",
    "concat",
    "flat",
]


class ArrayError(ValueError):
    """Raised when an array helper receives invalid arguments."""


def range(start: int, end: int | None = None, step: int | None = None) -> list[int]:
    """Return integers from start up to end (exclusive).

    With no end the range is [0, start). A step of zero raises ArrayError.
    """
    step = 1 if step is None else step
    if step == 0:
        raise ArrayError("Step cannot be zero")
    if end is None:
        start, end = 0, start
    return list(builtins.range(start, end, step))


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into lists of at most size elements."""
    if size <= 0 or not items:
        return []
    return [list(items[i : i + size]) for i in builtins.range(0, len(items), size)]


def first(items: Sequence[T], default: T) -> T:
    """Return the first element, or default when items is empty."""
    return items[0] if items else default


def last(items: Sequence[T], default: T) -> T:
    """Return the last element, or default when items is empty."""
    return items[-1] if items else default


def count_by(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, int]:
    """Count items grouped by the key that key_fn gives each of them."""
    return dict(Counter(key_fn(item) for item in items))


def diff(
    root: Iterable[T],
    other: Iterable[T],
    key_fn: Callable[[T], Hashable] | None = None,
) -> list[T]:
    """Return the items of root whose key does not occur among other's keys."""
    if key_fn is None:
        other_items = set(other)
        return [item for item in root if item not in other_items]
    other_keys = {key_fn(item) for item in other}
    return [item for item in root if key_fn(item) not in other_keys]


def fork(items: Iterable[T], condition: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """Split items into those that satisfy condition and those that do not."""
    matching: list[T] = []
    rest: list[T] = []
    for item in items:
        (matching if condition(item) else rest).append(item)
    return matching, rest


def max(items: Iterable[T], getter: Callable[[T], Any] | None = None) -> T | None:
    """Return the largest item, or None when there are none.

    On ties the last of the equal items is returned.
    """
    return builtins.max(reversed(list(items)), key=getter, default=None)


def min(items: Iterable[T], getter: Callable[[T], Any] | None = None) -> T | None:
    """Return the smallest item, or None when there are none.

    On ties the first of the equal items is returned.
    """
    return builtins.min(items, key=getter, default=None)


def sum(items: Iterable[T], getter: Callable[[T], Any]) -> Any:
    """Sum the values that getter extracts from each item."""
    return builtins.sum(getter(item) for item in items)


def sum_direct(items: Iterable[Any]) -> Any:
    """Sum numeric items directly."""
    return builtins.sum(items)


def unique(
    items: Iterable[T], key_fn: Callable[[T], Hashable] | None = None
) -> list[T]:
    """Return items with duplicates removed, keeping first occurrences.

    Uniqueness is judged by key_fn, or by the items themselves.
    """
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in items:
        item_key = item if key_fn is None else key_fn(item)
        if item_key not in seen:
            seen.add(item_key)
            result.append(item)
    return result


def shuffle(items: Sequence[T]) -> list[T]:
    """Return a new list holding items in random order."""
    return random.sample(list(items), len(items))


def find_index(items: Iterable[T], predicate: Callable[[T], bool]) -> int | None:
    """Return the index of the first item matching predicate, or None."""
    return next((i for i, item in enumerate(items) if predicate(item)), None)


def find(items: Iterable[T], predicate: Callable[[T], bool]) -> T | None:
    """Return the first item matching predicate, or None."""
    return next((item for item in items if predicate(item)), None)


def some(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if any item matches predicate."""
    return any(predicate(item) for item in items)


def every(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if every item matches predicate."""
    return all(predicate(item) for item in items)


def filter(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the items that match predicate."""
    return [item for item in items if predicate(item)]


def map(items: Iterable[T], transform: Callable[[T], U]) -> list[U]:
    """Return transform applied to each item."""
    return [transform(item) for item in items]


def reduce(items: Iterable[T], initial: U, reducer: Callable[[U, T], U]) -> U:
    """Fold items into one value, starting from initial."""
    return functools.reduce(reducer, items, initial)


def includes(items: Iterable[T], element: T) -> bool:
    """Return True if element is among items."""
    return element in items


def index_of(items: Iterable[T], element: T) -> int | None:
    """Return the index of the first item equal to element, or None."""
    return next((i for i, item in enumerate(items) if item == element), None)


def join(items: Iterable[Any], separator: str) -> str:
    """Join the string forms of items with separator."""
    return separator.join(str(item) for item in items)


def reverse(items: Sequence[T]) -> list[T]:
    """Return a new list with items in reverse order."""
    return list(reversed(items))


def slice(items: Sequence[T], start: int, end: int | None = None) -> list[T]:
    """Return items from start up to end, with both bounds clamped to the length."""
    length = len(items)
    start_idx = builtins.min(start, length)
    end_idx = length if end is None else builtins.min(end, length)
    if start_idx >= end_idx:
        return []
    return list(items[start_idx:end_idx])


def concat(arrays: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate several sequences into one list."""
    return list(itertools.chain.from_iterable(arrays))


def flat(nested: Iterable[Iterable[T]]) -> list[T]:
    """Flatten nested sequences by one level."""
    return list(itertools.chain.from_iterable(nested))
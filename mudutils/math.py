"""Random number helpers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

__all__ = ["MathError", "random_int", "random_int_max", "get_random_item_from_array"]


class MathError(ValueError):
    """Raised when a math helper receives an invalid argument."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid argument: {message}")

    def __reduce__(self):
        return (type(self), (self.message,))


def random_int(start: int, end: int) -> int:
    """Return a random integer in [start, end)."""
    if start >= end:
        raise MathError("start should be less than end")
    return random.randrange(start, end)


def random_int_max(max_value: int) -> int:
    """Return a random integer in [0, max_value)."""
    if max_value <= 0:
        raise MathError("max should be greater than 0")
    return random_int(0, max_value)


def get_random_item_from_array(items: Sequence[T]) -> T:
    """Return a randomly chosen element of items."""
    if not items:
        raise MathError("array should not be empty")
    return random.choice(items)
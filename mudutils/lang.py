"""Value inspection and string classification helpers."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

__all__ = [
    "is_empty",
    "is_zero",
    "is_some",
    "is_none",
    "get_type_name",
    "is_equal",
    "is_numeric",
    "is_alphabetic",
    "is_alphanumeric",
    "is_identifier",
]


def is_empty(value: Any) -> bool:
    """Return True for None and for empty strings or collections."""
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_zero(value: float) -> bool:
    """Return True if the number equals zero."""
    return value == 0


def is_some(value: Any) -> bool:
    """Return True if value is not None."""
    return value is not None


def is_none(value: Any) -> bool:
    """Return True if value is None."""
    return value is None


def get_type_name(value: Any) -> str:
    """Return the name of the value's type, qualified unless it is built in."""
    kind = type(value)
    if kind.__module__ == "builtins":
        return kind.__qualname__
    return f"{kind.__module__}.{kind.__qualname__}"


def is_equal(a: Any, b: Any) -> bool:
    """Return True if a equals b."""
    return a == b


def is_numeric(text: str) -> bool:
    """Return True if text is non-empty and made only of ASCII digits."""
    return bool(text) and all("0" <= ch <= "9" for ch in text)


def is_alphabetic(text: str) -> bool:
    """Return True if text is non-empty and made only of letters."""
    return text.isalpha()


def is_alphanumeric(text: str) -> bool:
    """Return True if text is non-empty and made only of letters and numerals."""
    return bool(text) and all(ch.isalpha() or ch.isnumeric() for ch in text)


def is_identifier(text: str) -> bool:
    """Return True if text starts with a letter or underscore and continues
    with letters, numerals or underscores."""
    if not text:
        return False
    head, rest = text[0], text[1:]
    if not (head.isalpha() or head == "_"):
        return False
    return all(ch.isalpha() or ch.isnumeric() or ch == "_" for ch in rest)
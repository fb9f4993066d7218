"""Conversion between byte counts and human-readable size strings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "BytesError",
    "ByteUnit",
    "BytesOptions",
    "Bytes",
    "bytes",
    "parse_bytes",
]

_U64_MAX = 2**64 - 1
_PATTERN = re.compile(r"([-+]?[0-9]+(?:\.[0-9]+)?)\s*(b|kb|mb|gb|tb|pb)?")


class BytesError(ValueError):
    """Raised when a byte value or byte string cannot be handled."""


class ByteUnit(Enum):
    """Binary byte units; each value is the unit's size in bytes."""

    B = 1
    KB = 1 << 10
    MB = 1 << 20
    GB = 1 << 30
    TB = 1 << 40
    PB = 1 << 50

    def __str__(self) -> str:
        return self.name

    def multiplier(self) -> int:
        """Return the number of bytes in one of this unit."""
        return self.value

    @classmethod
    def from_str(cls, text: str) -> ByteUnit:
        """Look up a unit by name, ignoring case."""
        try:
            return cls[text.upper()]
        except KeyError:
            raise BytesError(f"Invalid unit: {text}") from None


@dataclass
class BytesOptions:
    """Options controlling how a byte count is formatted."""

    unit: ByteUnit | None = None
    decimal_places: int = 2
    fixed_decimals: bool = False
    thousands_separator: str = ""
    unit_separator: str = ""


def _parse_plain_float(text: str) -> float | None:
    if "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _to_u64(number: float) -> int:
    if math.isnan(number) or number <= 0:
        return 0
    if number >= 2.0**64:
        return _U64_MAX
    return int(math.floor(number))


def _add_thousands_separator(num_str: str, separator: str) -> str:
    integer_part, dot, decimal_part = num_str.partition(".")
    groups = []
    while len(integer_part) > 3:
        groups.append(integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.append(integer_part)
    grouped = separator.join(reversed(groups))
    return f"{grouped}{dot}{decimal_part}"


def _auto_unit(num: float) -> ByteUnit:
    for unit in (ByteUnit.PB, ByteUnit.TB, ByteUnit.GB, ByteUnit.MB, ByteUnit.KB):
        if num >= float(unit.multiplier()):
            return unit
    return ByteUnit.B


class Bytes:
    """Formats byte counts as strings and parses them back."""

    def convert_number(self, value: int, options: BytesOptions | None = None) -> str:
        """Format a byte count as a string."""
        return self.format(value, options)

    def convert_string(self, value: str) -> int:
        """Parse a byte string into a byte count."""
        return self.parse(value)

    def parse(self, val: str) -> int:
        """Parse strings such as "100", "1KB" or "1.5 mb" into a byte count."""
        text = val.strip()

        plain = _parse_plain_float(text)
        if plain is not None:
            if plain < 0:
                raise BytesError("Parse error: Negative values not allowed")
            return _to_u64(plain)

        match = _PATTERN.fullmatch(text.lower())
        if match is None:
            raise BytesError(f"Parse error: Invalid format: {text}")

        number = float(match.group(1))
        if number < 0:
            raise BytesError("Parse error: Negative values not allowed")
        unit = ByteUnit.from_str(match.group(2) or "b")
        return _to_u64(number * unit.multiplier())

    def format(self, value: int, options: BytesOptions | None = None) -> str:
        """Format a byte count, choosing a unit unless options fix one."""
        if value < 0:
            raise BytesError(f"Invalid input: {value}")
        options = options or BytesOptions()

        num = float(value)
        unit = options.unit or _auto_unit(num)

        scaled = num / float(unit.multiplier())
        num_str = f"{scaled:.{options.decimal_places}f}"

        if not options.fixed_decimals and "." in num_str:
            num_str = num_str.rstrip("0").rstrip(".")

        if options.thousands_separator:
            num_str = _add_thousands_separator(num_str, options.thousands_separator)

        return f"{num_str}{options.unit_separator}{unit}"


_INSTANCE = Bytes()


def bytes(value: int) -> str:
    """Format a byte count with default options."""
    return _INSTANCE.convert_number(value)


def parse_bytes(value: str) -> int:
    """Parse a byte string into a byte count."""
    return _INSTANCE.convert_string(value)
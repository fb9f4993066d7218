"""Exception types shared across the package."""

from __future__ import annotations

__all__ = [
    "UtilsError",
    "ArgumentError",
    "ValidationError",
    "ConfigError",
    "NetworkError",
    "ParseError",
    "argument_error",
    "validation_error",
    "config_error",
    "network_error",
    "parse_error",
]


class UtilsError(Exception):
    """Base class of the package's errors."""


class ArgumentError(UtilsError):
    """A function received an invalid argument."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Argument error: {message}")

    def __reduce__(self):
        return (type(self), (self.message,))


class ValidationError(UtilsError):
    """A field failed validation."""

    def __init__(self, field: str, message: str, value: str | None = None) -> None:
        self.field = field
        self.message = message
        self.value = value
        detail = f" (value: '{value}')" if value is not None else ""
        super().__init__(f"Validation error for field '{field}': {message}{detail}")

    @classmethod
    def with_value(cls, field: str, message: str, value: str) -> ValidationError:
        """Create the error together with the offending value."""
        return cls(field, message, value)

    def __reduce__(self):
        return (type(self), (self.field, self.message, self.value))


class ConfigError(UtilsError):
    """A configuration key is missing or wrong."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        self.message = message
        super().__init__(f"Configuration error for key '{key}': {message}")

    def __reduce__(self):
        return (type(self), (self.key, self.message))


class NetworkError(UtilsError):
    """A network operation failed."""

    def __init__(
        self, operation: str, message: str, status_code: int | None = None
    ) -> None:
        self.operation = operation
        self.message = message
        self.status_code = status_code
        status = f" (status: {status_code})" if status_code is not None else ""
        super().__init__(f"Network error in '{operation}'{status}: {message}")

    @classmethod
    def with_status(
        cls, operation: str, message: str, status_code: int
    ) -> NetworkError:
        """Create the error together with a response status code."""
        return cls(operation, message, status_code)

    def __reduce__(self):
        return (type(self), (self.operation, self.message, self.status_code))


class ParseError(UtilsError):
    """Input could not be parsed."""

    def __init__(self, text: str, expected: str, position: int | None = None) -> None:
        self.input = text
        self.expected = expected
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Parse error{where}: expected '{expected}', got '{text}'")

    @classmethod
    def with_position(cls, text: str, expected: str, position: int) -> ParseError:
        """Create the error together with the position parsing stopped at."""
        return cls(text, expected, position)

    def __reduce__(self):
        return (type(self), (self.input, self.expected, self.position))


def argument_error(message: str) -> ArgumentError:
    """Create an ArgumentError."""
    return ArgumentError(message)


def validation_error(field: str, message: str) -> ValidationError:
    """Create a ValidationError."""
    return ValidationError(field, message)


def config_error(key: str, message: str) -> ConfigError:
    """Create a ConfigError."""
    return ConfigError(key, message)


def network_error(operation: str, message: str) -> NetworkError:
    """Create a NetworkError."""
    return NetworkError(operation, message)


def parse_error(text: str, expected: str) -> ParseError:
    """Create a ParseError."""
    return ParseError(text, expected)
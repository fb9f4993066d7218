"""A small logging system with levels, pluggable formatters and outputs."""

from __future__ import annotations

import json
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

__all__ = [
    "LogLevel",
    "LogEntry",
    "LogFormatter",
    "SimpleFormatter",
    "JsonFormatter",
    "LogOutput",
    "ConsoleOutput",
    "LoggerConfig",
    "Logger",
    "get_logger",
    "create_logger",
    "set_global_level",
]


class LogLevel(IntEnum):
    """Log levels in increasing order of severity."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_str(cls, text: str) -> LogLevel:
        """Look up a level by name, ignoring case."""
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid log level: {text}") from None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, default=str)


@dataclass
class LogEntry:
    """One message to be logged, with its level, source and metadata."""

    level: LogLevel
    logger_name: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=_now)

    def with_metadata(self, key: str, value: Any) -> LogEntry:
        """Return a copy of the entry with one more metadata item."""
        return replace(self, metadata={**self.metadata, key: value})

    def with_metadata_map(self, metadata: dict[str, Any]) -> LogEntry:
        """Return a copy of the entry with the given metadata items added."""
        return replace(self, metadata={**self.metadata, **metadata})


class LogFormatter(ABC):
    """Turns a log entry into a line of text."""

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """Return the text for entry."""


@dataclass
class SimpleFormatter(LogFormatter):
    """Formats entries as space-separated plain text."""

    include_timestamp: bool = True
    include_level: bool = True
    include_logger_name: bool = True

    def format(self, entry: LogEntry) -> str:
        """Return the entry as a line of plain text."""
        parts: list[str] = []
        if self.include_timestamp:
            stamp = entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
            parts.append(f"{stamp}.{entry.timestamp.microsecond // 1000:03d}")
        if self.include_level:
            parts.append(f"[{entry.level}]")
        if self.include_logger_name:
            parts.append(f"({entry.logger_name})")
        parts.append(entry.message)
        if entry.metadata:
            parts.append(f"metadata: {_dump(entry.metadata)}")
        return " ".join(parts)


@dataclass
class JsonFormatter(LogFormatter):
    """Formats entries as one JSON object per line."""

    def format(self, entry: LogEntry) -> str:
        """Return the entry as a JSON object; metadata keys sit at top level."""
        record: dict[str, Any] = {
            "timestamp": entry.timestamp.isoformat(),
            "level": str(entry.level),
            "logger": entry.logger_name,
            "message": entry.message,
        }
        record.update(entry.metadata)
        return _dump(record)


class LogOutput(ABC):
    """Receives formatted log lines."""

    @abstractmethod
    def write(self, formatted_message: str) -> None:
        """Deliver one formatted line."""


class ConsoleOutput(LogOutput):
    """Writes log lines to standard output."""

    def write(self, formatted_message: str) -> None:
        """Print the line."""
        print(formatted_message)


@dataclass
class LoggerConfig:
    """Name, threshold level, formatter and output of a logger."""

    name: str
    level: LogLevel = LogLevel.INFO
    formatter: LogFormatter = field(default_factory=SimpleFormatter)
    output: LogOutput = field(default_factory=ConsoleOutput)

    def with_level(self, level: LogLevel) -> LoggerConfig:
        """Return a copy with another level."""
        return replace(self, level=level)

    def with_formatter(self, formatter: LogFormatter) -> LoggerConfig:
        """Return a copy with another formatter."""
        return replace(self, formatter=formatter)

    def with_output(self, output: LogOutput) -> LoggerConfig:
        """Return a copy with another output."""
        return replace(self, output=output)


class Logger:
    """Formats and writes messages at or above its configured level."""

    def __init__(self, config: LoggerConfig) -> None:
        self.config = config

    def __repr__(self) -> str:
        return f"Logger(name={self.config.name!r}, level={self.config.level})"

    @classmethod
    def with_name(cls, name: str) -> Logger:
        """Create a logger with the default configuration."""
        return cls(LoggerConfig(name))

    def is_enabled(self, level: LogLevel) -> bool:
        """Return True if messages at level would be written."""
        return level >= self.config.level

    def _emit(self, entry: LogEntry) -> None:
        self.config.output.write(self.config.formatter.format(entry))

    def log(self, level: LogLevel, message: str) -> None:
        """Log message at level."""
        if self.is_enabled(level):
            self._emit(LogEntry(level, self.config.name, message))

    def log_with_metadata(
        self, level: LogLevel, message: str, metadata: dict[str, Any]
    ) -> None:
        """Log message at level together with metadata."""
        if self.is_enabled(level):
            self._emit(LogEntry(level, self.config.name, message, dict(metadata)))

    def trace(self, message: str) -> None:
        """Log at TRACE level."""
        self.log(LogLevel.TRACE, message)

    def debug(self, message: str) -> None:
        """Log at DEBUG level."""
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str) -> None:
        """Log at INFO level."""
        self.log(LogLevel.INFO, message)

    def warn(self, message: str) -> None:
        """Log at WARN level."""
        self.log(LogLevel.WARN, message)

    def error(self, message: str) -> None:
        """Log at ERROR level."""
        self.log(LogLevel.ERROR, message)


_registry: dict[str, Logger] = {}
_registry_lock = threading.Lock()


def get_logger(name: str) -> Logger:
    """Return the registered logger called name, creating it if needed."""
    with _registry_lock:
        logger = _registry.get(name)
        if logger is None:
            logger = _registry[name] = Logger.with_name(name)
        return logger


def create_logger(config: LoggerConfig) -> Logger:
    """Create a logger from config and register it under its name."""
    logger = Logger(config)
    with _registry_lock:
        _registry[config.name] = logger
    return logger


def set_global_level(level: LogLevel) -> None:
    """Set the level of every registered logger."""
    with _registry_lock:
        for logger in _registry.values():
            logger.config = logger.config.with_level(level)
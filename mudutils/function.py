"""Debouncing, throttling, polling and retrying of asynchronous callables."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = [
    "FunctionError",
    "DebounceOptions",
    "Debouncer",
    "ThrottleOptions",
    "Throttler",
    "PollingOptions",
    "PollingStatus",
    "Poller",
    "RetryOptions",
    "with_retry",
]

_PREFIXES = {
    "timeout": "Timeout error",
    "retry_exhausted": "Retry exhausted",
    "polling": "Polling error",
    "general": "Function error",
}


class FunctionError(Exception):
    """Raised when a controlled call does not run or does not succeed.

    ``kind`` is one of "timeout", "retry_exhausted", "polling" or "general".
    """

    def __init__(self, kind: str, message: str) -> None:
        if kind not in _PREFIXES:
            raise ValueError(f"Unknown function error kind: {kind}")
        self.kind = kind
        self.message = message
        super().__init__(f"{_PREFIXES[kind]}: {message}")

    def __reduce__(self):
        return (type(self), (self.kind, self.message))


async def _sleep_until(deadline: float) -> None:
    """Sleep until the monotonic clock has reached deadline."""
    while (remaining := deadline - time.monotonic()) > 0:
        await asyncio.sleep(remaining)


@dataclass
class DebounceOptions:
    """Which edges of the wait a debounced call runs on."""

    leading: bool = False
    trailing: bool = True


class Debouncer:
    """Delays calls until a quiet period of ``wait`` seconds has passed."""

    def __init__(self, wait: float, options: DebounceOptions | None = None) -> None:
        self.wait = wait
        self.options = options or DebounceOptions()
        self._last_call: float | None = None
        self._cancelled = False

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """Run func subject to debouncing and return its result."""
        now = time.monotonic()
        self._last_call = now

        if self.options.leading:
            return await func()

        await _sleep_until(now + self.wait)

        if self._cancelled:
            raise FunctionError("general", "Debouncer was cancelled")

        should_execute = (
            self._last_call is not None and time.monotonic() - now >= self.wait
        )
        if should_execute and self.options.trailing:
            return await func()
        raise FunctionError("general", "Function execution was debounced")

    def cancel(self) -> None:
        """Stop pending calls from running."""
        self._cancelled = True

    def is_pending(self) -> bool:
        """Return True while the last call is still within its wait."""
        if self._last_call is None:
            return False
        return time.monotonic() - self._last_call < self.wait


@dataclass
class ThrottleOptions:
    """Which edges of the wait a throttled call runs on."""

    leading: bool = False
    trailing: bool = True


class Throttler:
    """Lets a call run at most once every ``wait`` seconds."""

    def __init__(self, wait: float, options: ThrottleOptions | None = None) -> None:
        self.wait = wait
        self.options = options or ThrottleOptions()
        self._last_execution: float | None = None
        self._cancelled = False

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        """Run func unless it ran less than ``wait`` seconds ago."""
        if self._cancelled:
            raise FunctionError("general", "Throttler was cancelled")

        now = time.monotonic()
        if self._last_execution is None:
            self._last_execution = now
            should_execute = self.options.leading
        elif now - self._last_execution >= self.wait:
            self._last_execution = now
            should_execute = True
        else:
            should_execute = False

        if should_execute:
            return await func()
        raise FunctionError("general", "Function execution was throttled")

    def cancel(self) -> None:
        """Refuse all further calls."""
        self._cancelled = True


@dataclass
class PollingOptions:
    """Settings for a Poller; ``max_executions`` of None means no limit."""

    interval: float = 5.0
    max_retries: int = 3
    quit_on_error: bool = True
    immediate: bool = False
    max_executions: int | None = None


@dataclass
class PollingStatus:
    """A snapshot of a Poller's state."""

    is_active: bool
    retry_count: int
    execution_count: int


class Poller:
    """Runs a task repeatedly until its result satisfies a stop condition."""

    def __init__(self, options: PollingOptions | None = None) -> None:
        self.options = options or PollingOptions()
        self._active = False
        self._retry_count = 0
        self._execution_count = 0

    async def start(
        self,
        task: Callable[[], Awaitable[T]],
        stop_condition: Callable[[T], bool],
    ) -> T:
        """Poll task and return the first result that stop_condition accepts."""
        self._active = True

        if self.options.immediate:
            try:
                result = await task()
            except Exception:
                self._retry_count += 1
            else:
                if stop_condition(result):
                    return result

        limit = self.options.max_executions
        while self._active:
            self._execution_count += 1
            if limit is not None and self._execution_count > limit:
                break

            await asyncio.sleep(self.options.interval)
            if not self._active:
                break

            try:
                result = await task()
            except Exception:
                self._retry_count += 1
                if (
                    self.options.quit_on_error
                    and self._retry_count >= self.options.max_retries
                ):
                    self._active = False
                    raise FunctionError("polling", "Max retries exceeded") from None
            else:
                if stop_condition(result):
                    self._active = False
                    return result

        raise FunctionError("polling", "Polling stopped")

    def stop(self) -> None:
        """Ask a running poll to end before its next attempt."""
        self._active = False

    def status(self) -> PollingStatus:
        """Return the current polling state."""
        return PollingStatus(
            is_active=self._active,
            retry_count=self._retry_count,
            execution_count=self._execution_count,
        )


@dataclass
class RetryOptions:
    """How often to retry and how many seconds to wait between attempts."""

    max_retries: int = 3
    delay: float = 0.0


async def with_retry(
    func: Callable[[], Awaitable[T]], options: RetryOptions | None = None
) -> T:
    """Call func until it succeeds, at most ``max_retries`` extra times."""
    options = options or RetryOptions()
    last_error: BaseException | None = None

    for attempt in range(options.max_retries + 1):
        try:
            return await func()
        except Exception as error:
            last_error = error
            if attempt < options.max_retries and options.delay > 0:
                await asyncio.sleep(options.delay)

    detail: Any = last_error if last_error is not None else "Unknown error"
    raise FunctionError(
        "retry_exhausted",
        f"Function failed after {options.max_retries} retries. Last error: {detail}",
    ) from last_error
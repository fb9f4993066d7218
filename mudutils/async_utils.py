"""Asynchronous helpers."""

from __future__ import annotations

import asyncio

__all__ = ["sleep_async"]


async def sleep_async(ms: int) -> None:
    """Suspend the current task for ms milliseconds."""
    if ms < 0:
        raise ValueError("Delay cannot be negative")
    await asyncio.sleep(ms / 1000)
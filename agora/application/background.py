"""Detached background work.

Work spawned here is not tied to the request that started it: cancelling
the request does not cancel the task. ``asyncio.create_task`` copies the
current contextvars, so the active Logfire span becomes the parent of the
background span and traces stay linked.
"""

import asyncio
from typing import Any, Coroutine

import logfire


class BackgroundTasks:
    """Keeps strong references to running fire-and-forget tasks."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task[None]] = set()

    def spawn(self, coro: Coroutine[Any, Any, None], name: str) -> asyncio.Task[None]:
        """Schedule ``coro`` without awaiting it.

        The coroutine must handle its own errors; anything that still
        escapes is logged when the task finishes.
        """
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logfire.warn("Background task cancelled", task=task.get_name())
            return
        exc = task.exception()
        if exc is not None:
            logfire.error(
                "Background task failed",
                task=task.get_name(),
                error=str(exc),
                error_type=type(exc).__name__,
            )

    @property
    def pending(self) -> int:
        return len(self._tasks)

    async def drain(self, timeout: float | None = None) -> None:
        """Wait for running tasks, e.g. on shutdown or in tests."""
        if not self._tasks:
            return
        await asyncio.wait(set(self._tasks), timeout=timeout)

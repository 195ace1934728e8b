"""
@file_name: background.py
@author: NetMind.AI
@date: 2025-12-22
@description: Fire-and-forget background tasks

The caller never awaits these tasks. Each task logs its own failure from a done
callback; nothing is retried and nothing propagates back to the caller.

Each BackgroundTasks instance tracks only the tasks it spawned, so draining one
application never touches another application's tasks.

Usage:
    background = BackgroundTasks()
    background.spawn(notifier.notify_event_created(title), "notify created")
    await background.drain()
"""

import asyncio
from typing import Any, Coroutine, Set

from loguru import logger


class BackgroundTasks:
    """
    Owned set of pending fire-and-forget tasks

    Strong references are kept so pending tasks are not garbage collected
    mid-flight.
    """

    def __init__(self):
        self._pending: Set["asyncio.Task[Any]"] = set()

    def _on_done(self, task: "asyncio.Task[Any]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            logger.debug(f"Background task cancelled: {task.get_name()}")
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Background task failed ({task.get_name()}): {type(exc).__name__}: {exc}")

    def spawn(self, coro: Coroutine[Any, Any, Any], description: str) -> "asyncio.Task[Any]":
        """
        Schedule a coroutine on the running loop without awaiting it

        Args:
            coro: Coroutine to run
            description: Task name used in logs

        Returns:
            The created task (callers normally ignore it)
        """
        task = asyncio.create_task(coro, name=description)
        self._pending.add(task)
        task.add_done_callback(self._on_done)
        return task

    async def drain(self, timeout: float = 5.0) -> None:
        """Give pending tasks a chance to finish (used on shutdown and in tests)"""
        if not self._pending:
            return
        logger.info(f"Waiting for {len(self._pending)} background task(s)...")
        _, not_done = await asyncio.wait(set(self._pending), timeout=timeout)
        for task in not_done:
            task.cancel()
        if not_done:
            logger.warning(f"Cancelled {len(not_done)} background task(s) still running after {timeout}s")

    def __len__(self) -> int:
        return len(self._pending)

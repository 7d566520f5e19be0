"""Asynchronous hook firing with per-batch concurrency."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any

from hookline.hooks import ActionEntry, BaseHookRegistry
from hookline.logger import HookLogger


async def _invoke(entry: ActionEntry, payload: tuple[Any, ...]) -> Any:
    # Sync raises and awaitable failures both surface from the task.
    result = entry.action(*payload)
    if inspect.isawaitable(result):
        return await result
    return result


class AsyncHookRegistry(BaseHookRegistry):
    """Runs batches in order and the actions of each batch concurrently.

    A batch fails fast: the first failure by completion order is logged and
    re-raised without waiting for the other actions of that batch. Those keep
    running in the background and their outcomes are dropped.
    """

    def __init__(self, logger: HookLogger | None = None) -> None:
        super().__init__(logger=logger)
        self._background: set[asyncio.Task[Any]] = set()

    async def fire(self, hook_name: str, *payload: Any) -> None:
        for batch in self._entry_batches(hook_name):
            self._log_batch(hook_name, batch)
            tasks = [asyncio.create_task(_invoke(entry, payload)) for entry in batch]
            try:
                await asyncio.gather(*tasks)
            except Exception as exc:
                self._detach(tasks)
                self._log_failure(hook_name, self._failed_action_name(batch, tasks, exc), exc)
                raise

    @property
    def background_count(self) -> int:
        """Actions from failed batches that are still running."""
        return len(self._background)

    def _detach(self, tasks: list[asyncio.Task[Any]]) -> None:
        for task in tasks:
            if task.done():
                continue
            self._background.add(task)
            task.add_done_callback(self._settle)

    def _settle(self, task: asyncio.Task[Any]) -> None:
        self._background.discard(task)
        if not task.cancelled():
            task.exception()

    @staticmethod
    def _failed_action_name(batch: list[ActionEntry], tasks: list[asyncio.Task[Any]], exc: BaseException) -> str:
        for entry, task in zip(batch, tasks):
            if task.done() and not task.cancelled() and task.exception() is exc:
                return entry.name
        return ", ".join(entry.name for entry in batch)

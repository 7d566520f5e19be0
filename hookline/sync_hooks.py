"""Synchronous hook firing."""

from __future__ import annotations

from typing import Any

from hookline.hooks import BaseHookRegistry


class SyncHookRegistry(BaseHookRegistry):
    """Runs batches in order and the actions of each batch one by one."""

    def fire(self, hook_name: str, *payload: Any) -> None:
        """Invoke every action registered for ``hook_name`` with ``payload``.

        The first exception raised by an action is logged and re-raised as is.
        Remaining actions of that batch and every later batch are skipped.
        """
        for batch in self._entry_batches(hook_name):
            self._log_batch(hook_name, batch)
            for entry in batch:
                try:
                    entry.action(*payload)
                except Exception as exc:
                    self._log_failure(hook_name, entry.name, exc)
                    raise

"""Hook store and order-sorted batch retrieval."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hookline.logger import HookLogger

ANONYMOUS_ACTION = "anonymous"
DEFAULT_ORDER = 0

HookAction = Callable[..., Any]


def action_name(action: HookAction, label: str | None = None) -> str:
    """Diagnostic name for an action: explicit label, ``__name__``, or "anonymous"."""
    if label:
        return label
    name = getattr(action, "__name__", "")
    if not name or name == "<lambda>":
        return ANONYMOUS_ACTION
    return name


@dataclass(frozen=True)
class ActionEntry:
    action: HookAction
    label: str | None = None

    @property
    def name(self) -> str:
        return action_name(self.action, self.label)


class BaseHookRegistry:
    """In-process hook store with deterministic batch ordering.

    Actions are grouped by integer order key. Batches are sorted ascending
    on read, and actions inside one batch keep their registration order.
    """

    def __init__(self, logger: HookLogger | None = None) -> None:
        self._hooks: dict[str, dict[int, list[ActionEntry]]] = {}
        self._logger = logger

    def register(self, hook_name: str, action: HookAction, order: int = DEFAULT_ORDER, *, name: str | None = None) -> None:
        actions_by_order = self._hooks.setdefault(hook_name, {})
        actions_by_order.setdefault(order, []).append(ActionEntry(action=action, label=name))

    def get_actions_batch(self, hook_name: str) -> list[list[HookAction]]:
        return [[entry.action for entry in batch] for batch in self._entry_batches(hook_name)]

    def clear(self, hook_name: str | None = None) -> None:
        """Drop registrations for every hook, or only for ``hook_name`` when given."""
        if hook_name is None:
            self._hooks.clear()
            return
        self._hooks.pop(hook_name, None)

    def set_logger(self, logger: HookLogger | None = None) -> None:
        self._logger = logger

    def get_logger(self) -> HookLogger | None:
        return self._logger

    def hook_names(self) -> list[str]:
        return list(self._hooks)

    def __contains__(self, hook_name: object) -> bool:
        return hook_name in self._hooks

    def _entry_batches(self, hook_name: str) -> list[list[ActionEntry]]:
        actions_by_order = self._hooks.get(hook_name)
        if not actions_by_order:
            return []
        return [list(actions_by_order[order]) for order in sorted(actions_by_order)]

    def _log_batch(self, hook_name: str, batch: list[ActionEntry]) -> None:
        if self._logger is None:
            return
        names = ", ".join(entry.name for entry in batch)
        self._logger.debug(f"Fired hook {hook_name} with actions: {names}")

    def _log_failure(self, hook_name: str, name: str, exc: BaseException) -> None:
        if self._logger is None:
            return
        self._logger.error({"error": exc}, f"Hook action '{name}' for '{hook_name}' failed")

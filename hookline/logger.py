"""Logging capability consumed by the hook registries."""

from __future__ import annotations

import logging
from typing import Any, Protocol


class HookLogger(Protocol):
    """Sink called as ``(message)`` or ``(payload, message)``."""

    def debug(self, *args: Any) -> Any: ...

    def error(self, *args: Any) -> Any: ...


def _split_args(args: tuple[Any, ...]) -> tuple[Any, str]:
    if len(args) == 1:
        return None, str(args[0])
    if len(args) == 2:
        return args[0], str(args[1])
    raise TypeError(f"expected (message) or (payload, message), got {len(args)} arguments")


class StdlibHookLogger:
    """Adapts a ``logging.Logger`` to the two-method hook logger capability.

    The structured payload travels in ``extra["hook_payload"]``. An exception
    under the payload's ``"error"`` key is also attached as ``exc_info`` so
    handlers render its traceback.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("hookline")

    def debug(self, *args: Any) -> None:
        self._log(logging.DEBUG, args)

    def error(self, *args: Any) -> None:
        self._log(logging.ERROR, args)

    def _log(self, level: int, args: tuple[Any, ...]) -> None:
        payload, message = _split_args(args)
        if payload is None:
            self.logger.log(level, message)
            return
        exc_info = None
        if isinstance(payload, dict) and isinstance(payload.get("error"), BaseException):
            exc_info = payload["error"]
        self.logger.log(level, message, exc_info=exc_info, extra={"hook_payload": payload})

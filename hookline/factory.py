"""Registry constructors."""

from __future__ import annotations

import logging

from hookline.async_hooks import AsyncHookRegistry
from hookline.config import HooklineConfig
from hookline.hooks import BaseHookRegistry
from hookline.logger import HookLogger, StdlibHookLogger
from hookline.logging_utils import resolve_level
from hookline.sync_hooks import SyncHookRegistry


def create_sync_hooks(logger: HookLogger | None = None) -> SyncHookRegistry:
    return SyncHookRegistry(logger=logger)


def create_async_hooks(logger: HookLogger | None = None) -> AsyncHookRegistry:
    return AsyncHookRegistry(logger=logger)


def _logger_from_config(config: HooklineConfig) -> HookLogger | None:
    if not config.logging.enabled:
        return None
    std_logger = logging.getLogger(config.logging.logger_name)
    std_logger.setLevel(resolve_level(config.logging.level))
    return StdlibHookLogger(std_logger)


def create_registry(config: HooklineConfig | None = None) -> BaseHookRegistry:
    """Build the registry selected by ``config.registry.mode``."""
    config = config or HooklineConfig()
    logger = _logger_from_config(config)
    if config.registry.mode == "async":
        return create_async_hooks(logger)
    if config.registry.mode == "sync":
        return create_sync_hooks(logger)
    raise ValueError(f"Unknown registry mode: {config.registry.mode}")

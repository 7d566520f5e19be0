"""In-process ordered hook registries."""

from hookline.async_hooks import AsyncHookRegistry
from hookline.config import HooklineConfig, load_effective_config
from hookline.factory import create_async_hooks, create_registry, create_sync_hooks
from hookline.hooks import ANONYMOUS_ACTION, DEFAULT_ORDER, ActionEntry, BaseHookRegistry, action_name
from hookline.logger import HookLogger, StdlibHookLogger
from hookline.sync_hooks import SyncHookRegistry

__all__ = [
    "ANONYMOUS_ACTION",
    "DEFAULT_ORDER",
    "ActionEntry",
    "AsyncHookRegistry",
    "BaseHookRegistry",
    "HookLogger",
    "HooklineConfig",
    "StdlibHookLogger",
    "SyncHookRegistry",
    "action_name",
    "create_async_hooks",
    "create_registry",
    "create_sync_hooks",
    "load_effective_config",
]

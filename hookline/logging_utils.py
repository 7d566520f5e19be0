"""Logging configuration helpers."""

from __future__ import annotations

import logging


def resolve_level(level: str) -> int:
    value = getattr(logging, level.upper(), None)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

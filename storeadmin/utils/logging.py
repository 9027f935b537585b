"""Root logger setup for the store admin web runtime.

The level comes from, in order: ``STOREADMIN_LOG_LEVEL`` (name or number),
``STOREADMIN_DEBUG`` (truthy forces DEBUG), then the ``debug_logging``
setting or the caller's default. ``requests``/``urllib3`` connection chatter
is held at WARNING unless the effective level is DEBUG.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "STOREADMIN_LOG_LEVEL"
DEBUG_ENV = "STOREADMIN_DEBUG"

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_TRANSPORT_LOGGERS = ("urllib3", "requests")
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(value: object) -> Optional[int]:
    """Return a numeric level for ``"debug"``, ``"10"``, ``10``; ``None`` if unknown."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = str(value or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def env_log_level() -> Optional[int]:
    """Level forced by the environment, if any."""
    explicit = os.getenv(LOG_LEVEL_ENV)
    if explicit and explicit.strip():
        return parse_level(explicit) or logging.INFO
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def env_forces_debug() -> bool:
    level = env_log_level()
    return level is not None and level <= logging.DEBUG


def _set_level(level: int) -> int:
    logging.getLogger().setLevel(level)
    transport_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return level


def configure_root(default_level: int | str = logging.INFO) -> int:
    """Install the console handler once and return the effective level."""
    level = env_log_level()
    if level is None:
        level = parse_level(default_level) or logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    return _set_level(level)


def apply_gui_preferences(debug_enabled: bool) -> int:
    """Re-level after the ``debug_logging`` setting changed; env still wins."""
    level = env_log_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    return _set_level(level)

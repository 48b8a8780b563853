"""Logging configuration for applications embedding the syncboard client.

The client only emits DEBUG records (one per outgoing request, on the
``syncboard.core.client`` logger).  Applications that want them call
``setup_logging()`` once at startup; without arguments the level comes from
``SYNCBOARD_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import sys

from syncboard.settings import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Both log every request at INFO, duplicating the client's DEBUG line
NOISY_LOGGERS = ("httpx", "httpcore")


def resolve_level(level: int | str) -> int:
    """Turn ``"debug"`` / ``"DEBUG"`` / ``logging.DEBUG`` into an int level.

    Unknown names fall back to ``INFO``.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: int | str | None = None, settings: Settings | None = None) -> int:
    """Configure the root logger to write to stdout and return the level used.

    *level* overrides ``settings.LOG_LEVEL``; *settings* defaults to the
    process-wide configuration.
    """
    if level is None:
        level = (settings if settings is not None else default_settings).LOG_LEVEL
    resolved = resolve_level(level)

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))

    return resolved

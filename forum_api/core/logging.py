"""
Logging setup for the forum API.

Typical usage in the application module::

    from forum_api.core.logging import configure_logging

    log = configure_logging()
    log.info("Forum API started")

Other modules simply call ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import sys

from .config import get_settings

DEFAULT_LOGGER_NAME = "forum_api"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def _parse_level(value: str | None) -> int:
    """Map a level name such as 'debug' to its logging constant (INFO when unknown)."""
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, force: bool = False) -> logging.Logger:
    """
    Install a single stream handler on the root logger and return the
    service logger. Repeated calls are no-ops unless ``force`` is True.
    """
    global _configured
    if _configured and not force:
        return logging.getLogger(DEFAULT_LOGGER_NAME)

    settings = get_settings()
    logging.basicConfig(
        level=_parse_level(settings.log_level),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=force,
    )
    _configured = True
    return logging.getLogger(DEFAULT_LOGGER_NAME)

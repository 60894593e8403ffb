"""
Logging configuration helpers.
Entry points call `configure_logging` once; library modules only ask for named loggers.
"""

from __future__ import annotations

import logging

from list_zipper.common.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    settings = get_settings()
    logging.basicConfig(level=settings.log_level_number(), format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True

"""
Logging setup for applications embedding the cache layer

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are configured by the application entrypoint.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int | None = None) -> None:
    """
    Configure root logging to stdout

    Args:
        level: Level name or number; defaults to Settings.LOG_LEVEL
    """
    if level is None:
        from config.settings import get_settings

        level = get_settings().LOG_LEVEL

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[console], force=True)

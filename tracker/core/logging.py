"""Logging setup for scripts and the CLI."""

import logging
from typing import Optional

from tracker.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger unless something already did.

    Args:
        level: Level name (defaults to settings.log_level)
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)

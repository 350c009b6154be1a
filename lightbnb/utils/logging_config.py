"""
Logging setup for processes that embed the data-access layer.
"""

from typing import Optional
from lightbnb.config import get_settings
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level name; defaults to the configured log_level
    """
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    logging.getLogger(__name__).debug(f"Logging configured at {level}")

"""
Utility modules for the LightBnB data-access layer.
"""

from .exceptions import (
    DataAccessError,
    QueryFailedError,
    IntegrityViolationError,
    InvalidQueryOptionsError
)

from .logging_config import configure_logging

__all__ = [
    # Exceptions
    "DataAccessError",
    "QueryFailedError",
    "IntegrityViolationError",
    "InvalidQueryOptionsError",

    # Logging
    "configure_logging",
]

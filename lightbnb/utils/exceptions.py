"""
Custom exception classes for the LightBnB data-access layer.
Failures propagate to the caller with an error code instead of being
coerced into empty results.
"""

from typing import Optional


class DataAccessError(Exception):
    """Base data-access exception class."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class QueryFailedError(DataAccessError):
    """The database rejected or failed to run a query."""

    def __init__(
        self,
        operation: str,
        original: Optional[Exception] = None,
        error_code: str = "QUERY_FAILED"
    ):
        detail = f"{operation} failed"
        if original is not None:
            detail += f": {original}"

        super().__init__(detail=detail, error_code=error_code)
        self.operation = operation
        self.original = original


class IntegrityViolationError(QueryFailedError):
    """A write broke a database constraint (unique email, foreign key)."""

    def __init__(self, operation: str, original: Optional[Exception] = None):
        super().__init__(operation, original, error_code="INTEGRITY_VIOLATION")


class InvalidQueryOptionsError(DataAccessError):
    """Filter options or limits that cannot be turned into a query."""

    def __init__(self, detail: str):
        super().__init__(detail=detail, error_code="INVALID_OPTIONS")

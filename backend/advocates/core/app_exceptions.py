"""Application-specific exceptions for consistent error handling."""

from fastapi import status


class AppError(Exception):
    """Application error carrying a client-safe message and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class QueryExecutionError(AppError):
    """The record store was unreachable or rejected a query.

    ``message`` is safe to return to callers; the underlying driver error is
    chained as ``__cause__`` and only ever logged.
    """

    def __init__(self, message: str, *, operation: str):
        super().__init__(message)
        self.operation = operation

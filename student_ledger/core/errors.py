"""
Domain-specific exceptions for the Student Ledger API.

These exceptions represent client-input and lookup failures raised at the
service boundary and are mapped to HTTP status codes in the API layer.
The ledger core itself never raises them for well-formed input.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all student ledger domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(LedgerError):
    """
    Raised when input data fails validation before reaching the ledger.

    Examples:
    - Amount is not numeric
    - Amount is NaN or infinite

    HTTP Status: 400 Bad Request
    """

    pass


class NotFoundError(LedgerError):
    """
    Raised when a requested transaction does not exist.

    HTTP Status: 404 Not Found
    """

    pass


ERROR_STATUS_MAP = {
    ValidationError: 400,
    NotFoundError: 404,
}


def get_status_code(error: Exception) -> int:
    """
    Get the HTTP status code for a given exception.

    Args:
        error: The exception instance

    Returns:
        HTTP status code (defaults to 500 for unknown errors)
    """
    return ERROR_STATUS_MAP.get(type(error), 500)

"""Schemas package for request/response models."""

from student_ledger.schemas.transaction import (
    ErrorResponse,
    LedgerStatsResponse,
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    "TransactionCreate",
    "TransactionResponse",
    "TransactionListResponse",
    "LedgerStatsResponse",
    "ErrorResponse",
]

"""Transaction schemas for the ledger API.

Wire field names are camelCase (``studentId``); Python attributes stay
snake_case.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from student_ledger.domain.models.transaction import LedgerStats, Transaction


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionCreate(CamelModel):
    """Schema for adding a transaction.

    ``amount`` is taken as transmitted (number or string) and parsed by the
    service, which answers 400 for anything non-numeric.
    """

    student_id: str = Field(..., min_length=1, max_length=128, description="Student identifier")
    amount: Any = Field(..., description="Signed amount, as a number or numeric string")
    type: str = Field(..., min_length=1, max_length=64, description="Category label, e.g. tuition")


class TransactionResponse(CamelModel):
    """Response schema for a ledger transaction."""

    id: UUID
    student_id: str
    amount: Decimal
    type: str
    timestamp: datetime
    flagged: bool

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            student_id=transaction.student_id,
            amount=transaction.amount,
            type=transaction.type,
            timestamp=transaction.timestamp,
            flagged=transaction.flagged,
        )


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    items: list[TransactionResponse]
    total: int

    @classmethod
    def from_domain(cls, transactions: list[Transaction]) -> "TransactionListResponse":
        return cls(
            items=[TransactionResponse.from_domain(tx) for tx in transactions],
            total=len(transactions),
        )


class LedgerStatsResponse(BaseModel):
    """Aggregate counts over the ledger."""

    total: int
    flagged: int
    students: int

    @classmethod
    def from_domain(cls, stats: LedgerStats) -> "LedgerStatsResponse":
        return cls(total=stats.total, flagged=stats.flagged, students=stats.students)


class ErrorResponse(BaseModel):
    """Error body returned for domain errors."""

    detail: str
    errors: dict[str, Any] | None = None

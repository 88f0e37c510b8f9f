"""Transaction record model."""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Transaction(BaseModel):
    """A single ledger entry.

    Records are frozen: ``flagged`` is the classification taken when the
    record was created and is never recomputed.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    student_id: str
    amount: Decimal
    type: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    flagged: bool = False


class LedgerStats(BaseModel):
    """Point-in-time counts over the ledger."""

    model_config = ConfigDict(frozen=True)

    total: int
    flagged: int
    students: int

"""Transaction service: input parsing in front of the ledger store."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from student_ledger.core.errors import NotFoundError, ValidationError
from student_ledger.domain.models.transaction import LedgerStats, Transaction
from student_ledger.persistence.ledger_store import LedgerStore

logger = logging.getLogger(__name__)


def parse_amount(raw: Any) -> Decimal:
    """Parse a transmitted amount into a finite Decimal.

    Accepts Decimal, int, float, or a numeric string. Floats go through
    ``str`` so 0.1 stays 0.1.
    """
    if isinstance(raw, bool) or raw is None:
        raise ValidationError("Invalid amount", details={"amount": raw})

    try:
        if isinstance(raw, Decimal):
            amount = raw
        elif isinstance(raw, int):
            amount = Decimal(raw)
        elif isinstance(raw, float):
            amount = Decimal(str(raw))
        elif isinstance(raw, str):
            amount = Decimal(raw.strip())
        else:
            raise ValidationError("Invalid amount", details={"amount": str(raw)})
    except InvalidOperation:
        raise ValidationError("Invalid amount", details={"amount": raw}) from None

    if not amount.is_finite():
        raise ValidationError("Invalid amount", details={"amount": str(raw)})

    return amount


class TransactionService:
    """Service for recording and querying ledger transactions."""

    def __init__(self, store: LedgerStore):
        self.store = store

    def add_transaction(self, student_id: str, raw_amount: Any, type: str) -> Transaction:
        """Parse the amount and record a new transaction."""
        try:
            amount = parse_amount(raw_amount)
        except ValidationError:
            logger.info(
                "Rejected transaction with invalid amount",
                extra={"student_id": student_id, "type": type},
            )
            raise
        return self.store.insert(student_id, amount, type)

    def get_transaction(self, transaction_id: UUID) -> Transaction:
        """Get a transaction by ID."""
        transaction = self.store.get(transaction_id)
        if transaction is None:
            raise NotFoundError(
                "Transaction not found", details={"transaction_id": str(transaction_id)}
            )
        return transaction

    def list_transactions(self) -> list[Transaction]:
        """List every transaction."""
        return self.store.list_all()

    def list_by_student(self, student_id: str) -> list[Transaction]:
        """List transactions for one student."""
        return self.store.list_by_student(student_id)

    def list_flagged(self) -> list[Transaction]:
        """List flagged transactions."""
        return self.store.list_flagged()

    def get_stats(self) -> LedgerStats:
        """Get ledger summary counts."""
        return self.store.stats()

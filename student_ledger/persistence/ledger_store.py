"""In-memory transaction ledger.

The ledger is append-only: records are inserted once and never updated or
removed. A single lock guards the record map and the per-student index so a
reader always sees a consistent snapshot. Records are frozen models, so the
stored instances are handed out directly.
"""

import threading
from decimal import Decimal
from uuid import UUID

from student_ledger.core.logging import LoggerMixin
from student_ledger.domain.classifier import matched_rules
from student_ledger.domain.models.transaction import LedgerStats, Transaction


class LedgerStore(LoggerMixin):
    """Concurrent-safe, insertion-ordered store of transaction records."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: dict[UUID, Transaction] = {}
        self._by_student: dict[str, list[UUID]] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def insert(self, student_id: str, amount: Decimal, type: str) -> Transaction:
        """Classify and record a new transaction."""
        rules = matched_rules(type, amount)
        transaction = Transaction(
            student_id=student_id,
            amount=amount,
            type=type,
            flagged=bool(rules),
        )

        with self._lock:
            self._records[transaction.id] = transaction
            self._by_student.setdefault(student_id, []).append(transaction.id)

        self.logger.info(
            "transaction_recorded",
            transaction_id=str(transaction.id),
            student_id=student_id,
            type=type,
            flagged=transaction.flagged,
        )
        if rules:
            self.logger.warning(
                "transaction_flagged",
                transaction_id=str(transaction.id),
                rules=[rule.value for rule in rules],
            )
        return transaction

    def get(self, transaction_id: UUID) -> Transaction | None:
        """Get a transaction by ID."""
        with self._lock:
            return self._records.get(transaction_id)

    def list_all(self) -> list[Transaction]:
        """Return every stored transaction in insertion order."""
        with self._lock:
            return list(self._records.values())

    def list_by_student(self, student_id: str) -> list[Transaction]:
        """Return transactions whose student_id matches exactly."""
        with self._lock:
            ids = self._by_student.get(student_id, [])
            return [self._records[tid] for tid in ids]

    def list_flagged(self) -> list[Transaction]:
        """Return flagged transactions in insertion order."""
        with self._lock:
            return [tx for tx in self._records.values() if tx.flagged]

    def stats(self) -> LedgerStats:
        """Return summary counts of the ledger."""
        with self._lock:
            return LedgerStats(
                total=len(self._records),
                flagged=sum(1 for tx in self._records.values() if tx.flagged),
                students=len(self._by_student),
            )

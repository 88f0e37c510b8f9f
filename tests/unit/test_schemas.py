"""Unit tests for transaction schemas."""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError

from student_ledger.domain.models.transaction import LedgerStats, Transaction
from student_ledger.schemas import (
    ErrorResponse,
    LedgerStatsResponse,
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
)


class TestTransactionCreate:
    """Tests for the add-transaction request body."""

    def test_accepts_camel_case(self):
        body = TransactionCreate.model_validate(
            {"studentId": "S1", "amount": "60000.00", "type": "tuition"}
        )
        assert body.student_id == "S1"
        assert body.amount == "60000.00"
        assert body.type == "tuition"

    def test_accepts_snake_case(self):
        body = TransactionCreate(student_id="S1", amount=100, type="fee")
        assert body.student_id == "S1"

    def test_amount_kept_as_transmitted(self):
        body = TransactionCreate.model_validate({"studentId": "S1", "amount": 12.5, "type": "x"})
        assert body.amount == 12.5

    @pytest.mark.parametrize("missing", ["studentId", "amount", "type"])
    def test_required_fields(self, missing):
        payload = {"studentId": "S1", "amount": "1", "type": "fee"}
        payload.pop(missing)
        with pytest.raises(ValidationError):
            TransactionCreate.model_validate(payload)

    def test_empty_student_id_rejected(self):
        with pytest.raises(ValidationError):
            TransactionCreate.model_validate({"studentId": "", "amount": "1", "type": "fee"})


class TestTransactionResponse:
    """Tests for the transaction response body."""

    def test_from_domain(self):
        tx = Transaction(student_id="S1", amount=Decimal("60000.00"), type="tuition", flagged=True)
        response = TransactionResponse.from_domain(tx)

        assert response.id == tx.id
        assert response.amount == Decimal("60000.00")
        assert response.flagged is True

    def test_serializes_camel_case(self):
        tx = Transaction(student_id="S2", amount=Decimal("-500"), type="donation", flagged=True)
        dumped = TransactionResponse.from_domain(tx).model_dump(mode="json", by_alias=True)

        assert set(dumped) == {"id", "studentId", "amount", "type", "timestamp", "flagged"}
        assert dumped["id"] == str(tx.id)
        assert dumped["studentId"] == "S2"
        assert dumped["amount"] == "-500"

    @pytest.mark.parametrize("amount", ["12345678901234567.89", "1E+400", "0.10"])
    def test_amount_serializes_without_loss(self, amount):
        tx = Transaction(student_id="S1", amount=Decimal(amount), type="tuition")
        dumped = TransactionResponse.from_domain(tx).model_dump(mode="json", by_alias=True)

        assert dumped["amount"] == amount
        parsed = datetime.fromisoformat(dumped["timestamp"].replace("Z", "+00:00"))
        assert parsed == tx.timestamp


class TestListAndStats:
    def test_list_from_domain(self):
        txs = [
            Transaction(student_id="S1", amount=Decimal("1"), type="fee"),
            Transaction(student_id="S1", amount=Decimal("2"), type="fee"),
        ]
        response = TransactionListResponse.from_domain(txs)
        assert response.total == 2
        assert [item.id for item in response.items] == [tx.id for tx in txs]

    def test_empty_list(self):
        response = TransactionListResponse.from_domain([])
        assert response.items == []
        assert response.total == 0

    def test_stats_from_domain(self):
        response = LedgerStatsResponse.from_domain(LedgerStats(total=4, flagged=2, students=2))
        assert response.model_dump() == {"total": 4, "flagged": 2, "students": 2}

    def test_error_response_is_pydantic_model(self):
        assert issubclass(ErrorResponse, BaseModel)
        assert ErrorResponse(detail="Invalid amount").errors is None

"""Ledger transaction API routes.

Endpoints:
- POST /admin/transactions/add - Record a transaction
- GET /admin/transactions/all - List every transaction
- GET /admin/transactions/student/{student_id} - List one student's transactions
- GET /admin/transactions/flagged - List flagged transactions
- GET /admin/transactions/stats - Ledger counts
- GET /admin/transactions/{transaction_id} - Get single transaction
"""

from uuid import UUID

from fastapi import APIRouter

from student_ledger.core.dependencies import Transactions
from student_ledger.schemas.transaction import (
    ErrorResponse,
    LedgerStatsResponse,
    TransactionCreate,
    TransactionListResponse,
    TransactionResponse,
)

router = APIRouter(prefix="/admin/transactions", tags=["Transactions"])


@router.post(
    "/add",
    response_model=TransactionResponse,
    summary="Add transaction",
    description="Record a transaction and flag it when an anomaly rule fires.",
    responses={
        200: {"description": "Recorded transaction"},
        400: {"model": ErrorResponse, "description": "Invalid amount"},
    },
)
async def add_transaction(
    payload: TransactionCreate,
    service: Transactions,
) -> TransactionResponse:
    """Record a transaction.

    The flag is decided once here and never recomputed.
    """
    transaction = service.add_transaction(
        student_id=payload.student_id,
        raw_amount=payload.amount,
        type=payload.type,
    )
    return TransactionResponse.from_domain(transaction)


@router.get(
    "/all",
    response_model=TransactionListResponse,
    summary="List transactions",
    description="List every recorded transaction in insertion order.",
)
async def list_transactions(service: Transactions) -> TransactionListResponse:
    """List every transaction."""
    return TransactionListResponse.from_domain(service.list_transactions())


@router.get(
    "/student/{student_id}",
    response_model=TransactionListResponse,
    summary="List student transactions",
    description="List transactions for one student (exact, case-sensitive match).",
)
async def list_student_transactions(
    student_id: str,
    service: Transactions,
) -> TransactionListResponse:
    """List transactions for a student. Unknown students yield an empty list."""
    return TransactionListResponse.from_domain(service.list_by_student(student_id))


@router.get(
    "/flagged",
    response_model=TransactionListResponse,
    summary="List flagged transactions",
)
async def list_flagged_transactions(service: Transactions) -> TransactionListResponse:
    return TransactionListResponse.from_domain(service.list_flagged())


@router.get(
    "/stats",
    response_model=LedgerStatsResponse,
    summary="Ledger stats",
    description="Total, flagged, and distinct-student counts.",
)
async def get_stats(service: Transactions) -> LedgerStatsResponse:
    return LedgerStatsResponse.from_domain(service.get_stats())


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get transaction",
    responses={
        200: {"description": "Transaction details"},
        404: {"model": ErrorResponse, "description": "Transaction not found"},
    },
)
async def get_transaction(
    transaction_id: UUID,
    service: Transactions,
) -> TransactionResponse:
    """Get transaction by ID."""
    return TransactionResponse.from_domain(service.get_transaction(transaction_id))

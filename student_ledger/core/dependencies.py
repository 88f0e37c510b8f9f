"""
FastAPI dependency injection utilities.

The ledger store is built once by ``create_app`` and kept on
``app.state.ledger``; these dependencies hand it to route handlers.
"""

from typing import Annotated

from fastapi import Depends, Request

from student_ledger.persistence.ledger_store import LedgerStore
from student_ledger.services.transaction_service import TransactionService


def get_ledger_store(request: Request) -> LedgerStore:
    """Return the ledger store owned by the running application."""
    return request.app.state.ledger


def get_transaction_service(
    store: LedgerStore = Depends(get_ledger_store),
) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(store)


Ledger = Annotated[LedgerStore, Depends(get_ledger_store)]
Transactions = Annotated[TransactionService, Depends(get_transaction_service)]

"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import sys
from decimal import Decimal
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]

# Add project root to path for imports
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Set test environment variables before importing the app
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("OTEL_LOG_RECORD_FORMAT", "console")

from student_ledger.core.config import reload_settings
from student_ledger.main import create_app
from student_ledger.persistence.ledger_store import LedgerStore
from student_ledger.services.transaction_service import TransactionService

reload_settings()


@pytest.fixture
def store() -> LedgerStore:
    """Fresh, empty ledger for each test."""
    return LedgerStore()


@pytest.fixture
def service(store: LedgerStore) -> TransactionService:
    """Transaction service over the per-test ledger."""
    return TransactionService(store)


@pytest.fixture
def seeded_store(store: LedgerStore) -> LedgerStore:
    """Ledger holding the example scenario transactions."""
    store.insert("S1", Decimal("60000.00"), "tuition")
    store.insert("S1", Decimal("9000.00"), "grant")
    store.insert("S2", Decimal("-500.00"), "donation")
    store.insert("S2", Decimal("100.00"), "TUITION")
    return store


@pytest.fixture
def client_app(store: LedgerStore):
    """FastAPI app wired to the per-test ledger."""
    return create_app(store)


@pytest.fixture
async def test_client(client_app):
    """Create httpx.AsyncClient for testing async routes."""
    transport = httpx.ASGITransport(app=client_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

"""API routes package."""

from fastapi import APIRouter

from student_ledger.api.routes.health import router as health_router
from student_ledger.api.routes.transactions import router as transactions_router

# Mounted by create_app under /api/v1
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(transactions_router)


__all__ = [
    "api_router",
    "health_router",
    "transactions_router",
]

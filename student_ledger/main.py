"""Student Ledger Service.

This service records student financial transactions in an in-memory,
append-only ledger, flags anomalous entries at write time, and serves the
records back by ID, by student, or in full.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from student_ledger.api.routes import api_router
from student_ledger.core.config import AppEnvironment, Settings, get_settings
from student_ledger.core.errors import LedgerError, get_status_code
from student_ledger.core.logging import setup_logging
from student_ledger.persistence.ledger_store import LedgerStore

logger = logging.getLogger(__name__)

# API version prefix
API_V1_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager."""
    settings = get_settings()
    app.state.settings = settings

    setup_logging(settings)

    logger.info(
        "Starting Student Ledger Service",
        extra={
            "app": settings.app.name,
            "env": settings.app.env,
            "version": settings.app.version,
        },
    )

    yield

    logger.info(
        "Student Ledger Service stopped",
        extra={"records": len(app.state.ledger)},
    )


def create_app(store: LedgerStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Each application owns exactly one ledger. Pass ``store`` to share an
    existing ledger; otherwise a fresh one is created.
    """
    settings = get_settings()

    app = FastAPI(
        title="Student Ledger API",
        description=(
            "API for recording student financial transactions, flagging anomalies "
            "at write time, and querying the ledger."
        ),
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.app.env != AppEnvironment.PROD else None,
        redoc_url="/redoc" if settings.app.env != AppEnvironment.PROD else None,
        openapi_url="/openapi.json" if settings.app.env != AppEnvironment.PROD else None,
    )

    app.state.ledger = store if store is not None else LedgerStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_allowed_origins,
        allow_credentials=settings.security.cors_allow_credentials,
        allow_methods=settings.security.cors_allow_methods,
        allow_headers=settings.security.cors_allow_headers,
    )

    app.include_router(api_router, prefix=API_V1_PREFIX)

    setup_telemetry(app, settings)

    @app.exception_handler(LedgerError)
    async def domain_error_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: LedgerError
    ) -> JSONResponse:
        """Handle domain-specific errors and return appropriate HTTP responses."""
        status_code = get_status_code(exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, **({"errors": exc.details} if exc.details else {})},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions and return 500 error responses."""
        logger.exception(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app


def setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """Setup OpenTelemetry instrumentation."""
    if not settings.observability.otlp_endpoint:
        return

    resource = Resource(
        attributes={
            SERVICE_NAME: settings.observability.service_name,
        }
    )

    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(
        endpoint=settings.observability.otlp_endpoint,
        insecure=settings.observability.otlp_insecure,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app)


def run() -> None:
    """Run the application using uvicorn.

    Always one worker: the ledger lives in process memory.
    """
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "student_ledger.main:create_app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.app.env == AppEnvironment.LOCAL,
        factory=True,
        workers=1,
        log_level=settings.app.log_level.lower(),
    )


if __name__ == "__main__":
    run()

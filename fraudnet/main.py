"""FastAPI application entry point for FraudNet Intelligence."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fraudnet.api.dependencies import get_ledger
from fraudnet.api.middleware.error_handler import global_exception_handler
from fraudnet.api.middleware.logging import StructuredLoggingMiddleware
from fraudnet.api.routes.behavior import router as behavior_router
from fraudnet.api.routes.fraud import router as fraud_router
from fraudnet.api.routes.health import router as health_router
from fraudnet.api.routes.transactions import router as transactions_router
from fraudnet.config import settings
from fraudnet.shared.errors import StoreError
from fraudnet.shared.logging import setup_logging

logger = structlog.get_logger()

# Track app start time for uptime calculation
APP_START_TIME: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown logic."""
    global APP_START_TIME
    APP_START_TIME = time.time()
    setup_logging(settings.log_level)

    logger.info(
        "fraudnet_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        bank_id=settings.bank_id,
        debug=settings.debug,
    )

    # Warm the ledger from the durable store (best-effort)
    if settings.ledger_load_on_startup:
        try:
            loaded = get_ledger().load()
            logger.info("ledger_loaded", records=loaded)
        except Exception:
            logger.warning("ledger_initial_load_failed", exc_info=True)

    yield

    logger.info("fraudnet_shutting_down")


app = FastAPI(
    title="FraudNet Intelligence",
    description=(
        "Human-intent detection, predictive scam prevention and "
        "cross-banking fraud intelligence sharing"
    ),
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Structured logging middleware
app.add_middleware(StructuredLoggingMiddleware)

# Global exception handlers (domain errors first, then the catch-all)
for exc_class in (ValueError, LookupError, StoreError, Exception):
    app.add_exception_handler(exc_class, global_exception_handler)

# Register routers
app.include_router(health_router)
app.include_router(behavior_router)
app.include_router(transactions_router)
app.include_router(fraud_router)


def get_uptime() -> int:
    """Get application uptime in seconds."""
    if APP_START_TIME == 0.0:
        return 0
    return int(time.time() - APP_START_TIME)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run("fraudnet.main:app", host=settings.host, port=settings.port)

"""Health, readiness and endpoint catalog."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from fraudnet.api.dependencies import get_ledger
from fraudnet.config import settings
from fraudnet.domains.ledger.ledger import FraudLedger

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    from fraudnet.main import get_uptime

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "uptime_seconds": get_uptime(),
        "timestamp": datetime.now(UTC).isoformat(),
    }


@router.get("/ready")
def ready(
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> JSONResponse:
    store_ok = ledger.store is not None and ledger.store.check_connection()
    return JSONResponse(
        status_code=200 if store_ok else 503,
        content={
            "status": "ready" if store_ok else "degraded",
            "store": store_ok,
            "ledger_records": len(ledger),
        },
    )


_ENDPOINTS = [
    ("GET", "/getAll", "List the available API endpoints"),
    ("GET", "/health", "Service liveness"),
    ("GET", "/ready", "Durable store connectivity"),
    ("POST", "/behavior/analyze", "Score session behavior for coercion or manipulation"),
    ("POST", "/transactions/predict", "Predict whether a pending transaction is a scam"),
    ("POST", "/fraud/submit", "Share an anonymized fraud indicator"),
    ("POST", "/fraud/query", "Check device, account or pattern hashes against the ledger"),
    ("GET", "/fraud/analytics", "Ledger-wide fraud statistics"),
    ("POST", "/fraud/analytics/snapshot", "Persist today's analytics to the store"),
    ("GET", "/fraud/analytics/snapshot", "Read a persisted daily analytics snapshot"),
    ("GET", "/fraud/records", "List every record in the ledger"),
    ("GET", "/fraud/records/{fraud_id}", "Fetch one record by id"),
    ("DELETE", "/fraud/records/{fraud_id}", "Administratively delete a record"),
]


@router.get("/getAll")
async def endpoint_catalog() -> dict:
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "endpoints": [
            {"method": method, "path": path, "description": description}
            for method, path, description in _ENDPOINTS
        ],
        "timestamp": datetime.now(UTC).isoformat(),
    }

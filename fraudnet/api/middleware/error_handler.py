"""Global exception handling.

Domain and lookup errors map to client-facing statuses; store outages that
escape the ledger's own fail-open handling surface as 503.
"""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from fraudnet.shared.errors import StoreError

logger = structlog.get_logger()

# exception class -> (status, error code, public message or None to echo str(exc))
_ERROR_MAP: list[tuple[type[Exception], int, str, str | None]] = [
    (ValueError, 400, "bad_request", None),
    (LookupError, 404, "not_found", None),
    (StoreError, 503, "store_unavailable", "The fraud record store is unavailable"),
]


def _classify(exc: Exception) -> tuple[int, str, str]:
    for exc_class, status_code, error, public_message in _ERROR_MAP:
        if isinstance(exc, exc_class):
            return status_code, error, public_message or str(exc)
    return 500, "internal_server_error", "An unexpected error occurred"


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    status_code, error, message = _classify(exc)

    if status_code == 500:
        logger.exception("unhandled_exception", request_id=request_id, error=str(exc))
    elif status_code == 503:
        logger.error(error, request_id=request_id, path=request.url.path, error_detail=str(exc))
    else:
        logger.warning(error, request_id=request_id, path=request.url.path, error_detail=str(exc))

    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, "request_id": request_id},
    )

"""Cross-banking fraud sharing endpoints.

Handlers are plain functions so FastAPI runs them in its threadpool: the
ledger resyncs from and writes through to the store with blocking boto3 calls.
"""

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel

from fraudnet.api.dependencies import get_ledger
from fraudnet.domains.ledger.ledger import REQUIRED_FIELDS, FraudLedger
from fraudnet.domains.ledger.models import (
    FraudAnalytics,
    FraudQuery,
    FraudRecord,
    FraudSubmission,
    QueryResult,
)
from fraudnet.shared.models import CamelModel

logger = structlog.get_logger()
router = APIRouter(prefix="/fraud", tags=["fraud"])

_REQUIRED_WIRE_FIELDS = [to_camel(name) for name in REQUIRED_FIELDS]


@router.post("/submit")
def submit_fraud(
    submission: FraudSubmission,
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> JSONResponse:
    result = ledger.submit(submission)
    content = result.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not result.success:
        if result.missing_fields is not None:
            content["missingFields"] = [to_camel(name) for name in result.missing_fields]
            content["required"] = _REQUIRED_WIRE_FIELDS
        return JSONResponse(status_code=400, content=content)
    return JSONResponse(status_code=201, content=content)


@router.post("/query", response_model=QueryResult, response_model_exclude_none=True)
def query_fraud(
    query: FraudQuery,
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> QueryResult:
    """Check whether a device, account or transaction pattern is known to be fraudulent."""
    return ledger.query(query)


@router.get("/analytics", response_model=FraudAnalytics)
def fraud_analytics(
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> FraudAnalytics:
    return ledger.analytics()


class SnapshotResponse(CamelModel):
    saved: bool
    key: str | None = None


@router.post("/analytics/snapshot", response_model=SnapshotResponse)
def save_analytics_snapshot(
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> SnapshotResponse:
    key = ledger.save_analytics_snapshot()
    return SnapshotResponse(saved=key is not None, key=key)


@router.get("/analytics/snapshot", response_model=FraudAnalytics)
def get_analytics_snapshot(
    date: str | None = Query(default=None, pattern=r"^\d{4}-\d{2}-\d{2}$"),
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> FraudAnalytics:
    snapshot = ledger.get_analytics_snapshot(date)
    if snapshot is None:
        raise LookupError(f"No analytics snapshot for {date or 'today'}")
    return snapshot


class RecordListResponse(CamelModel):
    total: int
    records: list[FraudRecord]


@router.get("/records", response_model=RecordListResponse)
def list_records(
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> RecordListResponse:
    records = ledger.get_all_records()
    return RecordListResponse(total=len(records), records=records)


@router.get("/records/{fraud_id}", response_model=FraudRecord)
def get_record(
    fraud_id: str,
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> FraudRecord:
    record = ledger.get_record(fraud_id)
    if record is None:
        raise LookupError(f"Fraud record {fraud_id} not found")
    return record


@router.delete("/records/{fraud_id}")
def delete_record(
    fraud_id: str,
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
) -> dict:
    if not ledger.delete_record(fraud_id):
        raise LookupError(f"Fraud record {fraud_id} not found or could not be deleted")
    logger.info("fraud_record_deleted_via_api", fraud_id=fraud_id)
    return {"fraudId": fraud_id, "deleted": True}

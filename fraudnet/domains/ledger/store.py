"""The narrow durable-store interface the ledger depends on, and its key layout."""

from dataclasses import dataclass, field
from typing import Any, Protocol

from fraudnet.shared.errors import RecordDecodeError
from fraudnet.shared.timestamps import parse_timestamp

from .models import FraudRecord


@dataclass
class RecordListing:
    """Result of listing a prefix: decoded records plus per-object decode failures."""

    records: list[FraudRecord] = field(default_factory=list)
    errors: list[RecordDecodeError] = field(default_factory=list)


class RecordStore(Protocol):
    """Durable store for fraud records. Implementations raise StoreError on I/O failure."""

    def put_record(self, key: str, record: FraudRecord) -> None: ...

    def list_records(self, prefix: str, max_items: int) -> RecordListing: ...

    def get_record(self, key: str) -> FraudRecord | None: ...

    def find_record_key(self, prefix: str, fraud_id: str) -> str | None: ...

    def delete_key(self, key: str) -> None: ...

    def put_json(self, key: str, payload: dict[str, Any]) -> None: ...

    def get_json(self, key: str) -> dict[str, Any] | None: ...

    def check_connection(self) -> bool: ...


def record_key(record: FraudRecord, prefix: str) -> str:
    """``<prefix>/<YYYY>/<MM>/<fraud_id>.json``, partitioned by event month.

    Falls back to the submission time when the event timestamp does not parse.
    """
    when = parse_timestamp(record.timestamp) or parse_timestamp(record.submitted_at)
    if when is None:
        return f"{prefix}/undated/{record.fraud_id}.json"
    return f"{prefix}/{when.year}/{when.month:02d}/{record.fraud_id}.json"


def analytics_key(date: str, prefix: str) -> str:
    """``<prefix>/analytics-<YYYY-MM-DD>.json``."""
    return f"{prefix}/analytics-{date}.json"

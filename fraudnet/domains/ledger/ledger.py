"""Cross-institution fraud intelligence ledger.

Owns the in-memory working set of fraud records and keeps it loosely in
step with a durable store:

- writes go to the working set first, then through to the store; a store
  failure is logged and never fails or rolls back the submission
- every read path (query, analytics, listing) first resyncs from the store:
  list a bounded page, append the records not yet known by id
- resync is append-only, so it is idempotent and safe to interleave with
  submissions; deletions are not reconciled
- at most one resync runs at a time; a caller that finds one in flight
  does not wait and reads the working set as it currently stands
"""

import threading
from collections import Counter
from datetime import UTC, datetime

import structlog

from fraudnet.shared.errors import QueryValidationError, StoreError
from fraudnet.shared.timestamps import parse_timestamp, utc_now_iso

from .config import LedgerConfig, default_config
from .ids import generate_fraud_id
from .models import (
    FraudAnalytics,
    FraudQuery,
    FraudRecord,
    FraudSubmission,
    QueryMatches,
    QueryResult,
    Severity,
    SubmissionResult,
)
from .store import RecordStore, analytics_key, record_key

logger = structlog.get_logger()

REQUIRED_FIELDS = (
    "bank_id",
    "device_id_hash",
    "account_id_hash",
    "transaction_pattern_hash",
    "fraud_type",
    "timestamp",
    "severity",
)

_VALID_SEVERITIES = tuple(s.value for s in Severity)
_OLDEST = datetime.min.replace(tzinfo=UTC)


class FraudLedger:
    """Submit, query and analyze shared fraud indicators."""

    def __init__(
        self,
        store: RecordStore | None = None,
        config: LedgerConfig | None = None,
        id_generator=generate_fraud_id,
        load_on_init: bool = False,
    ) -> None:
        self._store = store
        self._config = config or default_config
        self._generate_id = id_generator
        # insertion-ordered working set keyed by fraud id
        self._records: dict[str, FraudRecord] = {}
        self._records_lock = threading.Lock()
        # held while a resync is in flight; only ever try-acquired
        self._resync_lock = threading.Lock()

        if load_on_init:
            self.load()

    @property
    def store(self) -> RecordStore | None:
        return self._store

    def __len__(self) -> int:
        with self._records_lock:
            return len(self._records)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def submit(self, submission: FraudSubmission) -> SubmissionResult:
        """Validate an institution's submission and append it as a new record."""
        missing = [name for name in REQUIRED_FIELDS if not getattr(submission, name)]
        if missing:
            logger.warning("fraud_submission_rejected", reason="missing_fields", missing=missing)
            return SubmissionResult(
                success=False,
                message="Missing required fields",
                missing_fields=missing,
            )

        if submission.severity not in _VALID_SEVERITIES:
            logger.warning(
                "fraud_submission_rejected",
                reason="invalid_severity",
                severity=submission.severity,
            )
            return SubmissionResult(
                success=False,
                message="Invalid severity. Must be one of: " + ", ".join(_VALID_SEVERITIES),
            )

        record = FraudRecord(
            fraud_id=self._generate_id(),
            bank_id=submission.bank_id,
            device_id_hash=submission.device_id_hash,
            account_id_hash=submission.account_id_hash,
            transaction_pattern_hash=submission.transaction_pattern_hash,
            fraud_type=submission.fraud_type,
            timestamp=submission.timestamp,
            severity=Severity(submission.severity),
            submitted_at=utc_now_iso(),
        )
        return self.submit_record(record)

    def submit_record(self, record: FraudRecord) -> SubmissionResult:
        """Append an already-built record, e.g. one derived from a scorer verdict."""
        with self._records_lock:
            if record.fraud_id in self._records:
                return SubmissionResult(
                    success=False,
                    message=f"Fraud record {record.fraud_id} already exists",
                )
            self._records[record.fraud_id] = record

        logger.info(
            "fraud_record_submitted",
            fraud_id=record.fraud_id,
            bank_id=record.bank_id,
            fraud_type=record.fraud_type,
            severity=record.severity.value,
        )
        self._write_through(record)

        return SubmissionResult(
            success=True,
            message="Fraud data submitted successfully",
            fraud_id=record.fraud_id,
        )

    def _write_through(self, record: FraudRecord) -> None:
        if self._store is None:
            return
        key = record_key(record, self._config.record_prefix)
        try:
            self._store.put_record(key, record)
        except StoreError:
            logger.warning(
                "fraud_record_store_write_failed",
                fraud_id=record.fraud_id,
                key=key,
                exc_info=True,
            )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def query(self, query: FraudQuery) -> QueryResult:
        """OR-match the supplied hashes against every record in the working set."""
        if query.is_empty:
            raise QueryValidationError(
                "At least one of deviceIdHash, accountIdHash, or "
                "transactionPatternHash must be provided"
            )

        self.resync()

        device_match = account_match = pattern_match = False
        matching: list[FraudRecord] = []
        for record in self._snapshot():
            record_matches = False
            if query.device_id_hash and record.device_id_hash == query.device_id_hash:
                device_match = record_matches = True
            if query.account_id_hash and record.account_id_hash == query.account_id_hash:
                account_match = record_matches = True
            if (
                query.transaction_pattern_hash
                and record.transaction_pattern_hash == query.transaction_pattern_hash
            ):
                pattern_match = record_matches = True
            if record_matches:
                matching.append(record)

        found = device_match or account_match or pattern_match
        logger.info("fraud_query_completed", found=found, match_count=len(matching))

        return QueryResult(
            found=found,
            matches=QueryMatches(
                device_id_hash=device_match,
                account_id_hash=account_match,
                transaction_pattern_hash=pattern_match,
            ),
            fraud_records=matching if found else None,
        )

    def analytics(self) -> FraudAnalytics:
        """Summarize the working set: latest fraud, most common type, counts."""
        self.resync()
        records = self._snapshot()

        if not records:
            return FraudAnalytics()

        # sorted() is stable: among equal timestamps the earliest inserted wins
        latest = sorted(records, key=_event_time, reverse=True)[0]
        latest_time = parse_timestamp(latest.timestamp)

        by_type: Counter[str] = Counter()
        by_severity: Counter[str] = Counter()
        for record in records:
            by_type[record.fraud_type] += 1
            by_severity[record.severity.value] += 1

        # max() keeps the first maximal entry, i.e. the type encountered first
        most_common = max(by_type.items(), key=lambda item: item[1])[0]

        return FraudAnalytics(
            last_attempted_fraud=latest_time.strftime("%m/%d/%Y") if latest_time else "N/A",
            most_common_fraud=most_common,
            last_fraudulent_device_id=latest.device_id_hash,
            total_fraud_records=len(records),
            fraud_by_type=dict(by_type),
            fraud_by_severity=dict(by_severity),
        )

    def get_all_records(self) -> list[FraudRecord]:
        self.resync()
        return self._snapshot()

    def get_record(self, fraud_id: str) -> FraudRecord | None:
        """Look a record up locally, then in the store."""
        with self._records_lock:
            record = self._records.get(fraud_id)
        if record is not None or self._store is None:
            return record

        try:
            key = self._store.find_record_key(self._config.record_prefix, fraud_id)
            record = self._store.get_record(key) if key else None
        except StoreError:
            logger.warning("fraud_record_lookup_failed", fraud_id=fraud_id, exc_info=True)
            return None

        if record is not None:
            self._merge([record])
        return record

    # ------------------------------------------------------------------
    # Administrative
    # ------------------------------------------------------------------

    def delete_record(self, fraud_id: str) -> bool:
        """Delete a record by id from the store, then from the working set.

        The working-set entry is kept if the store delete fails, since the
        next resync would bring it back anyway.
        """
        key = None
        if self._store is not None:
            try:
                key = self._store.find_record_key(self._config.record_prefix, fraud_id)
                if key:
                    self._store.delete_key(key)
            except StoreError:
                logger.warning("fraud_record_delete_failed", fraud_id=fraud_id, exc_info=True)
                return False

        with self._records_lock:
            removed = self._records.pop(fraud_id, None) is not None

        deleted = removed or bool(key)
        logger.info("fraud_record_deleted", fraud_id=fraud_id, deleted=deleted)
        return deleted

    def save_analytics_snapshot(self, date: str | None = None) -> str | None:
        """Persist today's analytics payload; returns the key, or None on failure."""
        if self._store is None:
            return None
        date = date or datetime.now(UTC).date().isoformat()
        key = analytics_key(date, self._config.analytics_prefix)
        payload = self.analytics().to_wire()
        try:
            self._store.put_json(key, payload)
        except StoreError:
            logger.warning("analytics_snapshot_save_failed", key=key, exc_info=True)
            return None
        logger.info("analytics_snapshot_saved", key=key)
        return key

    def get_analytics_snapshot(self, date: str | None = None) -> FraudAnalytics | None:
        if self._store is None:
            return None
        date = date or datetime.now(UTC).date().isoformat()
        key = analytics_key(date, self._config.analytics_prefix)
        try:
            payload = self._store.get_json(key)
        except StoreError:
            logger.warning("analytics_snapshot_read_failed", key=key, exc_info=True)
            return None
        return FraudAnalytics.model_validate(payload) if payload else None

    # ------------------------------------------------------------------
    # Sync
    # ------------------------------------------------------------------

    def load(self) -> int:
        """Initial load from the store; same semantics as a resync."""
        return self.resync()

    def resync(self) -> int:
        """Pull records from the store that the working set does not have yet.

        Returns the number of records added; 0 when another resync is
        already in flight or the store is unavailable.
        """
        if not self._resync_lock.acquire(blocking=False):
            logger.debug("ledger_resync_skipped", reason="in_flight")
            return 0
        try:
            return self._pull_from_store()
        finally:
            self._resync_lock.release()

    def _pull_from_store(self) -> int:
        if self._store is None:
            return 0
        try:
            listing = self._store.list_records(
                self._config.record_prefix, self._config.resync_page_size
            )
        except StoreError:
            logger.warning("ledger_resync_failed", exc_info=True)
            return 0

        for error in listing.errors:
            logger.warning("fraud_record_decode_failed", key=error.key, reason=error.reason)

        added = self._merge(listing.records)
        logger.info(
            "ledger_resynced",
            listed=len(listing.records),
            added=added,
            decode_errors=len(listing.errors),
        )
        return added

    def _merge(self, records: list[FraudRecord]) -> int:
        added = 0
        with self._records_lock:
            for record in records:
                if record.fraud_id not in self._records:
                    self._records[record.fraud_id] = record
                    added += 1
        return added

    def _snapshot(self) -> list[FraudRecord]:
        with self._records_lock:
            return list(self._records.values())


def _event_time(record: FraudRecord) -> datetime:
    return parse_timestamp(record.timestamp) or _OLDEST

"""Cross-banking fraud intelligence sharing domain."""

from .adapter import (
    behavior_to_fraud_record,
    is_behavior_fraud,
    is_transaction_fraud,
    transaction_to_fraud_record,
)
from .config import LedgerConfig
from .ledger import FraudLedger
from .models import (
    FraudAnalytics,
    FraudQuery,
    FraudRecord,
    FraudSubmission,
    FraudType,
    QueryMatches,
    QueryResult,
    Severity,
    SubmissionResult,
)
from .store import RecordListing, RecordStore, analytics_key, record_key

__all__ = [
    "FraudAnalytics",
    "FraudLedger",
    "FraudQuery",
    "FraudRecord",
    "FraudSubmission",
    "FraudType",
    "LedgerConfig",
    "QueryMatches",
    "QueryResult",
    "RecordListing",
    "RecordStore",
    "Severity",
    "SubmissionResult",
    "analytics_key",
    "behavior_to_fraud_record",
    "is_behavior_fraud",
    "is_transaction_fraud",
    "record_key",
    "transaction_to_fraud_record",
]

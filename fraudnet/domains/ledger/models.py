"""Pydantic models for the shared fraud intelligence ledger.

These are the serialization contract with the durable store and with other
institutions: camelCase JSON, one object per record.
"""

from enum import StrEnum

from pydantic import Field

from fraudnet.shared.models import CamelModel


class Severity(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class FraudType(StrEnum):
    HUMAN_INTENT_FRAUD = "human_intent_fraud"
    PREDICTIVE_SCAM = "predictive_scam"


class FraudRecord(CamelModel):
    """One anonymized fraud indicator. Immutable once created."""

    fraud_id: str = Field(min_length=1)
    bank_id: str = Field(min_length=1)
    device_id_hash: str = Field(min_length=1)
    account_id_hash: str = Field(min_length=1)
    transaction_pattern_hash: str = Field(min_length=1)
    # free-form label; records from other institutions may use their own
    fraud_type: str = Field(min_length=1)
    # when the fraud happened, as reported
    timestamp: str = Field(min_length=1)
    severity: Severity
    # when this ledger first accepted the record
    submitted_at: str


class FraudSubmission(CamelModel):
    """Fields an institution submits. Presence is checked by the ledger."""

    bank_id: str | None = None
    device_id_hash: str | None = None
    account_id_hash: str | None = None
    transaction_pattern_hash: str | None = None
    fraud_type: str | None = None
    timestamp: str | None = None
    severity: str | None = None


class SubmissionResult(CamelModel):
    success: bool
    message: str
    fraud_id: str | None = None
    missing_fields: list[str] | None = None


class FraudQuery(CamelModel):
    device_id_hash: str | None = None
    account_id_hash: str | None = None
    transaction_pattern_hash: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.device_id_hash or self.account_id_hash or self.transaction_pattern_hash)


class QueryMatches(CamelModel):
    device_id_hash: bool = False
    account_id_hash: bool = False
    transaction_pattern_hash: bool = False


class QueryResult(CamelModel):
    found: bool
    matches: QueryMatches
    fraud_records: list[FraudRecord] | None = None


class FraudAnalytics(CamelModel):
    last_attempted_fraud: str = "N/A"
    most_common_fraud: str = "N/A"
    last_fraudulent_device_id: str = Field(default="N/A", alias="lastFraudulentDeviceID")
    total_fraud_records: int = 0
    fraud_by_type: dict[str, int] = Field(default_factory=dict)
    fraud_by_severity: dict[str, int] = Field(default_factory=dict)

"""Turn fraud-worthy scorer verdicts into anonymized ledger records.

Only one-way digests of the identifiers and of a behavioral/transactional
fingerprint leave this module; the raw sample is never attached to the
record.
"""

from fraudnet.domains.behavior.config import BehaviorConfig
from fraudnet.domains.behavior.config import default_config as default_behavior_config
from fraudnet.domains.behavior.models import BehaviorSample, BehaviorVerdict
from fraudnet.domains.transaction.models import (
    PredictionResult,
    TransactionSample,
    TransactionVerdict,
)
from fraudnet.shared.hashing import hash_value
from fraudnet.shared.timestamps import utc_now_iso

from .ids import generate_fraud_id
from .models import FraudRecord, FraudType, Severity

DEFAULT_BANK_ID = "default-bank"


def is_behavior_fraud(
    verdict: BehaviorVerdict, config: BehaviorConfig | None = None
) -> bool:
    threshold = (config or default_behavior_config).fraud_score_threshold
    return verdict.intent_risk_score >= threshold


def is_transaction_fraud(verdict: TransactionVerdict) -> bool:
    return verdict.prediction_result in (
        PredictionResult.HIGH_RISK,
        PredictionResult.SUSPICIOUS,
    )


def behavior_severity(score: float) -> Severity:
    if score >= 0.8:
        return Severity.CRITICAL
    if score >= 0.6:
        return Severity.HIGH
    if score >= 0.4:
        return Severity.MEDIUM
    return Severity.LOW


def transaction_severity(verdict: TransactionVerdict) -> Severity:
    if verdict.prediction_result == PredictionResult.HIGH_RISK:
        return Severity.CRITICAL if verdict.risk_score >= 0.8 else Severity.HIGH
    if verdict.prediction_result == PredictionResult.SUSPICIOUS:
        return Severity.HIGH if verdict.risk_score >= 0.5 else Severity.MEDIUM
    return Severity.LOW


def behavior_pattern(sample: BehaviorSample) -> dict:
    """Fingerprint hashed into the record's transaction-pattern digest."""
    return {
        "typingSpeed": sample.typing_speed,
        "mouseMovement": sample.mouse_movement,
        "clickPattern": list(sample.click_pattern),
        "pagesVisited": list(sample.pages_visited),
    }


def transaction_pattern(sample: TransactionSample) -> dict:
    return {
        "transactionType": sample.transaction_type,
        "amount": sample.amount,
        "location": sample.location,
        "recipientAccount": sample.recipient_account,
    }


def behavior_to_fraud_record(
    sample: BehaviorSample,
    verdict: BehaviorVerdict,
    bank_id: str = DEFAULT_BANK_ID,
) -> FraudRecord:
    # The session stands in for the device; behavior samples carry no device id.
    now = utc_now_iso()
    return FraudRecord(
        fraud_id=generate_fraud_id(),
        bank_id=bank_id,
        device_id_hash=hash_value(sample.session_id),
        account_id_hash=hash_value(sample.user_id),
        transaction_pattern_hash=hash_value(behavior_pattern(sample)),
        fraud_type=FraudType.HUMAN_INTENT_FRAUD.value,
        timestamp=now,
        severity=behavior_severity(verdict.intent_risk_score),
        submitted_at=now,
    )


def transaction_to_fraud_record(
    sample: TransactionSample,
    verdict: TransactionVerdict,
    bank_id: str = DEFAULT_BANK_ID,
) -> FraudRecord:
    now = utc_now_iso()
    return FraudRecord(
        fraud_id=generate_fraud_id(),
        bank_id=bank_id,
        device_id_hash=hash_value(sample.device_id),
        account_id_hash=hash_value(sample.user_id),
        transaction_pattern_hash=hash_value(transaction_pattern(sample)),
        fraud_type=FraudType.PREDICTIVE_SCAM.value,
        # the scorer tolerates a blank timestamp; the record still needs an event time
        timestamp=sample.timestamp or now,
        severity=transaction_severity(verdict),
        submitted_at=now,
    )

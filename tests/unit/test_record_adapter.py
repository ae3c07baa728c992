"""Tests for converting scorer verdicts into anonymized ledger records."""

import pytest

from fraudnet.domains.behavior.config import BehaviorConfig
from fraudnet.domains.behavior.models import BehaviorVerdict
from fraudnet.domains.ledger.adapter import (
    behavior_pattern,
    behavior_severity,
    behavior_to_fraud_record,
    is_behavior_fraud,
    is_transaction_fraud,
    transaction_pattern,
    transaction_severity,
    transaction_to_fraud_record,
)
from fraudnet.domains.ledger.models import FraudType, Severity
from fraudnet.domains.transaction.models import (
    PredictionResult,
    RecommendedAction,
    TransactionVerdict,
)
from fraudnet.shared.hashing import hash_value
from tests.conftest import make_behavior_sample, make_transaction_sample


def _behavior_verdict(score: float) -> BehaviorVerdict:
    return BehaviorVerdict(session_id="sess-1", intent_risk_score=score, behavior_flags=[])


def _transaction_verdict(result: PredictionResult, score: float) -> TransactionVerdict:
    return TransactionVerdict(
        transaction_id="txn-1",
        prediction_result=result,
        risk_score=score,
        recommended_action=RecommendedAction.FLAG_FOR_REVIEW,
        reason_codes=[],
    )


class TestPredicates:
    @pytest.mark.parametrize("score,expected", [(0.69, False), (0.7, True), (0.95, True)])
    def test_behavior_threshold(self, score, expected):
        assert is_behavior_fraud(_behavior_verdict(score)) is expected

    def test_behavior_threshold_is_configurable(self):
        config = BehaviorConfig(fraud_score_threshold=0.5)
        assert is_behavior_fraud(_behavior_verdict(0.5), config)

    @pytest.mark.parametrize(
        "result,expected",
        [
            (PredictionResult.HIGH_RISK, True),
            (PredictionResult.SUSPICIOUS, True),
            (PredictionResult.SAFE, False),
        ],
    )
    def test_transaction_predicate(self, result, expected):
        assert is_transaction_fraud(_transaction_verdict(result, 0.5)) is expected


class TestSeverity:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (0.8, Severity.CRITICAL),
            (0.79, Severity.HIGH),
            (0.6, Severity.HIGH),
            (0.4, Severity.MEDIUM),
            (0.39, Severity.LOW),
        ],
    )
    def test_behavior_severity(self, score, expected):
        assert behavior_severity(score) == expected

    @pytest.mark.parametrize(
        "result,score,expected",
        [
            (PredictionResult.HIGH_RISK, 0.8, Severity.CRITICAL),
            (PredictionResult.HIGH_RISK, 0.65, Severity.HIGH),
            (PredictionResult.SUSPICIOUS, 0.5, Severity.HIGH),
            (PredictionResult.SUSPICIOUS, 0.35, Severity.MEDIUM),
            (PredictionResult.SAFE, 0.1, Severity.LOW),
        ],
    )
    def test_transaction_severity(self, result, score, expected):
        assert transaction_severity(_transaction_verdict(result, score)) == expected


class TestBehaviorToFraudRecord:
    def test_record_contains_only_digests(self):
        sample = make_behavior_sample(user_id="user-42", session_id="sess-42")
        record = behavior_to_fraud_record(sample, _behavior_verdict(0.85), bank_id="bank-x")

        assert record.fraud_id.startswith("fraud-")
        assert record.bank_id == "bank-x"
        assert record.device_id_hash == hash_value("sess-42")
        assert record.account_id_hash == hash_value("user-42")
        assert record.transaction_pattern_hash == hash_value(behavior_pattern(sample))
        assert record.fraud_type == FraudType.HUMAN_INTENT_FRAUD.value
        assert record.severity == Severity.CRITICAL
        assert record.timestamp == record.submitted_at

        wire = record.to_wire()
        assert "user-42" not in wire.values()
        assert "sess-42" not in wire.values()

    def test_pattern_uses_camel_case_keys(self):
        pattern = behavior_pattern(make_behavior_sample())
        assert list(pattern) == ["typingSpeed", "mouseMovement", "clickPattern", "pagesVisited"]

    def test_default_bank_id(self):
        record = behavior_to_fraud_record(make_behavior_sample(), _behavior_verdict(0.75))
        assert record.bank_id == "default-bank"


class TestTransactionToFraudRecord:
    def test_record_fields(self):
        sample = make_transaction_sample(
            device_id="device-777", user_id="user-9", timestamp="2026-01-13T03:00:00Z"
        )
        verdict = _transaction_verdict(PredictionResult.HIGH_RISK, 0.78)
        record = transaction_to_fraud_record(sample, verdict, bank_id="bank-y")

        assert record.device_id_hash == hash_value("device-777")
        assert record.account_id_hash == hash_value("user-9")
        assert record.transaction_pattern_hash == hash_value(transaction_pattern(sample))
        assert record.fraud_type == FraudType.PREDICTIVE_SCAM.value
        assert record.timestamp == "2026-01-13T03:00:00Z"
        assert record.severity == Severity.HIGH

    def test_blank_timestamp_falls_back_to_submission_time(self):
        sample = make_transaction_sample(timestamp="")
        verdict = _transaction_verdict(PredictionResult.HIGH_RISK, 0.74)
        record = transaction_to_fraud_record(sample, verdict)

        assert record.timestamp == record.submitted_at
        assert record.timestamp.endswith("Z")

    def test_same_transaction_shape_same_pattern_hash(self):
        a = make_transaction_sample(transaction_id="txn-a", user_id="user-a")
        b = make_transaction_sample(transaction_id="txn-b", user_id="user-b")
        verdict = _transaction_verdict(PredictionResult.SUSPICIOUS, 0.4)
        assert (
            transaction_to_fraud_record(a, verdict).transaction_pattern_hash
            == transaction_to_fraud_record(b, verdict).transaction_pattern_hash
        )

    def test_ids_are_unique(self):
        verdict = _transaction_verdict(PredictionResult.SUSPICIOUS, 0.4)
        sample = make_transaction_sample()
        ids = {transaction_to_fraud_record(sample, verdict).fraud_id for _ in range(50)}
        assert len(ids) == 50

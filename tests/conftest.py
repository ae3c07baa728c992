"""Shared test fixtures for FraudNet Intelligence tests."""

import os
from itertools import count
from unittest.mock import MagicMock

import pytest

# Keep tests away from a real bucket and from the startup load
os.environ.setdefault("LEDGER_LOAD_ON_STARTUP", "false")
os.environ.setdefault("S3_ENDPOINT_URL", "http://localhost:9000")

from fraudnet.domains.behavior.models import BehaviorSample  # noqa: E402
from fraudnet.domains.ledger.ledger import FraudLedger  # noqa: E402
from fraudnet.domains.ledger.models import FraudRecord, FraudSubmission, Severity  # noqa: E402
from fraudnet.domains.ledger.store import RecordListing  # noqa: E402
from fraudnet.domains.transaction.models import TransactionSample  # noqa: E402


def sequential_ids(prefix: str = "fraud-test"):
    """Deterministic id generator for ledgers under test."""
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


def make_record(fraud_id: str = "fraud-1", **kwargs) -> FraudRecord:
    defaults = {
        "fraud_id": fraud_id,
        "bank_id": "bank-a",
        "device_id_hash": "dev-hash-1",
        "account_id_hash": "acct-hash-1",
        "transaction_pattern_hash": "pattern-hash-1",
        "fraud_type": "predictive_scam",
        "timestamp": "2026-01-15T10:30:00Z",
        "severity": Severity.HIGH,
        "submitted_at": "2026-01-15T10:30:01.000Z",
    }
    defaults.update(kwargs)
    return FraudRecord(**defaults)


def make_submission(**kwargs) -> FraudSubmission:
    defaults = {
        "bank_id": "bank-a",
        "device_id_hash": "dev-hash-1",
        "account_id_hash": "acct-hash-1",
        "transaction_pattern_hash": "pattern-hash-1",
        "fraud_type": "account_takeover",
        "timestamp": "2026-01-15T10:30:00Z",
        "severity": "high",
    }
    defaults.update(kwargs)
    return FraudSubmission(**defaults)


def make_behavior_sample(**kwargs) -> BehaviorSample:
    """A session every factor considers neutral."""
    defaults = {
        "user_id": "user-1",
        "session_id": "sess-1",
        "typing_speed": 250.0,
        "mouse_movement": 1500.0,
        "click_pattern": (100.0, 100.0, 100.0, 100.0),
        "navigation_time": 5.0,
        "pages_visited": ("login", "dashboard", "settings"),
    }
    defaults.update(kwargs)
    return BehaviorSample(**defaults)


def make_transaction_sample(**kwargs) -> TransactionSample:
    """A Tuesday-afternoon card payment; only the baseline type tier (0.15) fires."""
    defaults = {
        "transaction_id": "txn-1",
        "user_id": "user-1",
        "amount": 100.0,
        "currency": "USD",
        "recipient_account": "acct-12345678",
        "user_average_trans_amount": 100.0,
        "transaction_type": "card",
        "location": "new_york",
        "timestamp": "2026-01-13T14:00:00Z",
        "device_id": "device-abc123",
    }
    defaults.update(kwargs)
    return TransactionSample(**defaults)


@pytest.fixture
def mock_store() -> MagicMock:
    """Durable store double: empty listing, no objects, writes succeed."""
    store = MagicMock()
    store.list_records.return_value = RecordListing()
    store.get_record.return_value = None
    store.find_record_key.return_value = None
    store.get_json.return_value = None
    store.check_connection.return_value = True
    return store


@pytest.fixture
def ledger(mock_store) -> FraudLedger:
    return FraudLedger(store=mock_store, id_generator=sequential_ids())


@pytest.fixture
def memory_ledger() -> FraudLedger:
    """Ledger with no durable store at all."""
    return FraudLedger(id_generator=sequential_ids())


@pytest.fixture
def neutral_behavior_sample() -> BehaviorSample:
    return make_behavior_sample()


@pytest.fixture
def neutral_transaction_sample() -> TransactionSample:
    return make_transaction_sample()

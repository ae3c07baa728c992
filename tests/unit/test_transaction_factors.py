"""Unit tests for the transaction risk factors."""

import pytest

from fraudnet.domains.transaction.config import TransactionConfig
from fraudnet.domains.transaction.factors import (
    AmountRatioFactor,
    DeviceFactor,
    LocationFactor,
    RecipientFactor,
    TimingFactor,
    TransactionTypeFactor,
    normalize,
)
from fraudnet.domains.transaction.models import ReasonCode
from tests.conftest import make_transaction_sample

CONFIG = TransactionConfig()


def test_normalize_folds_separators():
    assert normalize("Wire Transfer") == "wire_transfer"
    assert normalize("international-transfer") == "international_transfer"
    assert normalize("Tax  Haven") == "tax_haven"


class TestAmountRatioFactor:
    factor = AmountRatioFactor()

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (500, 0.98),  # 5x
            (300, 0.85),  # 3x
            (200, 0.65),  # 2x
            (150, 0.45),  # 1.5x
            (120, 0.25),  # 1.2x
            (110, 0.0),
        ],
    )
    def test_tiers_are_inclusive(self, amount, expected):
        sample = make_transaction_sample(amount=amount, user_average_trans_amount=100)
        assert self.factor.sub_score(sample, CONFIG) == expected

    def test_no_baseline(self):
        sample = make_transaction_sample(amount=10, user_average_trans_amount=0)
        assert self.factor.sub_score(sample, CONFIG) == 0.65

    def test_very_high_label_requires_strictly_more_than_five_times(self):
        at_limit = make_transaction_sample(amount=500, user_average_trans_amount=100)
        above = make_transaction_sample(amount=501, user_average_trans_amount=100)
        assert self.factor.evaluate(at_limit, CONFIG).label == ReasonCode.HIGH_AMOUNT.value
        assert self.factor.evaluate(above, CONFIG).label == ReasonCode.VERY_HIGH_AMOUNT.value

    def test_no_baseline_labels_very_high(self):
        sample = make_transaction_sample(amount=10, user_average_trans_amount=0)
        assert self.factor.evaluate(sample, CONFIG).label == ReasonCode.VERY_HIGH_AMOUNT.value


class TestTransactionTypeFactor:
    factor = TransactionTypeFactor()

    @pytest.mark.parametrize(
        "txn_type,expected",
        [
            ("wire_transfer", 0.85),
            ("Wire-Transfer", 0.85),
            ("crypto currency purchase", 0.15),
            ("cryptocurrency_purchase", 0.85),
            ("p2p_transfer", 0.45),
            ("bill_payment", 0.45),
            ("card", 0.15),
        ],
    )
    def test_tiers(self, txn_type, expected):
        sample = make_transaction_sample(transaction_type=txn_type)
        assert self.factor.sub_score(sample, CONFIG) == expected

    def test_configured_types(self):
        config = TransactionConfig(high_risk_types=("gift_card",))
        sample = make_transaction_sample(transaction_type="Gift Card")
        assert self.factor.sub_score(sample, config) == 0.85


class TestLocationFactor:
    factor = LocationFactor()

    @pytest.mark.parametrize(
        "location,expected",
        [
            ("offshore", 0.9),
            ("Tax Haven", 0.9),
            ("sanctioned-country", 0.9),
            ("international", 0.55),
            ("foreign_branch", 0.55),
            ("out_of_state", 0.3),
            ("abroad", 0.3),
            ("new_york", 0.0),
        ],
    )
    def test_tiers(self, location, expected):
        sample = make_transaction_sample(location=location)
        assert self.factor.sub_score(sample, CONFIG) == expected


class TestDeviceFactor:
    factor = DeviceFactor()

    @pytest.mark.parametrize(
        "device_id,expected",
        [
            ("new-phone", 0.8),
            ("TEMP_DEVICE_1", 0.8),
            ("unknown-device", 0.7),
            ("guest1234", 0.7),
            ("ab12", 0.7),
            ("laptop_001", 0.4),
            ("device-xyz789", 0.0),
            ("A1B2-C3D4", 0.0),
            ("A1B2-C3D4\n", 0.4),
        ],
    )
    def test_tiers(self, device_id, expected):
        sample = make_transaction_sample(device_id=device_id)
        assert self.factor.sub_score(sample, CONFIG) == expected

    def test_reason_code(self):
        sample = make_transaction_sample(device_id="new-phone")
        assert self.factor.evaluate(sample, CONFIG).label == ReasonCode.NEW_DEVICE.value


class TestTimingFactor:
    factor = TimingFactor()

    @pytest.mark.parametrize(
        "timestamp,expected",
        [
            ("2026-01-13T03:00:00Z", 0.65),  # 01:00-06:59
            ("2026-01-13T23:30:00Z", 0.45),  # 22:00-00:59
            ("2026-01-13T00:15:00Z", 0.45),
            ("2026-01-13T07:30:00Z", 0.3),  # 07:00-08:59
            ("2026-01-17T14:00:00Z", 0.25),  # Saturday daytime
            ("2026-01-13T14:00:00Z", 0.0),
        ],
    )
    def test_tiers(self, timestamp, expected):
        sample = make_transaction_sample(timestamp=timestamp)
        assert self.factor.sub_score(sample, CONFIG) == expected

    def test_offset_is_converted_to_utc(self):
        # 22:00 in New York is 03:00 UTC the next day
        sample = make_transaction_sample(timestamp="2026-01-13T22:00:00-05:00")
        assert self.factor.sub_score(sample, CONFIG) == 0.65

    def test_naive_timestamp_is_utc(self):
        sample = make_transaction_sample(timestamp="2026-01-13T03:00:00")
        assert self.factor.sub_score(sample, CONFIG) == 0.65

    @pytest.mark.parametrize("timestamp", ["", "yesterday", "2026-13-45T99:00:00Z"])
    def test_unparseable_timestamp_is_moderate_risk(self, timestamp):
        sample = make_transaction_sample(timestamp=timestamp)
        assert self.factor.sub_score(sample, CONFIG) == 0.35


class TestRecipientFactor:
    factor = RecipientFactor()

    @pytest.mark.parametrize(
        "account,expected",
        [
            ("ab12", 0.85),
            ("temp-account-1", 0.85),
            ("test-recipient", 0.85),
            ("unknown-payee", 0.6),
            ("new-recipient", 0.6),
            ("98765432101", 0.6),
            ("98765432101\n", 0.0),
            ("acc999", 0.35),
            ("acct-12345678", 0.0),
        ],
    )
    def test_tiers(self, account, expected):
        sample = make_transaction_sample(recipient_account=account)
        assert self.factor.sub_score(sample, CONFIG) == expected

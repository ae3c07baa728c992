"""Transaction risk factors.

Every factor appends its single reason code whenever its sub-score is
non-zero, in evaluation order. The device and recipient factors are
string heuristics standing in for device-history and recipient-history
lookups.
"""

import re
from abc import ABC, abstractmethod

from fraudnet.shared.models import FactorResult
from fraudnet.shared.timestamps import parse_timestamp

from .config import TransactionConfig
from .models import ReasonCode, TransactionSample

_SEPARATORS = re.compile(r"[\s_-]+")
_KNOWN_DEVICE_FORMAT = re.compile(r"[a-z0-9-]+", re.IGNORECASE)
_NUMERIC_ACCOUNT = re.compile(r"[0-9]{4,}")


def normalize(value: str) -> str:
    """Lower-case and fold spaces, hyphens and underscores to a single underscore."""
    return _SEPARATORS.sub("_", value.lower())


class TransactionFactor(ABC):
    """Base class for all transaction factors."""

    factor_id: str  # also the attribute name on TransactionWeights
    reason_code: ReasonCode

    @abstractmethod
    def sub_score(self, sample: TransactionSample, config: TransactionConfig) -> float:
        """Return the tiered sub-score in [0, 1]."""
        ...

    def label_for(self, sample: TransactionSample, config: TransactionConfig) -> ReasonCode:
        return self.reason_code

    def evaluate(self, sample: TransactionSample, config: TransactionConfig) -> FactorResult:
        score = self.sub_score(sample, config)
        return FactorResult(
            factor_id=self.factor_id,
            score=score,
            weight=getattr(config.weights, self.factor_id),
            label=self.label_for(sample, config).value if score > 0 else None,
        )


class AmountRatioFactor(TransactionFactor):
    """Amount relative to the user's historical average."""

    factor_id = "amount"
    reason_code = ReasonCode.HIGH_AMOUNT

    def sub_score(self, sample: TransactionSample, config: TransactionConfig) -> float:
        average = sample.user_average_trans_amount
        if average <= 0:
            return config.amount.no_baseline_score

        ratio = sample.amount / average
        if ratio >= config.amount.very_high_multiplier:
            return 0.98
        if ratio >= config.amount.high_multiplier:
            return 0.85
        if ratio >= 2:
            return 0.65
        if ratio >= 1.5:
            return 0.45
        if ratio >= 1.2:
            return 0.25
        return 0.0

    def label_for(self, sample: TransactionSample, config: TransactionConfig) -> ReasonCode:
        # Decided on the raw amount, independently of the tier that fired
        limit = sample.user_average_trans_amount * config.amount.very_high_multiplier
        if sample.amount > limit:
            return ReasonCode.VERY_HIGH_AMOUNT
        return ReasonCode.HIGH_AMOUNT


class TransactionTypeFactor(TransactionFactor):
    factor_id = "transaction_type"
    reason_code = ReasonCode.HIGH_RISK_TRANSACTION_TYPE

    def sub_score(self, sample: TransactionSample, config: TransactionConfig) -> float:
        txn_type = normalize(sample.transaction_type)

        if any(risky in txn_type for risky in config.high_risk_types):
            return 0.85
        if "transfer" in txn_type or "payment" in txn_type:
            return 0.45
        if txn_type:
            return 0.15
        return 0.0


class LocationFactor(TransactionFactor):
    factor_id = "location"
    reason_code = ReasonCode.HIGH_RISK_LOCATION

    def sub_score(self, sample: TransactionSample, config: TransactionConfig) -> float:
        location = normalize(sample.location)

        if any(risky in location for risky in config.high_risk_locations):
            return 0.9
        if "international" in location or "foreign" in location:
            return 0.55
        if "country" in location or "state" in location or "abroad" in location:
            return 0.3
        return 0.0


class DeviceFactor(TransactionFactor):
    factor_id = "device"
    reason_code = ReasonCode.NEW_DEVICE

    def sub_score(self, sample: TransactionSample, config: TransactionConfig) -> float:
        device_id = sample.device_id
        lowered = device_id.lower()

        if "new" in lowered or "temp" in lowered:
            return 0.8
        if "unknown" in lowered or "guest" in lowered or len(device_id) < 5:
            return 0.7
        if "device-" not in lowered and not _KNOWN_DEVICE_FORMAT.fullmatch(device_id):
            return 0.4
        return 0.0


class TimingFactor(TransactionFactor):
    """Hour of day and weekday of the transaction, in UTC."""

    factor_id = "timing"
    reason_code = ReasonCode.UNUSUAL_TIMING

    def sub_score(self, sample: TransactionSample, config: TransactionConfig) -> float:
        when = parse_timestamp(sample.timestamp)
        if when is None:
            return 0.35

        hour = when.hour
        if 1 <= hour < 7:
            return 0.65
        if hour >= 22 or hour < 1:
            return 0.45
        if 7 <= hour < 9:
            return 0.3
        if when.weekday() >= 5:
            return 0.25
        return 0.0


class RecipientFactor(TransactionFactor):
    factor_id = "recipient"
    reason_code = ReasonCode.NEW_RECIPIENT

    def sub_score(self, sample: TransactionSample, config: TransactionConfig) -> float:
        account = sample.recipient_account
        lowered = account.lower()

        if len(account) < 5 or "temp" in lowered or "test" in lowered:
            return 0.85
        if "unknown" in lowered or "new" in lowered or _NUMERIC_ACCOUNT.fullmatch(account):
            return 0.6
        if len(account) < 8:
            return 0.35
        return 0.0


# All factor instances in evaluation order
ALL_FACTORS: list[TransactionFactor] = [
    AmountRatioFactor(),
    TransactionTypeFactor(),
    LocationFactor(),
    DeviceFactor(),
    TimingFactor(),
    RecipientFactor(),
]

"""Transaction risk configuration with sensible defaults.

Factor weights deliberately sum to 1.14; the scorer clamps the total
instead of renormalizing.
"""

import os
from dataclasses import dataclass, field


@dataclass
class AmountThresholds:
    # multiples of the user's historical average amount
    high_multiplier: float = 3.0
    very_high_multiplier: float = 5.0
    # sub-score used when the user has no positive average yet
    no_baseline_score: float = 0.65


@dataclass
class VerdictThresholds:
    high_risk: float = 0.6
    suspicious: float = 0.3


@dataclass
class ActionThresholds:
    block_score: float = 0.85
    block_with_critical_code_score: float = 0.7
    block_reason_count: int = 4
    delay_with_code_score: float = 0.5
    delay_reason_count: int = 3
    review_reason_count: int = 2
    review_floor_score: float = 0.25


@dataclass
class TransactionWeights:
    amount: float = 0.32
    transaction_type: float = 0.22
    location: float = 0.18
    device: float = 0.18
    timing: float = 0.12
    recipient: float = 0.12


@dataclass
class TransactionConfig:
    amount: AmountThresholds = field(default_factory=AmountThresholds)
    verdict: VerdictThresholds = field(default_factory=VerdictThresholds)
    actions: ActionThresholds = field(default_factory=ActionThresholds)
    weights: TransactionWeights = field(default_factory=TransactionWeights)
    high_risk_types: tuple[str, ...] = (
        "wire_transfer",
        "international_transfer",
        "cryptocurrency",
        "money_order",
        "cash_advance",
    )
    high_risk_locations: tuple[str, ...] = (
        "offshore",
        "tax_haven",
        "sanctioned_country",
    )

    @classmethod
    def from_env(cls) -> "TransactionConfig":
        """Load config with env var overrides. Env vars use TXN_ prefix."""
        config = cls()

        if v := os.getenv("TXN_HIGH_AMOUNT_MULTIPLIER"):
            config.amount.high_multiplier = float(v)
        if v := os.getenv("TXN_VERY_HIGH_AMOUNT_MULTIPLIER"):
            config.amount.very_high_multiplier = float(v)
        if v := os.getenv("TXN_HIGH_RISK_THRESHOLD"):
            config.verdict.high_risk = float(v)
        if v := os.getenv("TXN_SUSPICIOUS_THRESHOLD"):
            config.verdict.suspicious = float(v)
        if v := os.getenv("TXN_HIGH_RISK_TYPES"):
            config.high_risk_types = tuple(t.strip() for t in v.split(",") if t.strip())
        if v := os.getenv("TXN_HIGH_RISK_LOCATIONS"):
            config.high_risk_locations = tuple(t.strip() for t in v.split(",") if t.strip())

        return config


# Module-level default instance
default_config = TransactionConfig()

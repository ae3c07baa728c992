"""Pydantic models for the transaction risk domain."""

from enum import StrEnum

from pydantic import Field

from fraudnet.shared.models import CamelModel, FactorResult


class ReasonCode(StrEnum):
    VERY_HIGH_AMOUNT = "VERY_HIGH_AMOUNT"
    HIGH_AMOUNT = "HIGH_AMOUNT"
    HIGH_RISK_TRANSACTION_TYPE = "HIGH_RISK_TRANSACTION_TYPE"
    HIGH_RISK_LOCATION = "HIGH_RISK_LOCATION"
    NEW_DEVICE = "NEW_DEVICE"
    UNUSUAL_TIMING = "UNUSUAL_TIMING"
    NEW_RECIPIENT = "NEW_RECIPIENT"


class PredictionResult(StrEnum):
    SAFE = "SAFE"
    SUSPICIOUS = "SUSPICIOUS"
    HIGH_RISK = "HIGH_RISK"


class RecommendedAction(StrEnum):
    APPROVE = "APPROVE"
    FLAG_FOR_REVIEW = "FLAG_FOR_REVIEW"
    DELAY_AND_MFA = "DELAY_AND_MFA"
    BLOCK = "BLOCK"


class TransactionSample(CamelModel):
    """A pending transaction awaiting a decision. Never persisted raw."""

    transaction_id: str = Field(min_length=1)
    user_id: str = Field(min_length=1)
    amount: float = Field(ge=0)
    currency: str = Field(min_length=1)
    recipient_account: str
    user_average_trans_amount: float = Field(ge=0)
    transaction_type: str = Field(min_length=1)
    location: str = Field(min_length=1)
    # kept as text: an unparseable timestamp is itself a risk signal
    timestamp: str
    device_id: str


class TransactionVerdict(CamelModel):
    transaction_id: str
    prediction_result: PredictionResult
    risk_score: float = Field(ge=0.0, le=1.0)
    recommended_action: RecommendedAction
    reason_codes: list[ReasonCode] = []


class TransactionScoringResult(CamelModel):
    """Verdict plus the per-factor breakdown, for diagnostics."""

    verdict: TransactionVerdict
    factor_results: list[FactorResult] = []
    raw_score: float = 0.0

"""Predictive scam prevention domain."""

from .config import TransactionConfig
from .factors import ALL_FACTORS, TransactionFactor
from .models import (
    PredictionResult,
    ReasonCode,
    RecommendedAction,
    TransactionSample,
    TransactionScoringResult,
    TransactionVerdict,
)
from .scorer import TransactionRiskScorer, classify_prediction, determine_action

__all__ = [
    "ALL_FACTORS",
    "PredictionResult",
    "ReasonCode",
    "RecommendedAction",
    "TransactionConfig",
    "TransactionFactor",
    "TransactionRiskScorer",
    "TransactionSample",
    "TransactionScoringResult",
    "TransactionVerdict",
    "classify_prediction",
    "determine_action",
]

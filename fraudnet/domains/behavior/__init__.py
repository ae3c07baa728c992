"""Behavioral intent detection domain."""

from .config import BehaviorConfig
from .factors import ALL_FACTORS, BehaviorFactor
from .models import BehaviorSample, BehaviorScoringResult, BehaviorVerdict
from .scorer import BehaviorIntentScorer

__all__ = [
    "ALL_FACTORS",
    "BehaviorConfig",
    "BehaviorFactor",
    "BehaviorIntentScorer",
    "BehaviorSample",
    "BehaviorScoringResult",
    "BehaviorVerdict",
]

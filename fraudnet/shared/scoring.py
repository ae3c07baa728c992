"""Weighted-sum aggregation shared by the behavior and transaction scorers."""

import math
from collections.abc import Iterable

from .models import FactorResult


def round_half_up(value: float, digits: int = 2) -> float:
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def aggregate(results: Iterable[FactorResult]) -> tuple[float, float]:
    """Sum weighted contributions in evaluation order.

    Returns (raw_sum, final_score) where final_score is clamped to [0, 1]
    and rounded half-up to two decimals. Weights are not renormalized, so
    raw_sum may exceed 1.0.
    """
    raw = 0.0
    for result in results:
        if result.triggered:
            raw += result.contribution
    clamped = min(1.0, max(0.0, raw))
    return raw, round_half_up(clamped)

"""Behavioral risk factors.

Each factor maps one aspect of a session to a tiered sub-score in [0, 1]
and emits its flag when the sub-score is non-zero. Tier multipliers are
fixed; the base thresholds come from BehaviorConfig.
"""

import math
from abc import ABC, abstractmethod

from fraudnet.shared.models import FactorResult

from .config import BehaviorConfig
from .models import BehaviorSample


def _contains_any(pages: tuple[str, ...], needles: tuple[str, ...]) -> bool:
    return any(needle.lower() in page.lower() for page in pages for needle in needles)


class BehaviorFactor(ABC):
    """Base class for all behavioral factors."""

    factor_id: str  # also the attribute name on BehaviorWeights
    flag: str

    @abstractmethod
    def sub_score(self, sample: BehaviorSample, config: BehaviorConfig) -> float:
        """Return the tiered sub-score in [0, 1]."""
        ...

    def evaluate(self, sample: BehaviorSample, config: BehaviorConfig) -> FactorResult:
        score = self.sub_score(sample, config)
        return FactorResult(
            factor_id=self.factor_id,
            score=score,
            weight=getattr(config.weights, self.factor_id),
            label=self.flag if score > 0 else None,
        )


class TypingSpeedFactor(BehaviorFactor):
    """Slow typing suggests hesitation or coercion; very fast typing suggests automation."""

    factor_id = "typing"
    flag = "typing_slow"

    def sub_score(self, sample: BehaviorSample, config: BehaviorConfig) -> float:
        speed = sample.typing_speed
        low = config.typing.low
        high = config.typing.high

        if speed < low * 0.7:
            return 0.95
        if speed < low:
            return 0.85
        if speed < low * 1.15:
            return 0.65
        if speed < low * 1.3:
            return 0.35
        if speed > high * 1.2:
            return 0.5
        if speed > high:
            return 0.4
        return 0.0


class MouseMovementFactor(BehaviorFactor):
    factor_id = "mouse"
    flag = "unusual_mouse_pattern"

    def sub_score(self, sample: BehaviorSample, config: BehaviorConfig) -> float:
        travel = sample.mouse_movement
        low = config.mouse.low
        high = config.mouse.high

        if travel < low * 0.5:
            return 0.85
        if travel < low:
            return 0.7
        if travel < low * 1.2:
            return 0.45
        if travel > high * 1.3:
            return 0.6
        if travel > high:
            return 0.5
        return 0.0


def click_std_dev(intervals: tuple[float, ...]) -> float:
    """Population standard deviation of the inter-click intervals."""
    mean = sum(intervals) / len(intervals)
    variance = sum((v - mean) ** 2 for v in intervals) / len(intervals)
    return math.sqrt(variance)


class ClickPatternFactor(BehaviorFactor):
    factor_id = "click"
    flag = "irregular_click_timing"

    def sub_score(self, sample: BehaviorSample, config: BehaviorConfig) -> float:
        if len(sample.click_pattern) < 2:
            return 0.0

        std_dev = click_std_dev(sample.click_pattern)
        threshold = config.click.variance

        if std_dev > threshold * 1.5:
            return 0.9
        if std_dev > threshold:
            return 0.8
        if std_dev > threshold * 0.6:
            return 0.55
        if std_dev > threshold * 0.4:
            return 0.3
        return 0.0


class NavigationTimeFactor(BehaviorFactor):
    """Lingering on a sensitive page."""

    factor_id = "navigation"
    flag = "long_navigation_time"

    def sub_score(self, sample: BehaviorSample, config: BehaviorConfig) -> float:
        if not _contains_any(sample.pages_visited, config.navigation.sensitive_pages):
            return 0.0

        elapsed = sample.navigation_time
        threshold = config.navigation.time

        if elapsed > threshold:
            if elapsed > threshold * 3:
                return 0.95
            if elapsed > threshold * 2:
                return 0.9
            if elapsed > threshold * 1.5:
                return 0.75
            return 0.65
        if elapsed > threshold * 0.7:
            return 0.35
        return 0.0


class PageSequenceFactor(BehaviorFactor):
    """Sensitive pages reached without the usual path through the app."""

    factor_id = "page_sequence"
    flag = "unusual_page_sequence"

    def sub_score(self, sample: BehaviorSample, config: BehaviorConfig) -> float:
        pages = sample.pages_visited
        has_login = _contains_any(pages, ("login",))
        has_confirmation = _contains_any(pages, ("confirmation",))
        has_transfer = _contains_any(pages, ("transfer",))
        has_payment = _contains_any(pages, ("payment",))
        has_sensitive = has_transfer or has_confirmation or has_payment

        if has_sensitive and not has_login:
            return 0.9
        if has_confirmation and not has_transfer and not has_payment:
            return 0.65
        if has_sensitive and len(pages) <= 2:
            return 0.5
        return 0.0


# All factor instances in evaluation order
ALL_FACTORS: list[BehaviorFactor] = [
    TypingSpeedFactor(),
    MouseMovementFactor(),
    ClickPatternFactor(),
    NavigationTimeFactor(),
    PageSequenceFactor(),
]

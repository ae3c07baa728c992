"""Behavioral intent scoring configuration with sensible defaults.

Factor weights deliberately sum to 1.12; the scorer clamps the total
instead of renormalizing.
"""

import os
from dataclasses import dataclass, field


@dataclass
class TypingThresholds:
    # characters per minute
    low: float = 180.0
    high: float = 350.0


@dataclass
class MouseThresholds:
    # total pixels travelled during the session
    low: float = 800.0
    high: float = 2500.0


@dataclass
class ClickThresholds:
    # population std-dev of inter-click intervals, milliseconds
    variance: float = 150.0


@dataclass
class NavigationThresholds:
    # seconds spent on the current page
    time: float = 20.0
    sensitive_pages: tuple[str, ...] = ("transfer", "confirmation", "payment", "withdrawal")


@dataclass
class BehaviorWeights:
    typing: float = 0.28
    mouse: float = 0.22
    click: float = 0.22
    navigation: float = 0.28
    page_sequence: float = 0.12


@dataclass
class BehaviorConfig:
    typing: TypingThresholds = field(default_factory=TypingThresholds)
    mouse: MouseThresholds = field(default_factory=MouseThresholds)
    click: ClickThresholds = field(default_factory=ClickThresholds)
    navigation: NavigationThresholds = field(default_factory=NavigationThresholds)
    weights: BehaviorWeights = field(default_factory=BehaviorWeights)
    # Verdicts at or above this score are written to the ledger
    fraud_score_threshold: float = 0.7

    @classmethod
    def from_env(cls) -> "BehaviorConfig":
        """Load config with env var overrides. Env vars use BEHAVIOR_ prefix."""
        config = cls()

        if v := os.getenv("BEHAVIOR_TYPING_SPEED_LOW"):
            config.typing.low = float(v)
        if v := os.getenv("BEHAVIOR_TYPING_SPEED_HIGH"):
            config.typing.high = float(v)
        if v := os.getenv("BEHAVIOR_MOUSE_MOVEMENT_LOW"):
            config.mouse.low = float(v)
        if v := os.getenv("BEHAVIOR_MOUSE_MOVEMENT_HIGH"):
            config.mouse.high = float(v)
        if v := os.getenv("BEHAVIOR_CLICK_VARIANCE"):
            config.click.variance = float(v)
        if v := os.getenv("BEHAVIOR_NAVIGATION_TIME"):
            config.navigation.time = float(v)
        if v := os.getenv("BEHAVIOR_FRAUD_SCORE_THRESHOLD"):
            config.fraud_score_threshold = float(v)

        return config


# Module-level default instance
default_config = BehaviorConfig()

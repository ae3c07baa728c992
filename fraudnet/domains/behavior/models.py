"""Pydantic models for the behavioral intent domain."""

from pydantic import Field

from fraudnet.shared.models import CamelModel, FactorResult


class BehaviorSample(CamelModel):
    """Telemetry captured from one user session. Never persisted raw."""

    user_id: str = Field(min_length=1)
    session_id: str = Field(min_length=1)
    typing_speed: float
    mouse_movement: float
    click_pattern: tuple[float, ...]
    navigation_time: float
    pages_visited: tuple[str, ...]


class BehaviorVerdict(CamelModel):
    session_id: str
    intent_risk_score: float = Field(ge=0.0, le=1.0)
    behavior_flags: list[str] = []


class BehaviorScoringResult(CamelModel):
    """Verdict plus the per-factor breakdown, for diagnostics."""

    verdict: BehaviorVerdict
    factor_results: list[FactorResult] = []
    raw_score: float = 0.0

"""Behavioral intent scorer: session telemetry -> weighted factors -> verdict."""

import structlog

from fraudnet.shared.models import FactorResult
from fraudnet.shared.scoring import aggregate

from .config import BehaviorConfig, default_config
from .factors import ALL_FACTORS, BehaviorFactor
from .models import BehaviorSample, BehaviorScoringResult, BehaviorVerdict

logger = structlog.get_logger()


class BehaviorIntentScorer:
    """Scores whether a session looks like the legitimate user acting freely.

    Five factors (typing, mouse, click rhythm, time on sensitive pages,
    page sequence) each produce a tiered sub-score. The verdict score is the
    weighted sum clamped to [0, 1] and rounded to two decimals; each fired
    factor contributes exactly one flag.
    """

    def __init__(
        self,
        config: BehaviorConfig | None = None,
        factors: list[BehaviorFactor] | None = None,
    ) -> None:
        self._config = config or default_config
        self._factors = list(factors or ALL_FACTORS)

    @property
    def config(self) -> BehaviorConfig:
        return self._config

    def score(self, sample: BehaviorSample) -> BehaviorScoringResult:
        results: list[FactorResult] = [
            factor.evaluate(sample, self._config) for factor in self._factors
        ]
        raw_score, final_score = aggregate(results)
        flags = [r.label for r in results if r.triggered and r.label]

        verdict = BehaviorVerdict(
            session_id=sample.session_id,
            intent_risk_score=final_score,
            behavior_flags=flags,
        )

        logger.info(
            "behavior_scored",
            session_id=sample.session_id,
            intent_risk_score=final_score,
            raw_score=round(raw_score, 4),
            flags=flags,
        )

        return BehaviorScoringResult(
            verdict=verdict,
            factor_results=results,
            raw_score=raw_score,
        )

    def analyze(self, sample: BehaviorSample) -> BehaviorVerdict:
        """Return only the public verdict."""
        return self.score(sample).verdict

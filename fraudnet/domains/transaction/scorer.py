"""Transaction risk scorer: sample -> weighted factors -> verdict and action."""

import structlog

from fraudnet.shared.models import FactorResult
from fraudnet.shared.scoring import aggregate

from .config import TransactionConfig, default_config
from .factors import ALL_FACTORS, TransactionFactor
from .models import (
    PredictionResult,
    ReasonCode,
    RecommendedAction,
    TransactionSample,
    TransactionScoringResult,
    TransactionVerdict,
)

logger = structlog.get_logger()

_BLOCK_CODES = (ReasonCode.VERY_HIGH_AMOUNT, ReasonCode.HIGH_RISK_LOCATION)
_DELAY_CODES = (
    ReasonCode.HIGH_AMOUNT,
    ReasonCode.NEW_DEVICE,
    ReasonCode.HIGH_RISK_TRANSACTION_TYPE,
)


def classify_prediction(score: float, config: TransactionConfig) -> PredictionResult:
    if score >= config.verdict.high_risk:
        return PredictionResult.HIGH_RISK
    if score >= config.verdict.suspicious:
        return PredictionResult.SUSPICIOUS
    return PredictionResult.SAFE


def determine_action(
    score: float,
    reason_codes: list[ReasonCode],
    config: TransactionConfig,
) -> RecommendedAction:
    """Pick the recommended action. Rules are checked in priority order."""
    thresholds = config.actions
    count = len(reason_codes)

    if (
        score >= thresholds.block_score
        or (
            score >= thresholds.block_with_critical_code_score
            and any(code in reason_codes for code in _BLOCK_CODES)
        )
        or count >= thresholds.block_reason_count
    ):
        return RecommendedAction.BLOCK

    if (
        score >= config.verdict.high_risk
        or (
            score >= thresholds.delay_with_code_score
            and any(code in reason_codes for code in _DELAY_CODES)
        )
        or count >= thresholds.delay_reason_count
    ):
        return RecommendedAction.DELAY_AND_MFA

    if (
        score >= config.verdict.suspicious
        or count >= thresholds.review_reason_count
        or score >= thresholds.review_floor_score
    ):
        return RecommendedAction.FLAG_FOR_REVIEW

    return RecommendedAction.APPROVE


class TransactionRiskScorer:
    """Scores a pending transaction and recommends an action.

    Category and action are decided on the clamped, unrounded score; the
    verdict reports the score rounded to two decimals.
    """

    def __init__(
        self,
        config: TransactionConfig | None = None,
        factors: list[TransactionFactor] | None = None,
    ) -> None:
        self._config = config or default_config
        self._factors = list(factors or ALL_FACTORS)

    @property
    def config(self) -> TransactionConfig:
        return self._config

    def score(self, sample: TransactionSample) -> TransactionScoringResult:
        results: list[FactorResult] = [
            factor.evaluate(sample, self._config) for factor in self._factors
        ]
        raw_score, rounded_score = aggregate(results)
        clamped = min(1.0, max(0.0, raw_score))
        reason_codes = [ReasonCode(r.label) for r in results if r.triggered and r.label]

        prediction = classify_prediction(clamped, self._config)
        action = determine_action(clamped, reason_codes, self._config)

        verdict = TransactionVerdict(
            transaction_id=sample.transaction_id,
            prediction_result=prediction,
            risk_score=rounded_score,
            recommended_action=action,
            reason_codes=reason_codes,
        )

        logger.info(
            "transaction_scored",
            transaction_id=sample.transaction_id,
            risk_score=rounded_score,
            prediction_result=prediction.value,
            recommended_action=action.value,
            reason_codes=[c.value for c in reason_codes],
        )

        return TransactionScoringResult(
            verdict=verdict,
            factor_results=results,
            raw_score=raw_score,
        )

    def analyze(self, sample: TransactionSample) -> TransactionVerdict:
        """Return only the public verdict."""
        return self.score(sample).verdict

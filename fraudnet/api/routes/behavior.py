"""Human-intent detection endpoints."""

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends

from fraudnet.api.dependencies import get_bank_id, get_behavior_scorer, get_ledger
from fraudnet.domains.behavior.models import BehaviorSample, BehaviorVerdict
from fraudnet.domains.behavior.scorer import BehaviorIntentScorer
from fraudnet.domains.ledger.adapter import behavior_to_fraud_record, is_behavior_fraud
from fraudnet.domains.ledger.ledger import FraudLedger

logger = structlog.get_logger()
router = APIRouter(prefix="/behavior", tags=["behavior"])


@router.post("/analyze", response_model=BehaviorVerdict)
async def analyze_behavior(
    sample: BehaviorSample,
    background_tasks: BackgroundTasks,
    scorer: BehaviorIntentScorer = Depends(get_behavior_scorer),  # noqa: B008
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
    bank_id: str = Depends(get_bank_id),  # noqa: B008
) -> BehaviorVerdict:
    """Score session telemetry for signs of coercion or manipulation.

    Fraud-worthy verdicts are shared to the ledger after the response is sent.
    """
    verdict = scorer.analyze(sample)

    if is_behavior_fraud(verdict, scorer.config):
        record = behavior_to_fraud_record(sample, verdict, bank_id)
        background_tasks.add_task(ledger.submit_record, record)
        logger.info(
            "fraud_detected_from_behavior",
            session_id=sample.session_id,
            fraud_id=record.fraud_id,
            severity=record.severity.value,
        )

    return verdict

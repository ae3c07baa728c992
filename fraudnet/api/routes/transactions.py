"""Predictive scam prevention endpoints."""

import structlog
from fastapi import APIRouter, BackgroundTasks, Depends

from fraudnet.api.dependencies import get_bank_id, get_ledger, get_transaction_scorer
from fraudnet.domains.ledger.adapter import is_transaction_fraud, transaction_to_fraud_record
from fraudnet.domains.ledger.ledger import FraudLedger
from fraudnet.domains.transaction.models import TransactionSample, TransactionVerdict
from fraudnet.domains.transaction.scorer import TransactionRiskScorer

logger = structlog.get_logger()
router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.post("/predict", response_model=TransactionVerdict)
async def predict_transaction(
    sample: TransactionSample,
    background_tasks: BackgroundTasks,
    scorer: TransactionRiskScorer = Depends(get_transaction_scorer),  # noqa: B008
    ledger: FraudLedger = Depends(get_ledger),  # noqa: B008
    bank_id: str = Depends(get_bank_id),  # noqa: B008
) -> TransactionVerdict:
    verdict = scorer.analyze(sample)

    if is_transaction_fraud(verdict):
        record = transaction_to_fraud_record(sample, verdict, bank_id)
        background_tasks.add_task(ledger.submit_record, record)
        logger.info(
            "fraud_detected_from_transaction",
            transaction_id=sample.transaction_id,
            fraud_id=record.fraud_id,
            severity=record.severity.value,
        )

    return verdict

"""Process-wide scorer and ledger instances, injected into routes with Depends."""

from fraudnet.config import settings
from fraudnet.domains.behavior.config import BehaviorConfig
from fraudnet.domains.behavior.scorer import BehaviorIntentScorer
from fraudnet.domains.ledger.config import LedgerConfig
from fraudnet.domains.ledger.ledger import FraudLedger
from fraudnet.domains.transaction.config import TransactionConfig
from fraudnet.domains.transaction.scorer import TransactionRiskScorer
from fraudnet.persistence.storage import FraudRecordStore

_behavior_scorer: BehaviorIntentScorer | None = None
_transaction_scorer: TransactionRiskScorer | None = None
_ledger: FraudLedger | None = None


def get_behavior_scorer() -> BehaviorIntentScorer:
    """Get or create the global BehaviorIntentScorer singleton."""
    global _behavior_scorer
    if _behavior_scorer is None:
        _behavior_scorer = BehaviorIntentScorer(config=BehaviorConfig.from_env())
    return _behavior_scorer


def get_transaction_scorer() -> TransactionRiskScorer:
    """Get or create the global TransactionRiskScorer singleton."""
    global _transaction_scorer
    if _transaction_scorer is None:
        _transaction_scorer = TransactionRiskScorer(config=TransactionConfig.from_env())
    return _transaction_scorer


def get_ledger() -> FraudLedger:
    """Get or create the global FraudLedger singleton, backed by S3."""
    global _ledger
    if _ledger is None:
        _ledger = FraudLedger(
            store=FraudRecordStore.from_settings(settings),
            config=LedgerConfig.from_env(),
        )
    return _ledger


def get_bank_id() -> str:
    return settings.bank_id

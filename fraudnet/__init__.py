"""FraudNet Intelligence: behavior scoring, scam prediction and a shared fraud ledger."""

__version__ = "0.1.0"

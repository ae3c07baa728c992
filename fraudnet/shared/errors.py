"""Exception hierarchy for the scoring and ledger domains."""


class FraudNetError(Exception):
    """Base class for all fraudnet errors."""


class QueryValidationError(FraudNetError, ValueError):
    """A ledger query supplied none of the three hash fields."""


class StoreError(FraudNetError):
    """The durable record store failed an I/O operation."""


class RecordDecodeError(StoreError):
    """A stored object does not match the fraud record schema."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Cannot decode fraud record at {key}: {reason}")
        self.key = key
        self.reason = reason

"""Fraud record identifiers."""

import secrets
import string
import threading
import time

_BASE36 = string.digits + string.ascii_lowercase


class FraudIdGenerator:
    """Generates ``fraud-<epoch-ms>-<9 base36 chars>`` identifiers.

    The millisecond part never repeats or goes backwards within a process,
    so identifiers sort in submission order even when the clock does not
    advance between two submissions.
    """

    def __init__(self, clock=time.time) -> None:
        self._clock = clock
        self._last_ms = 0
        self._lock = threading.Lock()

    def _next_ms(self) -> int:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            self._last_ms = max(now_ms, self._last_ms + 1)
            return self._last_ms

    def __call__(self) -> str:
        suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
        return f"fraud-{self._next_ms()}-{suffix}"


generate_fraud_id = FraudIdGenerator()

"""Base generator class with seeded RNG and shared sampling helpers."""

import random
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import numpy as np


class BaseGenerator:
    """Seeded sample generator.

    Both ``random`` and a numpy ``Generator`` are seeded from the same value,
    so a given (config, seed) pair always yields the same samples.
    """

    def __init__(self, config: dict[str, Any] | None = None, seed: int = 42):
        self.config = config or {}
        self.seed = seed
        self.rng = random.Random(seed)
        self.np_rng = np.random.default_rng(seed)

    def _uuid(self) -> str:
        """Generate a deterministic UUID from the seeded RNG."""
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    def _random_datetime(self, start: datetime, end: datetime) -> datetime:
        delta = end - start
        random_seconds = self.rng.randint(0, max(1, int(delta.total_seconds())))
        return start + timedelta(seconds=random_seconds)

    def _base_time(self) -> datetime:
        return datetime(2026, 1, 1, tzinfo=UTC)

    def _weighted_choice(self, options: dict[str, float]) -> str:
        """Choose from weighted options."""
        items = list(options.keys())
        weights = list(options.values())
        return self.rng.choices(items, weights=weights, k=1)[0]

    def _is_fraud(self) -> bool:
        return self.rng.random() < self.config.get("fraud_rate", 0.1)

"""Fraud ledger configuration with sensible defaults."""

import os
from dataclasses import dataclass


@dataclass
class LedgerConfig:
    record_prefix: str = "fraud-records"
    analytics_prefix: str = "analytics/daily"
    # max records pulled from the store per resync
    resync_page_size: int = 1000

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Load config with env var overrides. Env vars use LEDGER_ prefix."""
        config = cls()

        if v := os.getenv("LEDGER_RECORD_PREFIX"):
            config.record_prefix = v.strip("/")
        if v := os.getenv("LEDGER_ANALYTICS_PREFIX"):
            config.analytics_prefix = v.strip("/")
        if v := os.getenv("LEDGER_RESYNC_PAGE_SIZE"):
            config.resync_page_size = int(v)

        return config


# Module-level default instance
default_config = LedgerConfig()

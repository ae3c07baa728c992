"""Pending-transaction generator with scam injection."""

from datetime import timedelta
from typing import Any

from .base import BaseGenerator
from .utils.distributions import generate_device_id, log_normal_sample

_LOCATIONS = ["new_york", "miami", "boston", "chicago", "atlanta", "los_angeles", "london"]
_SCAM_LOCATIONS = ["offshore", "tax_haven", "sanctioned_country"]
_CURRENCIES = ["USD", "EUR", "GBP"]


class TransactionSampleGenerator(BaseGenerator):
    """Produces TransactionSample-shaped dicts (camelCase wire keys).

    Each user gets a stable device, home location and average amount.
    Scam transactions (``fraud_rate`` of the output) inflate the amount,
    use a high-risk type, and often come from a new device in the small
    hours to an unknown recipient.
    """

    def generate(self, num_transactions: int = 100) -> list[dict[str, Any]]:
        config = self.config
        num_users = config.get("num_users", 50)
        time_span = config.get("time_span_days", 30)
        base_time = self._base_time()
        end_time = base_time + timedelta(days=time_span)

        amount_dist = config.get(
            "amount_distribution", {"log_normal_mean": 4.5, "log_normal_std": 0.8}
        )
        type_weights = config.get(
            "type_weights",
            {"card_payment": 0.45, "bill_payment": 0.25, "p2p_transfer": 0.25, "atm": 0.05},
        )
        scam_type_weights = config.get(
            "scam_type_weights",
            {
                "wire_transfer": 0.4,
                "international_transfer": 0.25,
                "cryptocurrency": 0.2,
                "money_order": 0.1,
                "cash_advance": 0.05,
            },
        )

        users = []
        for _ in range(num_users):
            users.append(
                {
                    "user_id": self._uuid(),
                    "device_id": generate_device_id(self.rng),
                    "location": self.rng.choice(_LOCATIONS),
                    "currency": self.rng.choice(_CURRENCIES),
                    "average": round(
                        log_normal_sample(
                            self.rng,
                            amount_dist["log_normal_mean"],
                            amount_dist["log_normal_std"],
                            min_val=5.0,
                            max_val=20000.0,
                        ),
                        2,
                    ),
                }
            )

        samples: list[dict[str, Any]] = []
        for _ in range(num_transactions):
            user = self.rng.choice(users)
            when = self._random_datetime(base_time, end_time)

            if self._is_fraud():
                amount = user["average"] * self.rng.uniform(4.0, 12.0)
                txn_type = self._weighted_choice(scam_type_weights)
                location = (
                    self.rng.choice(_SCAM_LOCATIONS) if self.rng.random() < 0.5 else user["location"]
                )
                device_id = "new-device" if self.rng.random() < 0.6 else user["device_id"]
                when = when.replace(hour=self.rng.randint(1, 4))
                recipient = "new-recipient" if self.rng.random() < 0.6 else f"acct-{self._uuid()[:8]}"
            else:
                amount = user["average"] * max(0.1, float(self.np_rng.normal(1.0, 0.35)))
                txn_type = self._weighted_choice(type_weights)
                location = user["location"]
                device_id = user["device_id"]
                when = when.replace(hour=self.rng.randint(8, 21))
                recipient = f"acct-{self._uuid()[:8]}"

            samples.append(
                {
                    "transactionId": f"txn-{self._uuid()[:12]}",
                    "userId": user["user_id"],
                    "amount": round(amount, 2),
                    "currency": user["currency"],
                    "recipientAccount": recipient,
                    "userAverageTransAmount": user["average"],
                    "transactionType": txn_type,
                    "location": location,
                    "timestamp": when.isoformat().replace("+00:00", "Z"),
                    "deviceId": device_id,
                }
            )

        samples.sort(key=lambda s: s["timestamp"])
        return samples

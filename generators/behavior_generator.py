"""Session behavior telemetry generator with coerced-session injection."""

from typing import Any

from .base import BaseGenerator
from .utils.distributions import clipped_normal, click_intervals

_NORMAL_JOURNEYS = [
    ["login", "dashboard", "accounts"],
    ["login", "dashboard", "transfer", "confirmation"],
    ["login", "accounts", "statements"],
    ["login", "dashboard", "payment", "confirmation"],
    ["login", "profile", "settings"],
]

_COERCED_JOURNEYS = [
    ["transfer", "confirmation"],
    ["dashboard", "payment", "confirmation"],
    ["confirmation"],
    ["login", "transfer", "confirmation"],
]


class BehaviorSampleGenerator(BaseGenerator):
    """Produces BehaviorSample-shaped dicts (camelCase wire keys).

    Legitimate sessions type briskly, move the mouse a normal amount and click
    at a steady cadence. Coerced sessions (``fraud_rate`` of the output) type
    slowly, hesitate between clicks and linger on sensitive pages.
    """

    def generate(self, num_sessions: int = 100) -> list[dict[str, Any]]:
        num_users = self.config.get("num_users", 50)
        users = [self._uuid() for _ in range(num_users)]
        return [self._session(self.rng.choice(users)) for _ in range(num_sessions)]

    def _session(self, user_id: str) -> dict[str, Any]:
        if self._is_fraud():
            typing_speed = clipped_normal(self.np_rng, 110, 30, min_val=20)
            mouse_movement = clipped_normal(self.np_rng, 500, 200, min_val=50)
            clicks = click_intervals(self.np_rng, self.rng.randint(3, 8), 900, 350)
            navigation_time = clipped_normal(self.np_rng, 55, 20, min_val=5)
            pages = self.rng.choice(_COERCED_JOURNEYS)
        else:
            typing_speed = clipped_normal(self.np_rng, 260, 40, min_val=20)
            mouse_movement = clipped_normal(self.np_rng, 1500, 350, min_val=50)
            clicks = click_intervals(self.np_rng, self.rng.randint(3, 8), 400, 40)
            navigation_time = clipped_normal(self.np_rng, 8, 4, min_val=1)
            pages = self.rng.choice(_NORMAL_JOURNEYS)

        return {
            "userId": user_id,
            "sessionId": f"sess-{self._uuid()[:12]}",
            "typingSpeed": round(typing_speed, 1),
            "mouseMovement": round(mouse_movement, 1),
            "clickPattern": list(clicks),
            "navigationTime": round(navigation_time, 1),
            "pagesVisited": list(pages),
        }

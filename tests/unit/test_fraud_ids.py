"""Tests for fraud record identifiers."""

import re
from concurrent.futures import ThreadPoolExecutor

from fraudnet.domains.ledger.ids import FraudIdGenerator

ID_FORMAT = re.compile(r"^fraud-(\d+)-[0-9a-z]{9}$")


def _millis(fraud_id: str) -> int:
    return int(ID_FORMAT.match(fraud_id).group(1))


class TestFraudIdGenerator:
    def test_format(self):
        gen = FraudIdGenerator(clock=lambda: 1768473000.5)
        fraud_id = gen()
        assert ID_FORMAT.match(fraud_id)
        assert _millis(fraud_id) == 1768473000500

    def test_frozen_clock_still_increases(self):
        gen = FraudIdGenerator(clock=lambda: 1000.0)
        millis = [_millis(gen()) for _ in range(5)]
        assert millis == [1000000, 1000001, 1000002, 1000003, 1000004]

    def test_clock_going_backwards(self):
        ticks = iter([2000.0, 1999.0])
        gen = FraudIdGenerator(clock=lambda: next(ticks))
        first, second = gen(), gen()
        assert _millis(second) > _millis(first)

    def test_unique_across_threads(self):
        gen = FraudIdGenerator(clock=lambda: 1000.0)
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda _: gen(), range(400)))
        assert len(set(ids)) == 400
        assert len({_millis(i) for i in ids}) == 400

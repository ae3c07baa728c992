"""Tests for the synthetic behavior and transaction sample generators."""

import json

import yaml

from fraudnet.domains.behavior.models import BehaviorSample
from fraudnet.domains.behavior.scorer import BehaviorIntentScorer
from fraudnet.domains.transaction.models import PredictionResult, TransactionSample
from fraudnet.domains.transaction.scorer import TransactionRiskScorer
from generators.behavior_generator import BehaviorSampleGenerator
from generators.cli import main
from generators.transaction_generator import TransactionSampleGenerator


class TestBehaviorSampleGenerator:
    def test_deterministic_output(self):
        a = BehaviorSampleGenerator(seed=7).generate(num_sessions=20)
        b = BehaviorSampleGenerator(seed=7).generate(num_sessions=20)
        assert a == b

    def test_samples_validate(self):
        for raw in BehaviorSampleGenerator(seed=1).generate(num_sessions=50):
            BehaviorSample.model_validate(raw)

    def test_no_fraud_scores_low(self):
        scorer = BehaviorIntentScorer()
        samples = BehaviorSampleGenerator(config={"fraud_rate": 0.0}, seed=3).generate(50)
        scores = [scorer.analyze(BehaviorSample.model_validate(s)).intent_risk_score for s in samples]
        assert sum(scores) / len(scores) < 0.3

    def test_all_fraud_scores_high(self):
        scorer = BehaviorIntentScorer()
        samples = BehaviorSampleGenerator(config={"fraud_rate": 1.0}, seed=3).generate(50)
        scores = [scorer.analyze(BehaviorSample.model_validate(s)).intent_risk_score for s in samples]
        assert sum(scores) / len(scores) > 0.5


class TestTransactionSampleGenerator:
    def test_deterministic_output(self):
        a = TransactionSampleGenerator(seed=11).generate(num_transactions=30)
        b = TransactionSampleGenerator(seed=11).generate(num_transactions=30)
        assert a == b

    def test_samples_validate_and_are_time_ordered(self):
        samples = TransactionSampleGenerator(seed=2).generate(num_transactions=40)
        for raw in samples:
            TransactionSample.model_validate(raw)
        timestamps = [s["timestamp"] for s in samples]
        assert timestamps == sorted(timestamps)

    def test_scams_are_flagged(self):
        scorer = TransactionRiskScorer()
        samples = TransactionSampleGenerator(config={"fraud_rate": 1.0}, seed=5).generate(40)
        flagged = [
            scorer.analyze(TransactionSample.model_validate(s)).prediction_result
            != PredictionResult.SAFE
            for s in samples
        ]
        assert all(flagged)


class TestCli:
    def test_stdout_json_lines(self, capsys):
        main(["behavior", "--count", "3", "--seed", "9"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        assert "sessionId" in json.loads(lines[0])

    def test_yaml_config_and_file_output(self, tmp_path):
        config_path = tmp_path / "txn.yaml"
        config_path.write_text(yaml.safe_dump({"fraud_rate": 0.5, "num_users": 5}))
        output = tmp_path / "out" / "txns.jsonl"

        main(
            [
                "transaction",
                "--config",
                str(config_path),
                "--count",
                "12",
                "--output",
                "file",
                "--output-file",
                str(output),
            ]
        )

        rows = [json.loads(line) for line in output.read_text().splitlines()]
        assert len(rows) == 12
        assert {"transactionId", "amount", "deviceId"} <= set(rows[0])

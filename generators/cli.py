"""CLI entry point for synthetic sample generators.

Usage:
    fraudnet-generate behavior --count 500 --seed 7
    fraudnet-generate transaction --config configs/transactions.yaml --count 10000
    fraudnet-generate transaction --output file --output-file out/txns.jsonl
"""

import argparse
import json
import sys
from pathlib import Path

import yaml


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="FraudNet synthetic sample generators")
    parser.add_argument(
        "generator",
        choices=["behavior", "transaction"],
        help="Which generator to run",
    )
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=100, help="Number of samples to generate")
    parser.add_argument(
        "--output",
        type=str,
        default="stdout",
        choices=["stdout", "file"],
        help="Output destination",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Output file path")

    args = parser.parse_args(argv)

    config = {}
    if args.config:
        with open(args.config) as f:
            config = yaml.safe_load(f) or {}

    if args.generator == "behavior":
        from .behavior_generator import BehaviorSampleGenerator

        samples = BehaviorSampleGenerator(config=config, seed=args.seed).generate(
            num_sessions=args.count
        )
    else:
        from .transaction_generator import TransactionSampleGenerator

        samples = TransactionSampleGenerator(config=config, seed=args.seed).generate(
            num_transactions=args.count
        )

    if args.output == "stdout":
        for sample in samples:
            print(json.dumps(sample))
    else:
        output_path = args.output_file or f"output/{args.generator}_samples.jsonl"
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            for sample in samples:
                f.write(json.dumps(sample) + "\n")
        print(f"Wrote {len(samples)} samples to {output_path}", file=sys.stderr)

    print(f"Generated {len(samples)} samples", file=sys.stderr)


if __name__ == "__main__":
    main()

"""Statistical distribution helpers for realistic telemetry generation."""

import random

import numpy as np


def log_normal_sample(
    rng: random.Random,
    mean: float,
    std: float,
    min_val: float = 0.01,
    max_val: float | None = None,
) -> float:
    value = rng.lognormvariate(mean, std)
    value = max(value, min_val)
    if max_val is not None:
        value = min(value, max_val)
    return value


def clipped_normal(
    np_rng: np.random.Generator, mean: float, std: float, min_val: float = 0.0
) -> float:
    return float(max(min_val, np_rng.normal(mean, std)))


def click_intervals(
    np_rng: np.random.Generator, count: int, mean_ms: float, jitter_ms: float
) -> tuple[float, ...]:
    """Milliseconds between consecutive clicks; higher jitter reads as hesitation."""
    samples = np_rng.normal(mean_ms, jitter_ms, size=count)
    return tuple(round(float(max(10.0, s)), 1) for s in samples)


def generate_device_id(rng: random.Random) -> str:
    return f"device-{uuid_hex(rng)[:12]}"


def uuid_hex(rng: random.Random) -> str:
    return f"{rng.getrandbits(128):032x}"

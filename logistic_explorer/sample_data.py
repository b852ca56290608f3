"""Synthetic 1D logistic data for the "Load sample" button."""

from __future__ import annotations

import random
import time
from typing import List, Optional, Tuple

from . import config
from .graph_engine import sigmoid


def generate_synthetic_data(
    n: int = config.SAMPLE_SIZE,
    slope: float = config.SAMPLE_SLOPE,
    intercept: float = config.SAMPLE_INTERCEPT,
    seed: int = 42,
) -> List[Tuple[float, int]]:
    """Draw x uniformly from [0, 10) and y ~ Bernoulli(sigmoid(slope*x + intercept)).

    Rows are sorted by x. The same seed always gives the same rows.
    """
    rng = random.Random(seed)
    xs = [config.SAMPLE_X_SPAN * rng.random() for _ in range(n)]
    rows = [(x, 1 if rng.random() < sigmoid(slope * x + intercept) else 0) for x in xs]
    rows.sort(key=lambda row: row[0])
    return rows


def dataset_to_csv(rows: List[Tuple[float, int]]) -> str:
    return "x,y\n" + "\n".join(f"{x:.4f},{y}" for x, y in rows)


def fresh_seed() -> int:
    return (time.time_ns() ^ random.getrandbits(30)) & 0xFFFFFFFF


def sample_csv(seed: Optional[int] = None) -> str:
    return dataset_to_csv(generate_synthetic_data(seed=fresh_seed() if seed is None else seed))

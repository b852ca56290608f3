from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from . import config


@dataclass(frozen=True)
class DataPoint:
    x: float
    cls: int

    @classmethod
    def from_row(cls, x: float, y_raw: float) -> "DataPoint":
        return cls(x=float(x), cls=1 if y_raw >= config.CLASS_CUTOFF else 0)


@dataclass(frozen=True)
class ParameterPair:
    """Parameters of ``sigmoid(slope * x + intercept)``."""

    slope: float
    intercept: float


@dataclass(frozen=True)
class QuadrantCounts:
    true_positive: int = 0
    false_positive: int = 0
    true_negative: int = 0
    false_negative: int = 0

    @property
    def total(self) -> int:
        return self.true_positive + self.false_positive + self.true_negative + self.false_negative


Dataset = Tuple[DataPoint, ...]


def build_dataset(rows: Iterable[Tuple[float, float]]) -> Dataset:
    return tuple(DataPoint.from_row(x, y) for x, y in rows)


def predict(x: float, x0: float) -> int:
    # Points on the boundary count as positive.
    return 1 if x >= x0 else 0


def classify(dataset: Sequence[DataPoint], x0: Optional[float]) -> Optional[QuadrantCounts]:
    """Count TP/FP/TN/FN of the 1D threshold classifier at ``x0``.

    Returns None when no threshold is defined; no counts are shown then.
    """
    if x0 is None:
        return None
    tp = fp = tn = fn = 0
    for point in dataset:
        predicted = predict(point.x, x0)
        if point.cls == 1 and predicted == 0:
            fn += 1
        elif point.cls == 0 and predicted == 0:
            tn += 1
        elif point.cls == 1 and predicted == 1:
            tp += 1
        else:
            fp += 1
    return QuadrantCounts(true_positive=tp, false_positive=fp, true_negative=tn, false_negative=fn)

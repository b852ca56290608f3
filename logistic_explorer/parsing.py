"""Best-effort extraction of numeric two-column rows from pasted text."""

from __future__ import annotations

import logging
import math
import re
from typing import List, Optional, Tuple

from .classifier import ParameterPair

logger = logging.getLogger(__name__)

_FIELD_SPLIT = re.compile(r"[;,\t]")
_HEADER_START = re.compile(r"[A-Za-z]")


def _finite_float(raw: str) -> Optional[float]:
    try:
        num = float(raw)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def parse_rows(text: Optional[str], expect_header: bool = False) -> List[Tuple[float, float]]:
    """Return the (first, second) numeric fields of every usable line.

    Lines split on comma, semicolon or tab. The first line is skipped when
    ``expect_header`` is set or when it starts with a letter. Rows whose first
    two fields are not both finite numbers are dropped.
    """
    if not isinstance(text, str):
        return []
    lines = [line for line in text.strip().splitlines() if line.strip()]
    if not lines:
        return []
    start = 1 if expect_header or _HEADER_START.match(lines[0]) else 0

    rows: List[Tuple[float, float]] = []
    dropped = 0
    for line in lines[start:]:
        parts = [part.strip() for part in _FIELD_SPLIT.split(line)]
        if len(parts) < 2:
            dropped += 1
            continue
        first = _finite_float(parts[0])
        second = _finite_float(parts[1])
        if first is None or second is None:
            dropped += 1
            continue
        rows.append((first, second))
    if dropped:
        logger.debug("Dropped %d non-numeric row(s) out of %d", dropped, len(lines) - start)
    return rows


def parse_parameters(text: Optional[str]) -> Tuple[ParameterPair, ...]:
    # Column order is fixed: intercept first, slope second.
    return tuple(ParameterPair(slope=slope, intercept=intercept) for intercept, slope in parse_rows(text))

"""Plain-language summaries for the live status region."""

from typing import Optional

from .classifier import ParameterPair, QuadrantCounts


def describe_frame(pair: Optional[ParameterPair], x0: Optional[float], counts: Optional[QuadrantCounts]) -> str:
    if pair is None:
        return "No parameters shown yet."
    head = f"slope {pair.slope:.2f}, intercept {pair.intercept:.2f}"
    if x0 is None:
        return f"{head}: no threshold, the slope is zero or a value is not finite."
    text = f"{head}: threshold at x = {x0:.2f}."
    if counts is not None and counts.total:
        correct = counts.true_positive + counts.true_negative
        text += (
            f" TP {counts.true_positive}, FP {counts.false_positive},"
            f" TN {counts.true_negative}, FN {counts.false_negative}"
            f" ({correct} of {counts.total} correct)."
        )
    return text


def describe_progress(position: int, total: int, state: str) -> str:
    if not total:
        return "No parameter sequence loaded."
    return f"Frame {position} of {total} ({state})."

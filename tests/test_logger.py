import logging

from logistic_explorer.classifier import ParameterPair, QuadrantCounts
from logistic_explorer.logger import (
    append_preview_log,
    build_event_record,
    current_timestamp,
    format_event_message,
)
from logistic_explorer.logging_config import logging_configured, setup_logging
from logistic_explorer.verbal_descriptions import describe_frame, describe_progress


def test_timestamp_is_utc_with_z_suffix():
    ts = current_timestamp()
    assert ts.endswith("Z")
    assert "T" in ts


def test_event_record_merges_extras():
    record = build_event_record("start", extras={"frames": 4})
    assert record["event"] == "start"
    assert record["source"] == "button"
    assert record["frames"] == 4


def test_format_event_messages():
    assert format_event_message({"event": "plot", "points": 12}) == "plot: 12 points"
    assert format_event_message({"event": "start", "frames": 3}) == "start: 3 frames"
    assert format_event_message({"event": "view_mode", "mode": "threshold"}) == "view_mode: threshold"
    assert format_event_message({"event": "speed", "delay_ms": 450}) == "speed: 450 ms/frame"
    assert format_event_message({"event": "reset"}) == "reset: animation rewound"
    assert (
        format_event_message({"event": "pause_or_resume", "state": "paused", "position": 2})
        == "pause_or_resume: now paused at frame 2"
    )
    assert format_event_message({"event": "custom"}) == "custom"


def test_preview_log_is_bounded():
    entries = []
    for i in range(8):
        entries = append_preview_log(entries, f"event {i}", capacity=3)
    assert entries == ["event 5", "event 6", "event 7"]
    assert append_preview_log(None, "first") == ["first"]


def test_describe_frame_variants():
    pair = ParameterPair(slope=2.0, intercept=-6.0)
    assert describe_frame(None, None, None) == "No parameters shown yet."
    assert "no threshold" in describe_frame(ParameterPair(slope=0.0, intercept=1.0), None, None)

    counts = QuadrantCounts(true_positive=3, false_positive=1, true_negative=4, false_negative=2)
    text = describe_frame(pair, 3.0, counts)
    assert text.startswith("slope 2.00, intercept -6.00: threshold at x = 3.00.")
    assert "(7 of 10 correct)" in text


def test_describe_progress():
    assert describe_progress(0, 0, "idle") == "No parameter sequence loaded."
    assert describe_progress(2, 5, "paused") == "Frame 2 of 5 (paused)."


def test_setup_logging_does_not_stack_handlers():
    logger = setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)
    try:
        assert logger.name == "logistic_explorer"
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_logging_configured_reflects_setup():
    logger = logging.getLogger("logistic_explorer")
    logger.handlers.clear()
    assert not logging_configured()
    setup_logging("WARNING")
    try:
        assert logging_configured()
        assert logger.level == logging.WARNING
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

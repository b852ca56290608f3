"""Activity records shown in the "Recent activity" panel."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from . import config


def current_timestamp() -> str:
    ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return ts.replace("+00:00", "Z")


def build_event_record(event: str, *, source: str = "button", extras: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "event": event,
        "timestamp": current_timestamp(),
        "source": source,
    }
    if extras:
        record.update(extras)
    return record


def _format_number(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return text if text else "0"
    return str(value)


def format_event_message(record: Dict[str, Any]) -> str:
    event = record.get("event", "event")
    if event == "plot":
        return f"plot: {record.get('points', 0)} points"
    if event == "load_sample":
        return f"load_sample: {record.get('points', 0)} points (seed {record.get('seed')})"
    if event == "start":
        return f"start: {record.get('frames', 0)} frames"
    if event == "pause_or_resume":
        return f"pause_or_resume: now {record.get('state', '?')} at frame {record.get('position', 0)}"
    if event == "view_mode":
        return f"view_mode: {record.get('mode', '?')}"
    if event == "speed":
        return f"speed: {_format_number(record.get('delay_ms'))} ms/frame"
    if event == "reset":
        return "reset: animation rewound"
    return str(event)


def append_preview_log(entries: Any, message: str, capacity: int = config.ACTIVITY_LOG_CAPACITY) -> List[str]:
    kept = list(entries) if isinstance(entries, list) else []
    kept.append(message)
    return kept[-capacity:]

"""Display helpers shared by the console summary and the HTTP API."""

from __future__ import annotations

import math

from .models import ERASING, PAUSED, WRITING

_ACTIVITY_LABELS: dict[str, str] = {
    WRITING: "Writing",
    ERASING: "Erasing",
    PAUSED: "Thinking",
}


def format_time(seconds: float) -> str:
    """Render seconds as ``M:SS``, dropping any fractional part."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_time_verbose(seconds: float) -> str:
    """Render seconds as e.g. ``2 minutes 35 seconds``."""
    minutes, secs = divmod(int(seconds), 60)
    if minutes == 0:
        return _plural(secs, "second")
    if secs == 0:
        return _plural(minutes, "minute")
    return f"{_plural(minutes, 'minute')} {_plural(secs, 'second')}"


def format_percentage(part: float, total: float) -> str:
    if total == 0:
        return "0%"
    # Halves round up.
    return f"{math.floor(part / total * 100 + 0.5)}%"


def activity_label(segment_type: str) -> str:
    return _ACTIVITY_LABELS.get(segment_type, segment_type)


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"

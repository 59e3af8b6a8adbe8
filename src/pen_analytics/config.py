"""Configuration models and helpers for timeline building."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(slots=True)
class TimelineSettings:
    """Thresholds applied when raw activity records become segments."""

    rework_threshold: timedelta = timedelta(seconds=3)
    merge_window: timedelta = timedelta(seconds=1)

    @classmethod
    def from_seconds(
        cls,
        rework_seconds: float | None = None,
        merge_seconds: float | None = None,
    ) -> "TimelineSettings":
        defaults = cls()
        rework = (
            timedelta(seconds=rework_seconds)
            if rework_seconds is not None
            else defaults.rework_threshold
        )
        merge = (
            timedelta(seconds=merge_seconds)
            if merge_seconds is not None
            else defaults.merge_window
        )
        return cls(rework_threshold=rework, merge_window=merge)

"""Simple reporting utilities for CLI and API output."""

from __future__ import annotations

from typing import Any

from .formatting import activity_label, format_percentage, format_time
from .models import ERASING, PAUSED, WRITING, ProblemSolvingAnalytics


class SummaryPrinter:
    """Render human-readable analytics summaries in the console."""

    def print_summary(self, analytics: ProblemSolvingAnalytics) -> None:
        if analytics.total_time == 0 and analytics.rework_count == 0:
            print("No activity recorded for this session.")
            return

        print(f"Total time: {format_time(analytics.total_time)}")
        print("-" * 40)
        for row in build_breakdown(analytics):
            print(f"  {row['label']:<16} {row['formatted']:>8} {row['percentage']:>6}")
        print()
        print(f"Longest pause:   {format_time(analytics.max_pause_time)}")
        print(f"Rework attempts: {analytics.rework_count}")


def build_breakdown(analytics: ProblemSolvingAnalytics) -> list[dict[str, Any]]:
    """Return per-activity rows with their share of the total time."""
    entries = [
        ("first_reaction", "First reaction", analytics.first_reaction_time),
        (WRITING, activity_label(WRITING), analytics.writing_time),
        (PAUSED, activity_label(PAUSED), analytics.thinking_time),
        (ERASING, activity_label(ERASING), analytics.erasing_time),
    ]
    return [
        {
            "key": key,
            "label": label,
            "seconds": seconds,
            "formatted": format_time(seconds),
            "percentage": format_percentage(seconds, analytics.total_time),
        }
        for key, label, seconds in entries
    ]

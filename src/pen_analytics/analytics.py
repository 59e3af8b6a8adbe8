"""Reduce an ordered list of pen activity segments to a behavioral summary."""

from __future__ import annotations

from typing import Optional, Sequence

from .models import ERASING, PAUSED, WRITING, ActivitySegment, ProblemSolvingAnalytics


def calculate_problem_solving_analytics(
    segments: Sequence[ActivitySegment],
    first_reaction_time: Optional[float] = None,
) -> ProblemSolvingAnalytics:
    """Compute time-on-task, hesitation and rework statistics for one session.

    A leading ``paused`` segment is the latency before the first pen-down and
    is reported as the first reaction. It never counts as thinking time or
    towards the longest pause. When the session does not open with a pause,
    ``first_reaction_time`` (measured by the caller) is used instead.

    Segments of an unknown type contribute to none of the fields.
    """
    if segments and segments[0].type == PAUSED:
        first_reaction = segments[0].seconds
    else:
        first_reaction = max(float(first_reaction_time or 0), 0.0)

    writing_time = sum((s.seconds for s in segments if s.type == WRITING), 0.0)
    erasing_time = sum((s.seconds for s in segments if s.type == ERASING), 0.0)

    # Index 0 is excluded by position alone, whatever its type.
    pauses = [s.seconds for s in segments[1:] if s.type == PAUSED]
    thinking_time = sum(pauses, 0.0)
    max_pause_time = max(pauses, default=0.0)

    rework_count = sum(1 for s in segments if s.is_rework)

    return ProblemSolvingAnalytics(
        writing_time=writing_time,
        thinking_time=thinking_time,
        erasing_time=erasing_time,
        first_reaction_time=first_reaction,
        max_pause_time=max_pause_time,
        rework_count=rework_count,
        total_time=writing_time + thinking_time + erasing_time + first_reaction,
    )

"""Build activity segments from raw timestamped recorder records."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from .config import TimelineSettings
from .models import ERASING, ActivitySegment, SegmentMetadata

logger = logging.getLogger(__name__)


def build_segments(
    records: Sequence[ActivitySegment],
    settings: Optional[TimelineSettings] = None,
    *,
    session_end: Optional[int] = None,
) -> list[ActivitySegment]:
    """Turn chronological records (epoch milliseconds) into timed segments.

    A record without ``end_time`` ends where the next record starts, or at
    ``session_end`` when it is the last one. Erasing segments lasting at least
    the rework threshold are flagged as rework.

    Records shorter than the merge window extend the previous segment when
    both share a type. The extended segment keeps its own metadata: the merged
    record's metadata (``strokes_erased``, ``is_rework``) is discarded, and
    the rework threshold is not checked again against the longer duration.
    """
    settings = settings or TimelineSettings()
    merge_ms = settings.merge_window.total_seconds() * 1000
    segments: list[ActivitySegment] = []

    for index, record in enumerate(records):
        if record.start_time is None:
            raise ValueError(f"record {index} is missing startTime")
        end = _resolve_end(records, index, session_end)
        if end is not None and end < record.start_time:
            raise ValueError(
                f"record {index} ends before it starts ({end} < {record.start_time})"
            )

        previous = segments[-1] if segments else None
        if (
            previous is not None
            and end is not None
            and previous.type == record.type
            and end - record.start_time < merge_ms
        ):
            previous.end_time = end
            previous.duration = _whole_seconds(previous.start_time, end)
            logger.debug(
                "Merged short %s record into previous segment (now %ss).",
                record.type,
                previous.duration,
            )
            continue

        segment = ActivitySegment(
            type=record.type,
            start_time=record.start_time,
            end_time=end,
            duration=_whole_seconds(record.start_time, end) if end is not None else None,
            metadata=replace(record.metadata) if record.metadata else None,
        )
        _flag_rework(segment, settings)
        segments.append(segment)

    return segments


def _resolve_end(
    records: Sequence[ActivitySegment], index: int, session_end: Optional[int]
) -> Optional[int]:
    record = records[index]
    if record.end_time is not None:
        return record.end_time
    if index + 1 < len(records):
        return records[index + 1].start_time
    return session_end


def _whole_seconds(start_ms: Optional[int], end_ms: int) -> int:
    return int((end_ms - (start_ms or 0)) // 1000)


def _flag_rework(segment: ActivitySegment, settings: TimelineSettings) -> None:
    if segment.type != ERASING or segment.duration is None:
        return
    if segment.duration < settings.rework_threshold.total_seconds():
        return
    if segment.metadata is None:
        segment.metadata = SegmentMetadata()
    if segment.metadata.is_rework is not True:
        logger.debug("Flagged %ss erasing segment as rework.", segment.duration)
    segment.metadata.is_rework = True

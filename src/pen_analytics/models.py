"""Domain models for recorded pen activity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

WRITING = "writing"
ERASING = "erasing"
PAUSED = "paused"

SEGMENT_TYPES = (WRITING, ERASING, PAUSED)


@dataclass(slots=True)
class SegmentMetadata:
    is_rework: Optional[bool] = None
    strokes_erased: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SegmentMetadata":
        return cls(
            is_rework=data.get("isRework"),
            strokes_erased=data.get("strokesErased"),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.is_rework is not None:
            payload["isRework"] = self.is_rework
        if self.strokes_erased is not None:
            payload["strokesErased"] = self.strokes_erased
        return payload


@dataclass(slots=True)
class ActivitySegment:
    """A contiguous interval of a single pen behavior."""

    type: str
    duration: Optional[float] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    metadata: Optional[SegmentMetadata] = None

    @property
    def seconds(self) -> float:
        """Duration in seconds; absent or negative durations count as zero."""
        if not self.duration or self.duration < 0:
            return 0.0
        return float(self.duration)

    @property
    def is_rework(self) -> bool:
        return (
            self.type == ERASING
            and self.metadata is not None
            and self.metadata.is_rework is True
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ActivitySegment":
        if "type" not in data:
            raise ValueError("segment is missing 'type'")
        metadata = data.get("metadata")
        return cls(
            type=data["type"],
            duration=data.get("duration"),
            start_time=data.get("startTime"),
            end_time=data.get("endTime"),
            metadata=SegmentMetadata.from_dict(metadata) if metadata else None,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.type}
        if self.start_time is not None:
            payload["startTime"] = self.start_time
        if self.end_time is not None:
            payload["endTime"] = self.end_time
        if self.duration is not None:
            payload["duration"] = self.duration
        if self.metadata is not None:
            payload["metadata"] = self.metadata.to_dict()
        return payload


@dataclass(slots=True, frozen=True)
class ProblemSolvingAnalytics:
    """Behavioral summary of one problem-solving session, in seconds."""

    writing_time: float = 0.0
    thinking_time: float = 0.0
    erasing_time: float = 0.0
    first_reaction_time: float = 0.0
    max_pause_time: float = 0.0
    rework_count: int = 0
    total_time: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "writingTime": self.writing_time,
            "thinkingTime": self.thinking_time,
            "erasingTime": self.erasing_time,
            "firstReactionTime": self.first_reaction_time,
            "maxPauseTime": self.max_pause_time,
            "reworkCount": self.rework_count,
            "totalTime": self.total_time,
        }

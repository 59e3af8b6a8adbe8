"""Request payloads shared by the HTTP API and the CLI file loader."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import ActivitySegment


class SegmentMetadataPayload(BaseModel):
    is_rework: Optional[bool] = Field(default=None, alias="isRework")
    strokes_erased: Optional[int] = Field(default=None, alias="strokesErased", ge=0)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class SegmentPayload(BaseModel):
    type: str
    duration: Optional[float] = None
    start_time: Optional[int] = Field(default=None, alias="startTime")
    end_time: Optional[int] = Field(default=None, alias="endTime")
    metadata: Optional[SegmentMetadataPayload] = None

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_segment(self) -> ActivitySegment:
        return ActivitySegment.from_dict(self.model_dump(by_alias=True, exclude_none=True))


class AnalyticsRequest(BaseModel):
    segments: List[SegmentPayload] = Field(default_factory=list)
    first_reaction_time: Optional[float] = Field(
        default=None, alias="firstReactionTime", ge=0
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class TimelineRequest(BaseModel):
    records: List[SegmentPayload] = Field(default_factory=list)
    session_end: Optional[int] = Field(default=None, alias="sessionEnd")
    first_reaction_time: Optional[float] = Field(
        default=None, alias="firstReactionTime", ge=0
    )

    model_config = ConfigDict(extra="forbid", populate_by_name=True)



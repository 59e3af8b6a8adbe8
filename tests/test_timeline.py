from datetime import timedelta

import pytest

from pen_analytics.config import TimelineSettings
from pen_analytics.models import ActivitySegment, SegmentMetadata
from pen_analytics.timeline import build_segments


def rec(kind, start, end=None, metadata=None):
    return ActivitySegment(type=kind, start_time=start, end_time=end, metadata=metadata)


def test_durations_are_whole_seconds():
    segments = build_segments([rec("paused", 0, 4_900), rec("writing", 4_900, 10_000)])
    assert [s.duration for s in segments] == [4, 5]
    assert [s.type for s in segments] == ["paused", "writing"]


def test_open_record_ends_at_next_start_or_session_end():
    segments = build_segments(
        [rec("writing", 1_000), rec("paused", 3_000)], session_end=8_500
    )
    assert segments[0].end_time == 3_000
    assert segments[0].duration == 2
    assert segments[1].end_time == 8_500
    assert segments[1].duration == 5


def test_last_open_record_without_session_end_has_no_duration():
    segments = build_segments([rec("writing", 0, 2_000), rec("paused", 2_000)])
    assert segments[1].duration is None
    assert segments[1].end_time is None


def test_short_record_merges_into_previous_of_same_type():
    segments = build_segments(
        [rec("writing", 0, 2_000), rec("writing", 2_100, 2_600), rec("paused", 2_600, 5_000)]
    )
    assert len(segments) == 2
    assert segments[0].end_time == 2_600
    assert segments[0].duration == 2


def test_short_record_of_different_type_is_kept():
    segments = build_segments([rec("writing", 0, 2_000), rec("erasing", 2_000, 2_400)])
    assert [s.type for s in segments] == ["writing", "erasing"]
    assert segments[1].duration == 0


def test_long_erasing_is_flagged_as_rework():
    segments = build_segments([rec("erasing", 0, 3_000), rec("erasing", 10_000, 12_999)])
    assert segments[0].is_rework
    assert not segments[1].is_rework
    assert segments[1].metadata is None


def test_merge_does_not_recheck_rework_threshold():
    segments = build_segments([rec("erasing", 0, 2_500), rec("erasing", 2_500, 3_200)])
    assert len(segments) == 1
    assert segments[0].duration == 3
    assert not segments[0].is_rework
    assert segments[0].metadata is None


def test_merged_record_metadata_is_discarded():
    segments = build_segments(
        [
            rec("erasing", 0, 1_500, SegmentMetadata(strokes_erased=2)),
            rec("erasing", 1_500, 1_900, SegmentMetadata(is_rework=True, strokes_erased=5)),
        ]
    )
    assert len(segments) == 1
    assert segments[0].metadata == SegmentMetadata(strokes_erased=2)
    assert not segments[0].is_rework


def test_upstream_rework_flag_is_kept_and_input_untouched():
    metadata = SegmentMetadata(is_rework=True, strokes_erased=4)
    records = [rec("erasing", 0, 1_000, metadata)]
    segments = build_segments(records)
    assert segments[0].is_rework
    assert segments[0].metadata.strokes_erased == 4
    assert segments[0].metadata is not metadata
    assert records[0].duration is None


def test_custom_thresholds():
    settings = TimelineSettings.from_seconds(rework_seconds=10, merge_seconds=0)
    segments = build_segments(
        [rec("erasing", 0, 5_000), rec("erasing", 5_000, 5_500)], settings
    )
    assert len(segments) == 2
    assert not any(s.is_rework for s in segments)


def test_settings_defaults():
    settings = TimelineSettings.from_seconds()
    assert settings.rework_threshold == timedelta(seconds=3)
    assert settings.merge_window == timedelta(seconds=1)


def test_reversed_record_is_rejected():
    with pytest.raises(ValueError, match="ends before it starts"):
        build_segments([rec("writing", 5_000, 1_000)])


def test_missing_start_is_rejected():
    with pytest.raises(ValueError, match="missing startTime"):
        build_segments([rec("writing", None, 1_000)])


def test_empty_records():
    assert build_segments([]) == []

import pytest

from pen_analytics.formatting import (
    activity_label,
    format_percentage,
    format_time,
    format_time_verbose,
)


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0:00"), (5, "0:05"), (60, "1:00"), (155, "2:35"), (155.9, "2:35"), (3600, "60:00")],
)
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0 seconds"),
        (1, "1 second"),
        (45, "45 seconds"),
        (60, "1 minute"),
        (120, "2 minutes"),
        (155, "2 minutes 35 seconds"),
        (61.7, "1 minute 1 second"),
    ],
)
def test_format_time_verbose(seconds, expected):
    assert format_time_verbose(seconds) == expected


@pytest.mark.parametrize(
    ("part", "total", "expected"),
    [(0, 0, "0%"), (5, 0, "0%"), (1, 3, "33%"), (2, 3, "67%"), (1, 8, "13%"), (40, 40, "100%")],
)
def test_format_percentage(part, total, expected):
    assert format_percentage(part, total) == expected


def test_activity_label():
    assert activity_label("writing") == "Writing"
    assert activity_label("erasing") == "Erasing"
    assert activity_label("paused") == "Thinking"
    assert activity_label("hovering") == "hovering"

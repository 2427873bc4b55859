"""Unit tests for display formatting."""

from datetime import date, datetime, timezone

import pytest

from dami.application.formatting import format_date, format_datetime, format_views


@pytest.mark.parametrize(
    "views,expected",
    [
        (0, "0"),
        (999, "999"),
        (1000, "1.0K"),
        (1234, "1.2K"),
        (999_999, "1000.0K"),
        (1_000_000, "1.0M"),
        (3_450_000, "3.5M"),
    ],
)
def test_format_views(views, expected):
    assert format_views(views) == expected


def test_format_date():
    assert format_date(date(2024, 1, 2)) == "Jan 2, 2024"
    assert format_date(date(2023, 12, 25)) == "Dec 25, 2023"


def test_format_datetime():
    value = datetime(2024, 1, 2, 15, 4, tzinfo=timezone.utc)
    assert format_datetime(value) == "Jan 2, 2024, 03:04 PM"


def test_format_datetime_morning():
    value = datetime(2024, 7, 9, 0, 30, tzinfo=timezone.utc)
    assert format_datetime(value) == "Jul 9, 2024, 12:30 AM"

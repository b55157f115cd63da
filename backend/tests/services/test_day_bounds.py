"""Tests for local day windows."""

from datetime import UTC, date, datetime

from slotboard.services.booking_data_service import day_bounds


def test_day_bounds_follow_local_midnight() -> None:
    start, end = day_bounds(date(2025, 11, 11), "America/New_York")

    assert start == datetime(2025, 11, 11, 5, tzinfo=UTC)
    assert end == datetime(2025, 11, 12, 5, tzinfo=UTC)


def test_day_bounds_across_dst_change() -> None:
    start, end = day_bounds(date(2025, 11, 2), "America/New_York")

    assert start == datetime(2025, 11, 2, 4, tzinfo=UTC)
    assert end == datetime(2025, 11, 3, 5, tzinfo=UTC)


def test_day_bounds_unknown_zone_uses_utc() -> None:
    start, end = day_bounds(date(2025, 11, 11), "Mars/Olympus")

    assert start == datetime(2025, 11, 11, tzinfo=UTC)
    assert end == datetime(2025, 11, 12, tzinfo=UTC)

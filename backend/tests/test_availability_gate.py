"""Tests for deriving closed calendar days from weekly schedules."""

from __future__ import annotations

from datetime import date

import pytest

from slotboard.schemas.schedule import WeeklyScheduleRuleRead
from slotboard.services.availability_gate import (
    disabled_calendar_days,
    is_date_disabled,
    to_calendar_day,
)


def _rule(day_of_week: int, is_open: bool = True) -> WeeklyScheduleRuleRead:
    return WeeklyScheduleRuleRead(day_of_week=day_of_week, is_open=is_open)


@pytest.mark.parametrize(
    ("day_of_week", "calendar_day"),
    [(1, 1), (6, 6), (7, 0)],
)
def test_weekday_conversion(day_of_week: int, calendar_day: int) -> None:
    assert to_calendar_day(day_of_week) == calendar_day


def test_sunday_only_schedule_disables_other_days() -> None:
    assert disabled_calendar_days([_rule(7)]) == {1, 2, 3, 4, 5, 6}


def test_no_rules_disables_nothing() -> None:
    assert disabled_calendar_days([]) == frozenset()


def test_full_week_open_disables_nothing() -> None:
    assert disabled_calendar_days([_rule(day) for day in range(1, 8)]) == frozenset()


def test_closed_rule_disables_its_day() -> None:
    rules = [_rule(day, is_open=day != 1) for day in range(1, 8)]

    assert disabled_calendar_days(rules) == {1}


def test_any_open_rule_opens_the_day() -> None:
    rules = [_rule(day) for day in range(1, 8)] + [_rule(3, is_open=False)]

    assert 3 not in disabled_calendar_days(rules)


def test_is_date_disabled_uses_calendar_convention() -> None:
    sunday = date(2025, 11, 16)
    monday = date(2025, 11, 17)

    assert is_date_disabled(monday, {1}) is True
    assert is_date_disabled(sunday, {1}) is False
    assert is_date_disabled(sunday, {0}) is True


def test_unknown_schedule_disables_nothing() -> None:
    assert is_date_disabled(date(2025, 11, 17), None) is False

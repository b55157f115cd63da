"""Derive closed calendar days from a weekly schedule.

Schedules number weekdays 1=Monday .. 7=Sunday; the calendar numbers them
0=Sunday .. 6=Saturday. ``day_of_week % 7`` maps one onto the other.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from slotboard.schemas.schedule import WeeklyScheduleRuleRead

CALENDAR_DAYS: frozenset[int] = frozenset(range(7))


def to_calendar_day(day_of_week: int) -> int:
    """Convert a 1..7 (Mon..Sun) weekday to the 0..6 (Sun..Sat) convention."""
    return day_of_week % 7


def disabled_calendar_days(rules: Iterable[WeeklyScheduleRuleRead]) -> frozenset[int]:
    """Return the calendar days that must not be selectable.

    A day is open when at least one rule for it is open; every other day is
    disabled. A resource without any rules is unrestricted, so an empty
    schedule disables nothing.
    """
    rules = list(rules)
    if not rules:
        return frozenset()
    open_days = {to_calendar_day(rule.day_of_week) for rule in rules if rule.is_open}
    return CALENDAR_DAYS - open_days


def is_date_disabled(day: date, disabled_days: Iterable[int] | None) -> bool:
    """Return True when ``day`` falls on a disabled calendar weekday.

    ``None`` means the schedule is unknown and nothing is disabled.
    """
    if disabled_days is None:
        return False
    return to_calendar_day(day.isoweekday()) in set(disabled_days)


__all__ = [
    "CALENDAR_DAYS",
    "disabled_calendar_days",
    "is_date_disabled",
    "to_calendar_day",
]

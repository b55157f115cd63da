"""Schemas for weekly resource schedules."""

from __future__ import annotations

from datetime import time

from pydantic import BaseModel, ConfigDict, Field


class WeeklyScheduleRuleRead(BaseModel):
    """One weekday of a resource's recurring schedule (1=Monday .. 7=Sunday)."""

    day_of_week: int = Field(ge=1, le=7)
    is_open: bool
    open_time: time | None = None
    close_time: time | None = None

    model_config = ConfigDict(from_attributes=True)


class WeeklyScheduleRead(BaseModel):
    """Schedule rules plus the calendar days (0=Sunday .. 6=Saturday) they close."""

    rules: list[WeeklyScheduleRuleRead]
    disabled_days: list[int]

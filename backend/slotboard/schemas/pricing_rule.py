"""Schemas for dynamic pricing rules."""

from __future__ import annotations

import uuid
from datetime import datetime, time
from decimal import Decimal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

DAY_NAMES: dict[int, str] = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}


class PricingRuleCreate(BaseModel):
    """Payload for a new pricing rule; every field is required."""

    rule_name: str = Field(min_length=1, max_length=255)
    price_override: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    day_of_week: list[int] = Field(min_length=1)
    start_time: time
    end_time: time

    @field_validator("rule_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("Rule name is required")
        return stripped

    @field_validator("day_of_week")
    @classmethod
    def _normalize_days(cls, value: list[int]) -> list[int]:
        if any(day not in DAY_NAMES for day in value):
            raise ValueError("Days must be between 1 (Monday) and 7 (Sunday)")
        return sorted(set(value))

    @model_validator(mode="after")
    def _check_window(self) -> "PricingRuleCreate":
        if self.start_time >= self.end_time:
            raise ValueError("start_time must be before end_time")
        return self


class PricingRuleRead(BaseModel):
    id: uuid.UUID
    resource_id: uuid.UUID
    rule_name: str
    price_override: Decimal
    day_of_week: list[int]
    start_time: time
    end_time: time
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def day_names(self) -> list[str]:
        return [DAY_NAMES[day] for day in sorted(self.day_of_week) if day in DAY_NAMES]

"""Slot schemas."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SlotRead(BaseModel):
    """A bookable interval for one resource.

    ``price`` reads from the ``slot_price`` column; timestamps without an
    offset are stored in UTC and are returned as UTC-aware values.
    """

    id: uuid.UUID
    resource_id: uuid.UUID
    start_time: datetime
    end_time: datetime
    price: Decimal | None = Field(
        default=None, validation_alias=AliasChoices("price", "slot_price")
    )
    is_booked: bool = False

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @field_validator("start_time", "end_time")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

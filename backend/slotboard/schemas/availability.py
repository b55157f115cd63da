"""Schemas for the rendered availability view and slot selections."""

from __future__ import annotations

import enum
import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from slotboard.schemas.resource import ResourceSummary


class CellState(str, enum.Enum):
    """How one resource column renders for one time row."""

    UNAVAILABLE = "unavailable"
    AVAILABLE = "available"
    SELECTED = "selected"
    BOOKED = "booked"


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    DATA_ACCESS = "data_access"


class CellRead(BaseModel):
    resource_id: uuid.UUID
    state: CellState
    slot_id: uuid.UUID | None = None

    model_config = ConfigDict(from_attributes=True)


class SlotMatrixRowRead(BaseModel):
    """One time row of the grid with a cell per resource column."""

    start_time: datetime
    end_time: datetime
    price: Decimal | None
    cells: list[CellRead]

    model_config = ConfigDict(from_attributes=True)


class AvailabilityViewRead(BaseModel):
    """Everything the availability page renders."""

    business_id: uuid.UUID | None
    resources: list[ResourceSummary]
    selected_resource_id: uuid.UUID | None
    selected_date: date
    selected_date_disabled: bool
    disabled_days: list[int] | None
    rows: list[SlotMatrixRowRead]
    no_slots: bool
    selected_slot_ids: list[uuid.UUID]
    total: Decimal
    loading_resources: bool
    loading_slots: bool
    error: str | None
    error_kind: ErrorKind | None

    model_config = ConfigDict(from_attributes=True)


class SelectionRequest(BaseModel):
    """Slots a customer wants to book for one resource page and date."""

    resource_id: uuid.UUID
    day: date = Field(alias="date")
    slot_ids: list[uuid.UUID] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class SelectionRead(BaseModel):
    selected_slot_ids: list[uuid.UUID]
    rejected_slot_ids: list[uuid.UUID]
    total: Decimal

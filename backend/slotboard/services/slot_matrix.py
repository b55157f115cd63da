"""Merge per-resource slots into one time-indexed grid."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from slotboard.schemas.slot import SlotRead

SlotKey = tuple[datetime, datetime]


@dataclass(slots=True)
class SlotMatrixRow:
    """All resources' slots sharing one exact (start, end) window.

    A resource missing from ``slots_by_resource`` offers no slot for the
    window; that is different from offering an unbooked one.
    """

    start_time: datetime
    end_time: datetime
    price: Decimal | None = None
    slots_by_resource: dict[uuid.UUID, SlotRead] = field(default_factory=dict)

    @property
    def key(self) -> SlotKey:
        return (self.start_time, self.end_time)

    def slot_for(self, resource_id: uuid.UUID) -> SlotRead | None:
        return self.slots_by_resource.get(resource_id)


def build_slot_matrix(slots: Iterable[SlotRead]) -> list[SlotMatrixRow]:
    """Group slots by exact (start_time, end_time) and order rows by start.

    Callers pass the slots of a single day. Endpoints must match exactly to
    share a row; overlapping windows are never merged. When the same
    resource appears twice for one window the later slot wins. The row price
    is the first non-null price seen for the window; differing prices from
    other resources are not reconciled.
    """
    rows: dict[SlotKey, SlotMatrixRow] = {}
    for slot in slots:
        key = (slot.start_time, slot.end_time)
        row = rows.get(key)
        if row is None:
            row = SlotMatrixRow(start_time=slot.start_time, end_time=slot.end_time)
            rows[key] = row
        row.slots_by_resource[slot.resource_id] = slot
        if row.price is None:
            row.price = slot.price
    return sorted(rows.values(), key=lambda row: row.start_time)


__all__ = ["SlotKey", "SlotMatrixRow", "build_slot_matrix"]

"""Slot selection state and running totals."""

from __future__ import annotations

import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import AbstractSet, Iterable

from slotboard.schemas.slot import SlotRead

MONEY_PLACES = Decimal("0.01")

Selection = frozenset[uuid.UUID]

EMPTY_SELECTION: Selection = frozenset()


def _to_money(value: Decimal) -> Decimal:
    return value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)


def toggle_slot(selection: AbstractSet[uuid.UUID], slot: SlotRead) -> Selection:
    """Return ``selection`` with ``slot`` flipped in or out.

    Booked slots never enter a selection, so toggling one changes nothing.
    """
    current = frozenset(selection)
    if slot.is_booked:
        return current
    if slot.id in current:
        return current - {slot.id}
    return current | {slot.id}


def selection_total(
    slots: Iterable[SlotRead], selection: AbstractSet[uuid.UUID]
) -> Decimal:
    """Sum the prices of the selected slots; a missing price counts as zero."""
    total = sum(
        (slot.price or Decimal("0") for slot in slots if slot.id in selection),
        Decimal("0"),
    )
    return _to_money(total)


class SlotSelection:
    """Mutable holder for the selected slot ids of one page.

    The total is always derived from the slots passed in, so it cannot drift
    from the ids held here.
    """

    def __init__(self) -> None:
        self._selected: Selection = EMPTY_SELECTION

    @property
    def selected_ids(self) -> Selection:
        return self._selected

    def __contains__(self, slot_id: object) -> bool:
        return slot_id in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def toggle(self, slot: SlotRead) -> bool:
        """Flip ``slot`` and report whether the selection changed."""
        updated = toggle_slot(self._selected, slot)
        changed = updated != self._selected
        self._selected = updated
        return changed

    def clear(self) -> None:
        self._selected = EMPTY_SELECTION

    def total(self, slots: Iterable[SlotRead]) -> Decimal:
        return selection_total(slots, self._selected)


__all__ = [
    "EMPTY_SELECTION",
    "MONEY_PLACES",
    "Selection",
    "SlotSelection",
    "selection_total",
    "toggle_slot",
]

"""Page-level orchestration of the availability view.

One controller instance owns the state of one availability page: the
resource list, the active resource and date, the loaded slots and schedule,
and the slot selection. Loads follow a fixed order: the initial resource
resolves the business and its sibling resources first; afterwards the
business's slots for the date and the active resource's weekly schedule load
concurrently, each in its own session.

Each load kind carries a generation counter. A load that finishes after a
newer load of the same kind has started is discarded, so a slow response for
an old date can never overwrite the slots of the current one.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from slotboard.core.config import get_settings
from slotboard.core.errors import (
    BookingError,
    DataAccessError,
    ResourceNotFoundError,
    SlotNotFoundError,
)
from slotboard.schemas.availability import CellState, ErrorKind
from slotboard.schemas.resource import ResourceSummary
from slotboard.schemas.schedule import WeeklyScheduleRuleRead
from slotboard.schemas.slot import SlotRead
from slotboard.services import booking_data_service
from slotboard.services.availability_gate import (
    disabled_calendar_days,
    is_date_disabled,
)
from slotboard.services.slot_matrix import SlotMatrixRow, build_slot_matrix
from slotboard.services.slot_selection import Selection, SlotSelection

logger = logging.getLogger(__name__)

MSG_RESOURCES_FAILED = "Failed to load resources"
MSG_SLOTS_FAILED = "Failed to load slots"


@dataclass(slots=True, frozen=True)
class CellView:
    resource_id: uuid.UUID
    state: CellState
    slot_id: uuid.UUID | None = None


@dataclass(slots=True, frozen=True)
class RowView:
    start_time: datetime
    end_time: datetime
    price: Decimal | None
    cells: tuple[CellView, ...]


@dataclass(slots=True, frozen=True)
class AvailabilityView:
    """Immutable snapshot of everything the page renders."""

    business_id: uuid.UUID | None
    resources: tuple[ResourceSummary, ...]
    selected_resource_id: uuid.UUID | None
    selected_date: date
    selected_date_disabled: bool
    disabled_days: tuple[int, ...] | None
    rows: tuple[RowView, ...]
    no_slots: bool
    selected_slot_ids: tuple[uuid.UUID, ...]
    total: Decimal
    loading_resources: bool
    loading_slots: bool
    error: str | None
    error_kind: ErrorKind | None


class AvailabilityController:
    """Load availability data and track the user's slot selection."""

    def __init__(
        self,
        sessionmaker: async_sessionmaker[AsyncSession],
        *,
        initial_resource_id: uuid.UUID | None = None,
        initial_date: date | None = None,
        timezone: str | None = None,
    ) -> None:
        self._sessionmaker = sessionmaker
        self._initial_resource_id = initial_resource_id
        self.timezone = timezone or get_settings().default_timezone
        self.selected_resource_id: uuid.UUID | None = initial_resource_id
        self.selected_date: date = initial_date or datetime.now(
            booking_data_service.resolve_zone(self.timezone)
        ).date()

        self.business_id: uuid.UUID | None = None
        self.resources: list[ResourceSummary] = []
        self.slots: list[SlotRead] = []
        self.schedule: list[WeeklyScheduleRuleRead] = []
        self.disabled_days: frozenset[int] | None = None
        self.loading_resources = False
        self.loading_slots = False
        self.error: str | None = None
        self.error_kind: ErrorKind | None = None

        self._selection = SlotSelection()
        self._generations = {"resources": 0, "slots": 0, "schedule": 0}

    # -- lifecycle -------------------------------------------------------

    async def initialize(self) -> AvailabilityView:
        """Run the initial load sequence for the configured resource and date."""
        self._selection.clear()
        if self._initial_resource_id is None:
            return self.snapshot()
        if await self._load_resources(self._initial_resource_id):
            await self._load_slots_and_schedule()
        return self.snapshot()

    async def select_resource(self, resource_id: uuid.UUID) -> AvailabilityView:
        """Switch the active resource; the selection always resets."""
        if resource_id == self.selected_resource_id:
            return self.snapshot()
        previous = self.selected_resource_id
        self.selected_resource_id = resource_id
        self._selection.clear()

        if any(resource.id == resource_id for resource in self.resources):
            await self._load_schedule()
            return self.snapshot()

        # Resource of another business: its siblings and slots differ too.
        if await self._load_resources(resource_id):
            await self._load_slots_and_schedule()
        else:
            self.selected_resource_id = previous
        return self.snapshot()

    async def select_date(self, day: date) -> AvailabilityView:
        """Switch the active date; the selection always resets."""
        if day == self.selected_date:
            return self.snapshot()
        self.selected_date = day
        self._selection.clear()
        await self._load_slots()
        return self.snapshot()

    # -- selection -------------------------------------------------------

    def toggle(self, slot_id: uuid.UUID) -> bool:
        """Toggle a loaded slot in or out of the selection.

        Returns whether the selection changed; booked slots never change it.

        Raises:
            SlotNotFoundError: If the id is not among the loaded slots.
        """
        slot = self._slot_index().get(slot_id)
        if slot is None:
            raise SlotNotFoundError(slot_id)
        return self._selection.toggle(slot)

    def select_slots(self, slot_ids: Iterable[uuid.UUID]) -> list[uuid.UUID]:
        """Add each id to the selection and return the ids that were refused.

        Unknown and booked slots are refused; repeated ids count once.
        """
        index = self._slot_index()
        rejected: list[uuid.UUID] = []
        for slot_id in dict.fromkeys(slot_ids):
            slot = index.get(slot_id)
            if slot is None or slot.is_booked:
                rejected.append(slot_id)
                continue
            if slot_id not in self._selection:
                self._selection.toggle(slot)
        return rejected

    @property
    def selected_slot_ids(self) -> Selection:
        return self._selection.selected_ids

    @property
    def total(self) -> Decimal:
        return self._selection.total(self.slots)

    @property
    def matrix(self) -> list[SlotMatrixRow]:
        return build_slot_matrix(self.slots)

    def snapshot(self) -> AvailabilityView:
        """Render the current state."""
        selected = self._selection.selected_ids
        rows = tuple(self._render_row(row, selected) for row in self.matrix)
        return AvailabilityView(
            business_id=self.business_id,
            resources=tuple(self.resources),
            selected_resource_id=self.selected_resource_id,
            selected_date=self.selected_date,
            selected_date_disabled=is_date_disabled(
                self.selected_date, self.disabled_days
            ),
            disabled_days=(
                tuple(sorted(self.disabled_days))
                if self.disabled_days is not None
                else None
            ),
            rows=rows,
            no_slots=not self.loading_slots and not self.slots,
            selected_slot_ids=tuple(
                slot.id for slot in self.slots if slot.id in selected
            ),
            total=self.total,
            loading_resources=self.loading_resources,
            loading_slots=self.loading_slots,
            error=self.error,
            error_kind=self.error_kind,
        )

    # -- loads -----------------------------------------------------------

    def _begin(self, load: str) -> int:
        self._generations[load] += 1
        return self._generations[load]

    def _is_current(self, load: str, generation: int) -> bool:
        if self._generations[load] == generation:
            return True
        logger.debug("Discarding stale %s load (generation %s)", load, generation)
        return False

    def _set_error(self, message: str | None, kind: ErrorKind | None) -> None:
        self.error = message
        self.error_kind = kind

    async def _load_resources(self, resource_id: uuid.UUID) -> bool:
        generation = self._begin("resources")
        self.loading_resources = True
        self._set_error(None, None)
        try:
            async with self._sessionmaker() as session:
                resource = await booking_data_service.get_resource(
                    session, resource_id=resource_id
                )
                business = await booking_data_service.get_business(
                    session, business_id=resource.business_id
                )
                siblings = await booking_data_service.fetch_resources(
                    session, business_id=resource.business_id
                )
        except ResourceNotFoundError as exc:
            if self._is_current("resources", generation):
                self.loading_resources = False
                self._set_error(exc.message, ErrorKind.NOT_FOUND)
            return False
        except DataAccessError:
            if self._is_current("resources", generation):
                self.loading_resources = False
                self._set_error(MSG_RESOURCES_FAILED, ErrorKind.DATA_ACCESS)
            return False

        if not self._is_current("resources", generation):
            return False
        self.loading_resources = False
        self.business_id = resource.business_id
        if business is not None:
            self.timezone = business.timezone
        self.resources = siblings
        if self.selected_resource_id is None:
            self.selected_resource_id = resource.id
        return True

    async def _load_slots_and_schedule(self) -> None:
        await asyncio.gather(self._load_slots(), self._load_schedule())

    async def _load_slots(self) -> None:
        if self.business_id is None:
            return
        generation = self._begin("slots")
        self.loading_slots = True
        self._set_error(None, None)
        try:
            async with self._sessionmaker() as session:
                slots = await booking_data_service.fetch_all_slots_for_business(
                    session,
                    business_id=self.business_id,
                    day=self.selected_date,
                    timezone=self.timezone,
                )
        except DataAccessError:
            if self._is_current("slots", generation):
                self.loading_slots = False
                self._set_error(MSG_SLOTS_FAILED, ErrorKind.DATA_ACCESS)
            return

        if not self._is_current("slots", generation):
            return
        self.loading_slots = False
        self.slots = slots
        logger.info(
            "Loaded %d slots for business %s on %s",
            len(slots),
            self.business_id,
            self.selected_date.isoformat(),
        )

    async def _load_schedule(self) -> None:
        resource_id = self.selected_resource_id
        if resource_id is None:
            return
        generation = self._begin("schedule")
        try:
            async with self._sessionmaker() as session:
                rules = await booking_data_service.fetch_weekly_schedule(
                    session, resource_id=resource_id
                )
        except BookingError:
            # Closed-day greying is a convenience; fail open.
            logger.exception("Failed to load weekly schedule for %s", resource_id)
            if self._is_current("schedule", generation):
                self.schedule = []
                self.disabled_days = None
            return

        if not self._is_current("schedule", generation):
            return
        self.schedule = rules
        self.disabled_days = disabled_calendar_days(rules)

    # -- rendering -------------------------------------------------------

    def _slot_index(self) -> dict[uuid.UUID, SlotRead]:
        return {slot.id: slot for slot in self.slots}

    def _render_row(self, row: SlotMatrixRow, selected: Selection) -> RowView:
        cells = []
        for resource in self.resources:
            slot = row.slot_for(resource.id)
            if slot is None:
                cells.append(CellView(resource_id=resource.id, state=CellState.UNAVAILABLE))
                continue
            if slot.is_booked:
                state = CellState.BOOKED
            elif slot.id in selected:
                state = CellState.SELECTED
            else:
                state = CellState.AVAILABLE
            cells.append(CellView(resource_id=resource.id, state=state, slot_id=slot.id))
        return RowView(
            start_time=row.start_time,
            end_time=row.end_time,
            price=row.price,
            cells=tuple(cells),
        )


__all__ = [
    "AvailabilityController",
    "AvailabilityView",
    "CellState",
    "CellView",
    "ErrorKind",
    "RowView",
]

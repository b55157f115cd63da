"""Read access to resources, slots and weekly schedules.

Every function returns validated schema records rather than ORM objects so
callers never trigger lazy loads after the session closes. Store failures
surface as :class:`~slotboard.core.errors.DataAccessError`.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from slotboard.core.errors import ResourceNotFoundError, store_errors
from slotboard.models import Business, Resource, Slot, WeeklyScheduleRule
from slotboard.schemas.resource import BusinessRead, ResourceRead, ResourceSummary
from slotboard.schemas.schedule import WeeklyScheduleRuleRead
from slotboard.schemas.slot import SlotRead

logger = logging.getLogger(__name__)


def resolve_zone(name: str | None) -> ZoneInfo:
    """Return the zone for ``name``, falling back to UTC for unknown names."""
    if not name:
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC day boundaries", name)
        return ZoneInfo("UTC")


def day_bounds(day: date, timezone: str | None = None) -> tuple[datetime, datetime]:
    """Return ``[local midnight, next local midnight)`` for ``day`` in UTC."""
    zone = resolve_zone(timezone)
    start = datetime.combine(day, time.min, tzinfo=zone)
    end = datetime.combine(day + timedelta(days=1), time.min, tzinfo=zone)
    return start.astimezone(UTC), end.astimezone(UTC)


async def get_resource(
    session: AsyncSession, *, resource_id: uuid.UUID
) -> ResourceRead:
    """Return a resource with its business id.

    Raises:
        ResourceNotFoundError: If no resource has this id.
    """
    with store_errors("load resource"):
        resource = await session.get(Resource, resource_id)
    if resource is None:
        raise ResourceNotFoundError(resource_id)
    return ResourceRead.model_validate(resource)


async def get_business(
    session: AsyncSession, *, business_id: uuid.UUID
) -> BusinessRead | None:
    with store_errors("load business"):
        business = await session.get(Business, business_id)
    if business is None:
        return None
    return BusinessRead.model_validate(business)


async def fetch_resources(
    session: AsyncSession, *, business_id: uuid.UUID
) -> list[ResourceSummary]:
    """Return a business's resources sorted by name."""
    stmt: Select[tuple[Resource]] = (
        select(Resource)
        .where(Resource.business_id == business_id)
        .order_by(Resource.name.asc(), Resource.id.asc())
    )
    with store_errors("load resources"):
        result = await session.execute(stmt)
        resources = result.scalars().all()
    return [ResourceSummary.model_validate(resource) for resource in resources]


async def fetch_daily_slots(
    session: AsyncSession,
    *,
    resource_id: uuid.UUID,
    day: date,
    timezone: str | None = None,
) -> list[SlotRead]:
    """Return one resource's slots starting on ``day``, ordered by start."""
    start, end = day_bounds(day, timezone)
    stmt: Select[tuple[Slot]] = (
        select(Slot)
        .where(
            Slot.resource_id == resource_id,
            Slot.start_time >= start,
            Slot.start_time < end,
        )
        .order_by(Slot.start_time.asc(), Slot.end_time.asc())
    )
    with store_errors("load slots"):
        result = await session.execute(stmt)
        slots = result.scalars().all()
    return [SlotRead.model_validate(slot) for slot in slots]


async def fetch_all_slots_for_business(
    session: AsyncSession,
    *,
    business_id: uuid.UUID,
    day: date,
    timezone: str | None = None,
) -> list[SlotRead]:
    """Return the slots of every resource of a business starting on ``day``."""
    start, end = day_bounds(day, timezone)
    stmt: Select[tuple[Slot]] = (
        select(Slot)
        .join(Resource, Slot.resource_id == Resource.id)
        .where(
            Resource.business_id == business_id,
            Slot.start_time >= start,
            Slot.start_time < end,
        )
        .order_by(Slot.start_time.asc(), Slot.end_time.asc())
    )
    with store_errors("load slots"):
        result = await session.execute(stmt)
        slots = result.scalars().all()
    return [SlotRead.model_validate(slot) for slot in slots]


async def fetch_weekly_schedule(
    session: AsyncSession, *, resource_id: uuid.UUID
) -> list[WeeklyScheduleRuleRead]:
    """Return a resource's weekly rules ordered Monday to Sunday."""
    stmt: Select[tuple[WeeklyScheduleRule]] = (
        select(WeeklyScheduleRule)
        .where(WeeklyScheduleRule.resource_id == resource_id)
        .order_by(WeeklyScheduleRule.day_of_week.asc())
    )
    with store_errors("load weekly schedule"):
        result = await session.execute(stmt)
        rules = result.scalars().all()
    return [WeeklyScheduleRuleRead.model_validate(rule) for rule in rules]


__all__ = [
    "day_bounds",
    "fetch_all_slots_for_business",
    "fetch_daily_slots",
    "fetch_resources",
    "fetch_weekly_schedule",
    "get_business",
    "get_resource",
    "resolve_zone",
]

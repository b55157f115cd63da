"""Resource, slot and weekly schedule read endpoints."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from slotboard.api import deps
from slotboard.core.errors import DataAccessError, ResourceNotFoundError
from slotboard.schemas.resource import BusinessRead, ResourceRead, ResourceSummary
from slotboard.schemas.schedule import WeeklyScheduleRead
from slotboard.schemas.slot import SlotRead
from slotboard.services import booking_data_service
from slotboard.services.availability_gate import disabled_calendar_days

router = APIRouter()


def _unavailable(exc: DataAccessError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message
    )


async def _require_business(session: AsyncSession, business_id: uuid.UUID) -> BusinessRead:
    business = await booking_data_service.get_business(session, business_id=business_id)
    if business is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Business not found"
        )
    return business


async def _require_resource(session: AsyncSession, resource_id: uuid.UUID) -> ResourceRead:
    try:
        return await booking_data_service.get_resource(session, resource_id=resource_id)
    except ResourceNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc


@router.get(
    "/businesses/{business_id}/resources",
    response_model=list[ResourceSummary],
    summary="List a business's resources",
)
async def list_business_resources(
    business_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[ResourceSummary]:
    try:
        await _require_business(session, business_id)
        return await booking_data_service.fetch_resources(
            session, business_id=business_id
        )
    except DataAccessError as exc:
        raise _unavailable(exc) from exc


@router.get(
    "/businesses/{business_id}/slots",
    response_model=list[SlotRead],
    summary="List all resources' slots for a date",
)
async def list_business_slots(
    business_id: uuid.UUID,
    day: Annotated[date, Query(alias="date")],
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[SlotRead]:
    try:
        business = await _require_business(session, business_id)
        return await booking_data_service.fetch_all_slots_for_business(
            session, business_id=business_id, day=day, timezone=business.timezone
        )
    except DataAccessError as exc:
        raise _unavailable(exc) from exc


@router.get(
    "/resources/{resource_id}", response_model=ResourceRead, summary="Get resource"
)
async def get_resource(
    resource_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> ResourceRead:
    try:
        return await _require_resource(session, resource_id)
    except DataAccessError as exc:
        raise _unavailable(exc) from exc


@router.get(
    "/resources/{resource_id}/slots",
    response_model=list[SlotRead],
    summary="List a resource's slots for a date",
)
async def list_resource_slots(
    resource_id: uuid.UUID,
    day: Annotated[date, Query(alias="date")],
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[SlotRead]:
    try:
        resource = await _require_resource(session, resource_id)
        business = await booking_data_service.get_business(
            session, business_id=resource.business_id
        )
        return await booking_data_service.fetch_daily_slots(
            session,
            resource_id=resource_id,
            day=day,
            timezone=business.timezone if business else None,
        )
    except DataAccessError as exc:
        raise _unavailable(exc) from exc


@router.get(
    "/resources/{resource_id}/schedule",
    response_model=WeeklyScheduleRead,
    summary="Weekly schedule and closed calendar days",
)
async def get_resource_schedule(
    resource_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> WeeklyScheduleRead:
    try:
        await _require_resource(session, resource_id)
        rules = await booking_data_service.fetch_weekly_schedule(
            session, resource_id=resource_id
        )
    except DataAccessError as exc:
        raise _unavailable(exc) from exc
    return WeeklyScheduleRead(
        rules=rules, disabled_days=sorted(disabled_calendar_days(rules))
    )

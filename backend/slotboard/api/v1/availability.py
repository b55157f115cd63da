"""Availability page endpoints.

Each request builds a fresh controller from the page's query parameters,
runs the load sequence and returns the rendered view. Selections are sent
along with the request and replayed, so the running total always matches
the slots just loaded.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from slotboard.api import deps
from slotboard.schemas.availability import (
    AvailabilityViewRead,
    ErrorKind,
    SelectionRead,
    SelectionRequest,
)
from slotboard.services.availability_controller import (
    AvailabilityController,
    AvailabilityView,
)

router = APIRouter()

_DEFAULT_RATE_DEP = deps.rate_limit()


def _raise_for_not_found(view: AvailabilityView) -> None:
    if view.error_kind is ErrorKind.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=view.error or "Resource not found",
        )


@router.get("", response_model=AvailabilityViewRead, summary="Render availability")
async def get_availability(
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(deps.get_session_factory)
    ],
    resource_id: Annotated[uuid.UUID | None, Query(alias="resourceId")] = None,
    day: Annotated[date | None, Query(alias="date")] = None,
    slot_ids: Annotated[list[uuid.UUID] | None, Query(alias="slotIds")] = None,
) -> AvailabilityViewRead:
    controller = AvailabilityController(
        session_factory, initial_resource_id=resource_id, initial_date=day
    )
    view = await controller.initialize()
    _raise_for_not_found(view)
    if slot_ids:
        controller.select_slots(slot_ids)
        view = controller.snapshot()
    return AvailabilityViewRead.model_validate(view)


@router.post(
    "/selection",
    response_model=SelectionRead,
    summary="Price a slot selection",
    dependencies=[_DEFAULT_RATE_DEP],
)
async def price_selection(
    payload: SelectionRequest,
    session_factory: Annotated[
        async_sessionmaker[AsyncSession], Depends(deps.get_session_factory)
    ],
) -> SelectionRead:
    controller = AvailabilityController(
        session_factory,
        initial_resource_id=payload.resource_id,
        initial_date=payload.day,
    )
    view = await controller.initialize()
    _raise_for_not_found(view)
    if view.error_kind is ErrorKind.DATA_ACCESS:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=view.error
        )
    rejected = controller.select_slots(payload.slot_ids)
    view = controller.snapshot()
    return SelectionRead(
        selected_slot_ids=list(view.selected_slot_ids),
        rejected_slot_ids=rejected,
        total=view.total,
    )

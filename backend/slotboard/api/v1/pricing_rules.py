"""Dynamic pricing rule administration endpoints."""

from __future__ import annotations

import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from slotboard.api import deps
from slotboard.core.errors import (
    DataAccessError,
    PricingRuleNotFoundError,
    ResourceNotFoundError,
)
from slotboard.schemas.pricing_rule import PricingRuleCreate, PricingRuleRead
from slotboard.services import pricing_rule_service

router = APIRouter()

_WRITE_RATE_DEP = deps.rate_limit()


@router.get(
    "/resources/{resource_id}/pricing-rules",
    response_model=list[PricingRuleRead],
    summary="List pricing rules, newest first",
)
async def list_pricing_rules(
    resource_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> list[PricingRuleRead]:
    try:
        rules = await pricing_rule_service.fetch_pricing_rules(
            session, resource_id=resource_id
        )
    except ResourceNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    except DataAccessError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message
        ) from exc
    return [PricingRuleRead.model_validate(rule) for rule in rules]


@router.post(
    "/resources/{resource_id}/pricing-rules",
    response_model=PricingRuleRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create pricing rule",
    dependencies=[_WRITE_RATE_DEP],
)
async def create_pricing_rule(
    resource_id: uuid.UUID,
    payload: PricingRuleCreate,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> PricingRuleRead:
    try:
        rule = await pricing_rule_service.create_pricing_rule(
            session, resource_id=resource_id, payload=payload
        )
    except ResourceNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    except DataAccessError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message
        ) from exc
    return PricingRuleRead.model_validate(rule)


@router.delete(
    "/pricing-rules/{rule_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete pricing rule",
    dependencies=[_WRITE_RATE_DEP],
)
async def delete_pricing_rule(
    rule_id: uuid.UUID,
    session: Annotated[AsyncSession, Depends(deps.get_db_session)],
) -> None:
    try:
        await pricing_rule_service.delete_pricing_rule(session, rule_id=rule_id)
    except PricingRuleNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    except DataAccessError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message
        ) from exc
    return None

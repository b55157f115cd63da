"""Dynamic pricing rule management."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from slotboard.core.errors import (
    DataAccessError,
    PricingRuleNotFoundError,
    ResourceNotFoundError,
    store_errors,
)
from slotboard.models import PricingRule, Resource
from slotboard.schemas.pricing_rule import PricingRuleCreate

logger = logging.getLogger(__name__)


async def create_pricing_rule(
    session: AsyncSession,
    *,
    resource_id: uuid.UUID,
    payload: PricingRuleCreate,
) -> PricingRule:
    """Store a validated pricing rule for a resource."""
    await _ensure_resource(session, resource_id=resource_id)
    rule = PricingRule(
        resource_id=resource_id,
        rule_name=payload.rule_name,
        price_override=payload.price_override,
        day_of_week=list(payload.day_of_week),
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
    session.add(rule)
    try:
        with store_errors("create pricing rule"):
            await session.commit()
            await session.refresh(rule)
    except DataAccessError:
        await session.rollback()
        raise
    logger.info("Created pricing rule %s for resource %s", rule.id, resource_id)
    return rule


async def fetch_pricing_rules(
    session: AsyncSession,
    *,
    resource_id: uuid.UUID,
) -> list[PricingRule]:
    """Return the rules of a resource, newest first."""
    await _ensure_resource(session, resource_id=resource_id)
    with store_errors("load pricing rules"):
        result = await session.execute(
            select(PricingRule)
            .where(PricingRule.resource_id == resource_id)
            .order_by(PricingRule.created_at.desc(), PricingRule.id.desc())
        )
        return list(result.scalars().all())


async def delete_pricing_rule(session: AsyncSession, *, rule_id: uuid.UUID) -> None:
    """Remove a pricing rule.

    Raises:
        PricingRuleNotFoundError: If the rule does not exist.
        DataAccessError: If the store cannot be reached.
    """
    with store_errors("load pricing rule"):
        rule = await session.get(PricingRule, rule_id)
    if rule is None:
        raise PricingRuleNotFoundError(rule_id)
    try:
        with store_errors("delete pricing rule"):
            await session.delete(rule)
            await session.commit()
    except DataAccessError:
        await session.rollback()
        raise
    logger.info("Deleted pricing rule %s", rule_id)


async def _ensure_resource(session: AsyncSession, *, resource_id: uuid.UUID) -> Resource:
    with store_errors("load resource"):
        resource = await session.get(Resource, resource_id)
    if resource is None:
        raise ResourceNotFoundError(resource_id)
    return resource

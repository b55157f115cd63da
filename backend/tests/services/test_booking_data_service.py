"""Service-level tests for booking data access and pricing rules."""

from __future__ import annotations

import uuid
from datetime import date, time
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from slotboard.core.errors import (
    DataAccessError,
    PricingRuleNotFoundError,
    ResourceNotFoundError,
)
from slotboard.db.session import get_sessionmaker
from slotboard.schemas.pricing_rule import PricingRuleCreate
from slotboard.services import booking_data_service, pricing_rule_service

pytestmark = pytest.mark.asyncio


async def test_business_slots_use_local_day_window(app_context, db_url) -> None:
    slot_ids = app_context["slot_ids"]
    sessionmaker = get_sessionmaker(db_url)

    async with sessionmaker() as session:
        slots = await booking_data_service.fetch_all_slots_for_business(
            session,
            business_id=app_context["business_id"],
            day=date(2025, 11, 11),
            timezone="America/New_York",
        )

    # 00:00 UTC on the 12th is still the evening of the 11th in New York.
    assert {slot.id for slot in slots} == set(slot_ids.values())


async def test_get_resource_missing_raises(reset_database, db_url) -> None:
    async with get_sessionmaker(db_url)() as session:
        with pytest.raises(ResourceNotFoundError):
            await booking_data_service.get_resource(session, resource_id=uuid.uuid4())


async def test_store_failure_becomes_data_access_error(
    app_context, db_url, monkeypatch: pytest.MonkeyPatch
) -> None:
    async with get_sessionmaker(db_url)() as session:

        async def broken_execute(*args, **kwargs):
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

        monkeypatch.setattr(session, "execute", broken_execute)
        with pytest.raises(DataAccessError) as excinfo:
            await booking_data_service.fetch_weekly_schedule(
                session, resource_id=app_context["court_a_id"]
            )

    assert excinfo.value.message == "Failed to load weekly schedule"


async def test_pricing_rule_lifecycle(app_context, db_url) -> None:
    court_a = app_context["court_a_id"]
    payload = PricingRuleCreate(
        rule_name="Early Bird",
        price_override=Decimal("12.50"),
        day_of_week=[2, 1, 2],
        start_time=time(6),
        end_time=time(9),
    )

    async with get_sessionmaker(db_url)() as session:
        rule = await pricing_rule_service.create_pricing_rule(
            session, resource_id=court_a, payload=payload
        )
        assert rule.day_of_week == [1, 2]

        rules = await pricing_rule_service.fetch_pricing_rules(
            session, resource_id=court_a
        )
        assert [item.id for item in rules] == [rule.id]

        await pricing_rule_service.delete_pricing_rule(session, rule_id=rule.id)
        with pytest.raises(PricingRuleNotFoundError):
            await pricing_rule_service.delete_pricing_rule(session, rule_id=rule.id)


async def test_pricing_rule_for_unknown_resource(reset_database, db_url) -> None:
    payload = PricingRuleCreate(
        rule_name="Ghost",
        price_override=Decimal("1"),
        day_of_week=[1],
        start_time=time(6),
        end_time=time(9),
    )

    async with get_sessionmaker(db_url)() as session:
        with pytest.raises(ResourceNotFoundError):
            await pricing_rule_service.create_pricing_rule(
                session, resource_id=uuid.uuid4(), payload=payload
            )


async def test_pricing_rule_lookups_wrap_store_failures(
    app_context, db_url, monkeypatch: pytest.MonkeyPatch
) -> None:
    payload = PricingRuleCreate(
        rule_name="Early Bird",
        price_override=Decimal("12.50"),
        day_of_week=[1],
        start_time=time(6),
        end_time=time(9),
    )

    async with get_sessionmaker(db_url)() as session:

        async def broken_get(*args, **kwargs):
            raise OperationalError(
                "SELECT 1", {}, Exception("server closed the connection")
            )

        monkeypatch.setattr(session, "get", broken_get)

        with pytest.raises(DataAccessError):
            await pricing_rule_service.fetch_pricing_rules(
                session, resource_id=app_context["court_a_id"]
            )
        with pytest.raises(DataAccessError):
            await pricing_rule_service.create_pricing_rule(
                session, resource_id=app_context["court_a_id"], payload=payload
            )
        with pytest.raises(DataAccessError) as excinfo:
            await pricing_rule_service.delete_pricing_rule(session, rule_id=uuid.uuid4())

    assert excinfo.value.message == "Failed to load pricing rule"


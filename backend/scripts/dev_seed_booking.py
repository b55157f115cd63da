"""Seed a demo business with resources, a week of slots and schedules."""

from __future__ import annotations

import asyncio
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from zoneinfo import ZoneInfo

from sqlalchemy import select

from slotboard.core.config import get_settings
from slotboard.db.session import get_sessionmaker
from slotboard.models import Business, PricingRule, Resource, Slot, WeeklyScheduleRule

BUSINESS_NAME = "Dev Sports Centre"
RESOURCE_NAMES = ("Court A", "Court B", "Court C")
OPEN_HOURS = (time(9), time(21))
BASE_PRICE = Decimal("20.00")
WEEKEND_PRICE = Decimal("30.00")
DAYS_AHEAD = 7


def _hourly_windows(day: date, zone: ZoneInfo) -> list[tuple[datetime, datetime]]:
    start = datetime.combine(day, OPEN_HOURS[0], tzinfo=zone)
    end = datetime.combine(day, OPEN_HOURS[1], tzinfo=zone)
    windows = []
    while start < end:
        windows.append((start, start + timedelta(hours=1)))
        start += timedelta(hours=1)
    return windows


async def seed_booking() -> None:
    settings = get_settings()
    zone = ZoneInfo(settings.default_timezone)
    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        existing = await session.execute(
            select(Business).where(Business.name == BUSINESS_NAME)
        )
        if existing.scalar_one_or_none() is not None:
            print(f"Business {BUSINESS_NAME!r} already exists")
            return

        business = Business(name=BUSINESS_NAME, timezone=settings.default_timezone)
        session.add(business)
        await session.flush()

        today = datetime.now(zone).date()
        for name in RESOURCE_NAMES:
            resource = Resource(business_id=business.id, name=name)
            session.add(resource)
            await session.flush()

            # Closed on Mondays.
            for day_of_week in range(1, 8):
                session.add(
                    WeeklyScheduleRule(
                        resource_id=resource.id,
                        day_of_week=day_of_week,
                        is_open=day_of_week != 1,
                        open_time=OPEN_HOURS[0],
                        close_time=OPEN_HOURS[1],
                    )
                )

            for offset in range(DAYS_AHEAD):
                day = today + timedelta(days=offset)
                if day.isoweekday() == 1:
                    continue
                price = WEEKEND_PRICE if day.isoweekday() >= 6 else BASE_PRICE
                for start, end in _hourly_windows(day, zone):
                    session.add(
                        Slot(
                            resource_id=resource.id,
                            start_time=start,
                            end_time=end,
                            slot_price=price,
                        )
                    )

            session.add(
                PricingRule(
                    resource_id=resource.id,
                    rule_name="Weekend Premium",
                    price_override=WEEKEND_PRICE,
                    day_of_week=[6, 7],
                    start_time=OPEN_HOURS[0],
                    end_time=OPEN_HOURS[1],
                )
            )

        await session.commit()
        print(f"Created {BUSINESS_NAME!r} (id={business.id}) with {len(RESOURCE_NAMES)} resources")


if __name__ == "__main__":
    asyncio.run(seed_booking())

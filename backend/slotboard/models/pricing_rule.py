"""Dynamic pricing override rules."""

from __future__ import annotations

import uuid
from datetime import time
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Numeric, String, Time
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import JSON

from slotboard.db.base import Base
from slotboard.models.mixins import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from slotboard.models.resource import Resource

JSONB_TYPE = JSONB().with_variant(JSON(), "sqlite")


class PricingRule(TimestampMixin, Base):
    """Named price override for a set of weekdays and a time-of-day window.

    Applying the override to slot prices happens when slots are generated;
    this table only records the rules.
    """

    __tablename__ = "resource_pricing_rules"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    resource_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("business_resources.id", ondelete="CASCADE"), nullable=False
    )
    rule_name: Mapped[str] = mapped_column(String(255), nullable=False)
    price_override: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    day_of_week: Mapped[list[int]] = mapped_column(
        JSONB_TYPE, default=list, nullable=False
    )
    start_time: Mapped[time] = mapped_column(Time(), nullable=False)
    end_time: Mapped[time] = mapped_column(Time(), nullable=False)

    resource: Mapped["Resource"] = relationship(
        "Resource", back_populates="pricing_rules"
    )

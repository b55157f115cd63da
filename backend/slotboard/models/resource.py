"""Bookable resource (venue, court, room) belonging to a business."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotboard.db.base import Base
from slotboard.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from slotboard.models.business import Business
    from slotboard.models.pricing_rule import PricingRule
    from slotboard.models.schedule import WeeklyScheduleRule
    from slotboard.models.slot import Slot


class Resource(TimestampMixin, Base):
    """A venue or unit that customers book by the slot."""

    __tablename__ = "business_resources"
    __table_args__ = (Index("ix_business_resources_business_name", "business_id", "name"),)

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    business_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    business: Mapped["Business"] = relationship("Business", back_populates="resources")
    slots: Mapped[list["Slot"]] = relationship(
        "Slot", back_populates="resource", cascade="all, delete-orphan"
    )
    schedule_rules: Mapped[list["WeeklyScheduleRule"]] = relationship(
        "WeeklyScheduleRule", back_populates="resource", cascade="all, delete-orphan"
    )
    pricing_rules: Mapped[list["PricingRule"]] = relationship(
        "PricingRule", back_populates="resource", cascade="all, delete-orphan"
    )

"""Concrete bookable time slots."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotboard.db.base import Base
from slotboard.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from slotboard.models.resource import Resource


class Slot(TimestampMixin, Base):
    """One bookable interval of a resource on a specific date.

    ``is_booked`` is set by the booking flow and is terminal: a booked slot
    can never be selected again.
    """

    __tablename__ = "slots"
    __table_args__ = (Index("ix_slots_resource_start", "resource_id", "start_time"),)

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    resource_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("business_resources.id", ondelete="CASCADE"), nullable=False
    )
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    slot_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    is_booked: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    resource: Mapped["Resource"] = relationship("Resource", back_populates="slots")

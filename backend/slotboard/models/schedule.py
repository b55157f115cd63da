"""Weekly recurring open/closed schedule per resource."""
from __future__ import annotations

import uuid
from datetime import time
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotboard.db.base import Base
from slotboard.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from slotboard.models.resource import Resource


class WeeklyScheduleRule(TimestampMixin, Base):
    """Opening hours for one weekday (1=Monday .. 7=Sunday)."""

    __tablename__ = "business_schedules"
    __table_args__ = (
        UniqueConstraint("resource_id", "day_of_week", name="uq_schedule_resource_day"),
        CheckConstraint("day_of_week BETWEEN 1 AND 7", name="ck_schedule_day_of_week"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    resource_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("business_resources.id", ondelete="CASCADE"), nullable=False
    )
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    open_time: Mapped[time | None] = mapped_column(Time())
    close_time: Mapped[time | None] = mapped_column(Time())

    resource: Mapped["Resource"] = relationship(
        "Resource", back_populates="schedule_rules"
    )

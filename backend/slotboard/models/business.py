"""Business model owning bookable resources."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from slotboard.db.base import Base
from slotboard.models.mixins import TimestampMixin


if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from slotboard.models.resource import Resource


class Business(TimestampMixin, Base):
    """A business offering one or more bookable resources."""

    __tablename__ = "businesses"

    id: Mapped[uuid.UUID] = mapped_column(
        primary_key=True, default=uuid.uuid4, unique=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    timezone: Mapped[str] = mapped_column(String(64), nullable=False, default="UTC")

    resources: Mapped[list["Resource"]] = relationship(
        "Resource", back_populates="business", cascade="all, delete-orphan"
    )

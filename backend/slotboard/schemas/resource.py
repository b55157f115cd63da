"""Schemas for businesses and their resources."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict


class ResourceSummary(BaseModel):
    """Resource as listed in venue pickers."""

    id: uuid.UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class ResourceRead(ResourceSummary):
    """Resource with its owning business."""

    business_id: uuid.UUID


class BusinessRead(BaseModel):
    id: uuid.UUID
    name: str
    timezone: str

    model_config = ConfigDict(from_attributes=True)

"""Create booking availability tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "businesses",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("timezone", sa.String(64), nullable=False, server_default="UTC"),
        *_timestamps(),
    )
    op.create_table(
        "business_resources",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "business_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("businesses.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index(
        "ix_business_resources_business_name",
        "business_resources",
        ["business_id", "name"],
    )
    op.create_table(
        "slots",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "resource_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("business_resources.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("slot_price", sa.Numeric(12, 2)),
        sa.Column("is_booked", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_slots_resource_start", "slots", ["resource_id", "start_time"])
    op.create_table(
        "business_schedules",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "resource_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("business_resources.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("day_of_week", sa.Integer(), nullable=False),
        sa.Column("is_open", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("open_time", sa.Time()),
        sa.Column("close_time", sa.Time()),
        *_timestamps(),
        sa.UniqueConstraint(
            "resource_id", "day_of_week", name="uq_schedule_resource_day"
        ),
        sa.CheckConstraint(
            "day_of_week BETWEEN 1 AND 7", name="ck_schedule_day_of_week"
        ),
    )
    op.create_table(
        "resource_pricing_rules",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column(
            "resource_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("business_resources.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("rule_name", sa.String(255), nullable=False),
        sa.Column("price_override", sa.Numeric(12, 2), nullable=False),
        sa.Column(
            "day_of_week",
            postgresql.JSONB().with_variant(sa.JSON(), "sqlite"),
            nullable=False,
        ),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("resource_pricing_rules")
    op.drop_table("business_schedules")
    op.drop_index("ix_slots_resource_start", table_name="slots")
    op.drop_table("slots")
    op.drop_index(
        "ix_business_resources_business_name", table_name="business_resources"
    )
    op.drop_table("business_resources")
    op.drop_table("businesses")

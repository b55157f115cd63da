"""ORM models package export."""

from slotboard.models.business import Business
from slotboard.models.pricing_rule import PricingRule
from slotboard.models.resource import Resource
from slotboard.models.schedule import WeeklyScheduleRule
from slotboard.models.slot import Slot

__all__ = [
    "Business",
    "PricingRule",
    "Resource",
    "Slot",
    "WeeklyScheduleRule",
]

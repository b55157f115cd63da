"""Schema exports."""

from slotboard.schemas.pricing_rule import PricingRuleCreate, PricingRuleRead
from slotboard.schemas.resource import BusinessRead, ResourceRead, ResourceSummary
from slotboard.schemas.schedule import WeeklyScheduleRead, WeeklyScheduleRuleRead
from slotboard.schemas.slot import SlotRead

__all__ = [
    "BusinessRead",
    "PricingRuleCreate",
    "PricingRuleRead",
    "ResourceRead",
    "ResourceSummary",
    "SlotRead",
    "WeeklyScheduleRead",
    "WeeklyScheduleRuleRead",
]

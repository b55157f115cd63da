"""Service layer exports."""
from slotboard.services import (
    availability_controller,
    availability_gate,
    booking_data_service,
    pricing_rule_service,
    slot_matrix,
    slot_selection,
)

__all__ = [
    "availability_controller",
    "availability_gate",
    "booking_data_service",
    "pricing_rule_service",
    "slot_matrix",
    "slot_selection",
]

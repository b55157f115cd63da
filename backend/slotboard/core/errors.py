"""Errors raised by the booking services.

Services raise these; route handlers translate them into HTTP responses and
the availability controller turns them into user-visible error text.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base error carrying a user-safe message."""

    default_message = "Booking request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class DataAccessError(BookingError):
    """Raised when the store is unreachable or rejects a query."""

    default_message = "Data store unavailable"


class ResourceNotFoundError(BookingError):
    """Raised when a resource id does not resolve to a stored resource."""

    default_message = "Resource not found"

    def __init__(self, resource_id: uuid.UUID | str | None = None) -> None:
        super().__init__()
        self.resource_id = resource_id


class SlotNotFoundError(BookingError):
    """Raised when a slot id is not part of the currently loaded slot set."""

    default_message = "Slot not found"

    def __init__(self, slot_id: uuid.UUID | str | None = None) -> None:
        super().__init__()
        self.slot_id = slot_id


class PricingRuleNotFoundError(BookingError):
    """Raised when a pricing rule cannot be found."""

    default_message = "Pricing rule not found"

    def __init__(self, rule_id: uuid.UUID | str | None = None) -> None:
        super().__init__()
        self.rule_id = rule_id


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Re-raise store failures inside the block as :class:`DataAccessError`.

    Drivers such as asyncpg raise plain ``OSError`` when the server refuses
    or drops the connection; SQLAlchemy does not wrap those.
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Data access failed while trying to %s: %s", action, str(exc))
        raise DataAccessError(f"Failed to {action}") from exc


__all__ = [
    "BookingError",
    "DataAccessError",
    "PricingRuleNotFoundError",
    "ResourceNotFoundError",
    "SlotNotFoundError",
    "store_errors",
]

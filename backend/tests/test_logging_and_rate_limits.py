"""Tests for log scrubbing and rate limit parsing."""

import logging

import pytest

from slotboard.api.deps import parse_rate
from slotboard.security.logging_filters import SensitiveFilter, scrub


def test_scrub_masks_database_password() -> None:
    message = "connect failed: postgresql+asyncpg://slotboard:hunter2@db:5432/slotboard"

    scrubbed = scrub(message)

    assert "hunter2" not in scrubbed
    assert "slotboard:**REDACTED**@db" in scrubbed


def test_filter_scrubs_arguments() -> None:
    record = logging.LogRecord(
        name="slotboard",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="Data access failed: %s",
        args=('{"apikey": "secret-token"}',),
        exc_info=None,
    )

    assert SensitiveFilter().filter(record) is True
    assert "secret-token" not in record.getMessage()


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("100/minute", (100, 60)),
        ("5/seconds", (5, 1)),
        ("20/fortnight", (20, 60)),
        ("lots", (10, 60)),
    ],
)
def test_parse_rate(value: str, expected: tuple[int, int]) -> None:
    assert parse_rate(value, fallback=(10, 60)) == expected

"""Logging filters that scrub sensitive content."""

from __future__ import annotations

import logging
import re

# Connection strings carry store credentials; API keys may appear in
# error text echoed back from the data store.
_SENSITIVE_PATTERN = re.compile(
    r"((?:postgresql|postgres|mysql|redis)(?:\+\w+)?://[^:/\s]+:)[^@\s]+(@)"
    r"|(apikey\"?\s*[:=]\s*\"?)[\w\.-]+",
    re.IGNORECASE,
)


def _redact(match: re.Match[str]) -> str:
    if match.group(1):
        return f"{match.group(1)}**REDACTED**{match.group(2)}"
    return f"{match.group(3)}**REDACTED**"


def scrub(message: str) -> str:
    """Return ``message`` with credentials replaced by a redaction marker."""
    return _SENSITIVE_PATTERN.sub(_redact, message)


class SensitiveFilter(logging.Filter):
    """Replace sensitive tokens in log messages with a redaction marker."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = scrub(record.msg)
        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    key: scrub(value) if isinstance(value, str) else value
                    for key, value in record.args.items()
                }
            else:
                record.args = tuple(
                    scrub(arg) if isinstance(arg, str) else arg for arg in record.args
                )
        return True


__all__ = ["SensitiveFilter", "scrub"]

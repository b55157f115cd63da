"""Common API dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request, Response
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from slotboard.core.config import get_settings
from slotboard.db.session import get_session, get_sessionmaker

_WINDOW_SECONDS = {
    "second": 1,
    "seconds": 1,
    "minute": 60,
    "minutes": 60,
    "hour": 3600,
    "hours": 3600,
    "day": 86400,
    "days": 86400,
}


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Provide an async database session."""
    async for session in get_session():
        yield session


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Provide the sessionmaker for handlers that open several sessions."""
    return get_sessionmaker()


def parse_rate(value: str, *, fallback: tuple[int, int]) -> tuple[int, int]:
    """Parse ``"<count>/<window>"`` (e.g. ``"100/minute"``) into (times, seconds)."""
    try:
        count_str, window_str = value.split("/", 1)
        count = int(count_str)
    except ValueError:
        return fallback
    seconds = _WINDOW_SECONDS.get(window_str.strip().lower(), fallback[1])
    return count, seconds


def rate_limit(limit: tuple[int, int] | None = None):
    """Return a dependency enforcing ``limit``; a no-op while the limiter is down."""
    times, seconds = limit or parse_rate(
        get_settings().rate_limit_default, fallback=(100, 60)
    )

    async def _dependency(request: Request, response: Response) -> None:
        if FastAPILimiter.redis is None:
            return None
        limiter = RateLimiter(times=times, seconds=seconds)
        await limiter(request, response)

    return Depends(_dependency)

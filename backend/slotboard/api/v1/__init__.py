"""Versioned API router."""

from fastapi import APIRouter

from . import availability, health, pricing_rules, resources

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(resources.router, tags=["resources"])
router.include_router(availability.router, prefix="/availability", tags=["availability"])
router.include_router(pricing_rules.router, tags=["pricing-rules"])

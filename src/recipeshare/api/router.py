"""API router aggregating all endpoint routers.

Mounted under ``api.prefix`` (``/api`` by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from recipeshare.api.endpoints import health, recipes


router = APIRouter()

router.include_router(health.router)
router.include_router(recipes.router)

"""
API v1 package.

Contains versioned API routes for the delivery admin API.
"""

from fastapi import APIRouter

from src.api.v1 import auth, catalog, users

router = APIRouter(tags=["v1"])
router.include_router(auth.router)
router.include_router(users.router)
router.include_router(catalog.router)

__all__ = ["router"]

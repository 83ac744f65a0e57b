"""
Top‑level router for version 1 of the API.

Aggregates the resource routers under a unified router that the
application mounts under ``settings.api_prefix``.  The root info
endpoint is not part of it; ``main`` mounts that one at ``/``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])

"""
Root endpoint.

Answers ``GET /`` with a short message telling where the server is
listening, which doubles as a liveness check.
"""

from typing import Dict

from fastapi import APIRouter

from user_directory_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def get_info() -> Dict[str, str]:
    return {"message": f"Server running at http://{settings.host}:{settings.port}"}

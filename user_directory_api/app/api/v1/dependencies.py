"""
Shared FastAPI dependencies for the v1 routes.

``get_user_service`` hands out the service instance owned by the
application, and ``get_request_payload`` exposes the raw JSON body as a
dictionary so that validators can inspect which keys the client sent.
Both are resolved at most once per request thanks to FastAPI's
dependency cache.
"""

import json
from typing import Any, Dict

from fastapi import Request

from user_directory_api.app.core.errors import UserValidationError
from user_directory_api.app.services.user_service import UserService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


async def get_request_payload(request: Request) -> Dict[str, Any]:
    """Return the JSON body of the request, or an empty dict if there is none.

    Raises ``UserValidationError`` when the body is not a JSON object.
    Starlette caches the body on the request, so the endpoint can still
    parse it into its schema afterwards.
    """
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        raise UserValidationError("Malformed JSON body")
    if not isinstance(payload, dict):
        raise UserValidationError("Request body must be a JSON object")
    return payload

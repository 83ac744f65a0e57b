"""
Validation stage for the users routes.

Each check is an independent FastAPI dependency.  A check either
returns, letting the chain continue, or raises a ``UserApiError`` that
short‑circuits the request before the handler (and therefore the store)
is reached.  The route table in ``endpoints/users.py`` decides which
checks guard which operation and in what order.
"""

import logging
from typing import Any, Dict

from fastapi import Depends

from user_directory_api.app.core.errors import UserNotFoundError, UserValidationError
from user_directory_api.app.services.user_service import UserService

from .dependencies import get_request_payload, get_user_service


logger = logging.getLogger(__name__)


async def validate_required_user_body_fields(
    payload: Dict[str, Any] = Depends(get_request_payload),
) -> None:
    """Both ``email`` and ``password`` must be present and non‑empty."""
    if payload.get("email") and payload.get("password"):
        return
    logger.debug("Rejected body without email or password")
    raise UserValidationError("Missing required fields email and password")


async def validate_same_email_doesnt_exist(
    payload: Dict[str, Any] = Depends(get_request_payload),
    service: UserService = Depends(get_user_service),
) -> None:
    email = payload.get("email")
    if email is None:
        return
    if await service.get_user_by_email(email) is not None:
        logger.debug("Rejected duplicate email %s", email)
        raise UserValidationError("User email already exists")


async def validate_same_email_belong_to_same_user(
    user_id: str,
    payload: Dict[str, Any] = Depends(get_request_payload),
    service: UserService = Depends(get_user_service),
) -> None:
    """An email sent on update must equal the one already stored."""
    if "email" not in payload:
        return
    user = await service.get_user_by_id(user_id)
    if user is None or user.email != payload["email"]:
        logger.debug("Rejected email change for user %s", user_id)
        raise UserValidationError("Invalid email")


async def validate_user_exists(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    if await service.get_user_by_id(user_id) is None:
        raise UserNotFoundError(user_id)

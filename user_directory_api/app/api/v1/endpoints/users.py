"""
User endpoints for API v1.

Handlers translate one HTTP operation into one ``UserService`` call.
They carry no checks of their own: the validation chain attached to
each route in ``USER_ROUTES`` has already accepted the request by the
time a handler runs.

Passwords are expected to be hashed before storage; the service layer
takes care of that, and read operations return the stored hash.
"""

from dataclasses import asdict
from typing import Any, Dict, List, Type, TypeVar

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ValidationError

from user_directory_api.app.core.errors import UserNotFoundError, UserValidationError, describe_validation_errors
from user_directory_api.app.schemas.user import UserCreate, UserCreated, UserPatch, UserPut, UserRead
from user_directory_api.app.services.user_service import UserService

from ..dependencies import get_request_payload, get_user_service
from ..routing import RouteConfig, register_routes
from ..validators import (
    validate_required_user_body_fields,
    validate_same_email_belong_to_same_user,
    validate_same_email_doesnt_exist,
    validate_user_exists,
)


SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _to_read(user) -> UserRead:
    return UserRead.model_validate(asdict(user))


def _parse_body(schema: Type[SchemaT], payload: Dict[str, Any]) -> SchemaT:
    # Runs inside the handler, so only after every validator has passed.
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        raise UserValidationError(describe_validation_errors(exc.errors()))


async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every stored user.  There is no pagination."""
    users = await service.list_users()
    return [_to_read(user) for user in users]


async def create_user(
    payload: Dict[str, Any] = Depends(get_request_payload),
    service: UserService = Depends(get_user_service),
) -> UserCreated:
    """Register a new user and return its generated id."""
    user_id = await service.create_user(_parse_body(UserCreate, payload))
    return UserCreated(id=user_id)


async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    user = await service.get_user_by_id(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return _to_read(user)


async def put_user(
    user_id: str,
    payload: Dict[str, Any] = Depends(get_request_payload),
    service: UserService = Depends(get_user_service),
) -> None:
    """Replace a user with the record in the body.  The id is taken from the path."""
    await service.put_user(user_id, _parse_body(UserPut, payload))


async def patch_user(
    user_id: str,
    payload: Dict[str, Any] = Depends(get_request_payload),
    service: UserService = Depends(get_user_service),
) -> None:
    await service.patch_user(user_id, _parse_body(UserPatch, payload))


async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> None:
    await service.delete_user(user_id)


USER_ROUTES = [
    RouteConfig("GET", "", list_users, response_model=List[UserRead], summary="List users"),
    RouteConfig(
        "POST",
        "",
        create_user,
        validators=[validate_required_user_body_fields, validate_same_email_doesnt_exist],
        status_code=status.HTTP_201_CREATED,
        response_model=UserCreated,
        summary="Create a user",
    ),
    RouteConfig(
        "GET",
        "/{user_id}",
        get_user,
        validators=[validate_user_exists],
        response_model=UserRead,
        summary="Read a user",
    ),
    RouteConfig(
        "PUT",
        "/{user_id}",
        put_user,
        validators=[
            validate_user_exists,
            validate_required_user_body_fields,
            validate_same_email_belong_to_same_user,
        ],
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Replace a user",
    ),
    RouteConfig(
        "PATCH",
        "/{user_id}",
        patch_user,
        validators=[validate_user_exists, validate_same_email_belong_to_same_user],
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Update some fields of a user",
    ),
    RouteConfig(
        "DELETE",
        "/{user_id}",
        delete_user,
        validators=[validate_user_exists],
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete a user",
    ),
]


router = register_routes(APIRouter(), USER_ROUTES)

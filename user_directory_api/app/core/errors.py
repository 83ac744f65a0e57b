"""
Exceptions raised by the store, the service layer and the validators.

Every error carries the HTTP status it maps to; ``main.create_app``
installs a handler that renders them as ``{"error": message}``.
"""

from typing import Any, Iterable, Mapping

from fastapi import status


class UserApiError(Exception):
    """Base class for errors that are reported to the client."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserValidationError(UserApiError):
    """Request rejected by the validation stage."""

    status_code = status.HTTP_400_BAD_REQUEST


class UserNotFoundError(UserApiError):
    """No record has the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


def describe_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """Join Pydantic error entries into one ``field: message`` string.

    Numeric location parts (list indexes, JSON character offsets) and the
    ``body`` marker are left out; invalid JSON is reported as such.
    """
    messages = []
    for error in errors:
        if error.get("type") == "json_invalid":
            messages.append("Malformed JSON body")
            continue
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body" and not isinstance(part, int)
        )
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"

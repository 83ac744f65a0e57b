"""
Pydantic models for user payloads.

Field names are snake_case in Python and camelCase on the wire
(``firstName``, ``lastName``, ``permissionLevel``).  Request bodies
accept either spelling.  Presence of ``email`` and ``password`` is
checked by the validation stage rather than by the schemas, so that a
missing field yields a 400 with a readable message instead of a
Pydantic error list.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserBase(CamelModel):
    email: Optional[str] = Field(None, examples=["user@example.com"])
    first_name: Optional[str] = Field(None, examples=["Ada"])
    last_name: Optional[str] = Field(None, examples=["Lovelace"])
    permission_level: Optional[int] = Field(None, examples=[1])


class UserCreate(UserBase):
    """Body of ``POST /users``.  ``email`` and ``password`` are required."""

    password: Optional[str] = Field(None, examples=["strongpassword"])


class UserPut(UserCreate):
    """Body of ``PUT /users/{id}``.

    Describes the complete record.  Optional fields left out of the body
    are cleared on the stored record.  The id always comes from the path.
    """


class UserPatch(UserCreate):
    """Body of ``PATCH /users/{id}``.

    Only the fields actually sent are applied, and only those the record
    marks as updatable.  ``email`` may be sent but must match the
    stored value.
    """


class UserRead(UserBase):
    """A stored user as returned by the read endpoints."""

    id: str
    password: Optional[str] = None


class UserCreated(CamelModel):
    """Response of ``POST /users``."""

    id: str

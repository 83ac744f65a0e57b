"""
The user record kept by the store.

Whether a field may be changed by a partial update is declared on the
field itself: ``immutable()`` marks it as fixed after creation, and
``PATCHABLE_FIELDS`` is computed from those markers.
"""

from dataclasses import Field, dataclass, field, fields
from typing import Any, FrozenSet, Optional


def immutable(default: Any = None) -> Any:
    """Declare a record field that a partial update may never touch."""
    return field(default=default, metadata={"updatable": False})


@dataclass
class UserRecord:
    id: Optional[str] = immutable()
    email: Optional[str] = immutable()
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    permission_level: Optional[int] = None


def _is_updatable(record_field: Field) -> bool:
    return record_field.metadata.get("updatable", True)


def patchable_fields(record_type: type = UserRecord) -> FrozenSet[str]:
    """Names of the fields a partial update is allowed to overwrite."""
    return frozenset(f.name for f in fields(record_type) if _is_updatable(f))


PATCHABLE_FIELDS = patchable_fields()

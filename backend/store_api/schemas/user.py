"""User Schemas - create/patch contracts and the response shape.

Invariants:
    - UserCreate: email, firstName, lastName, address all required
    - firstName/lastName: 1-60 chars; email must be a valid address
    - email is stored as posted: no case folding, no "Name <addr>" form
    - UserPatch: same per-field rules, all optional, {} accepted
"""

from typing import Annotated
from uuid import UUID

from pydantic import AfterValidator, Field, StrictStr
from pydantic.networks import validate_email

from store_api.schemas.base import (
    PatchModel, RequestModel, ResponseModel, UtcDatetime,
)

PersonName = Annotated[StrictStr, Field(min_length=1, max_length=60)]


def _check_email(value: str) -> str:
    """Validate the address shape but keep the string exactly as sent."""
    if "<" in value or value != value.strip():
        raise ValueError("value is not a valid email address")
    validate_email(value)
    return value


Email = Annotated[StrictStr, AfterValidator(_check_email)]


class UserCreate(RequestModel):
    email: Email
    first_name: PersonName
    last_name: PersonName
    address: StrictStr


class UserPatch(PatchModel):
    email: Email | None = None
    first_name: PersonName | None = None
    last_name: PersonName | None = None
    address: StrictStr | None = None


class UserResponse(ResponseModel):
    """User as returned by every /users endpoint."""
    id: UUID
    email: str
    first_name: str
    last_name: str
    address: str
    created_at: UtcDatetime

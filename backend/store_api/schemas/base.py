"""Shared schema bases - camelCase aliasing and the partial-update contract.

Invariants:
    - Request contracts accept camelCase keys only and reject unknown keys
    - PatchModel accepts omitted fields but rejects explicit null
    - to_fields() returns only the keys the client sent, snake_cased for the ORM
    - Response timestamps are always timezone-aware UTC
"""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on read; stored values are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Base for every API schema: snake_case attributes, camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel)


class ResponseModel(CamelModel):
    """Built from ORM rows, serialized with camelCase keys."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class RequestModel(CamelModel):
    model_config = ConfigDict(extra="forbid")

    def to_fields(self) -> dict[str, Any]:
        """Supplied fields as ORM column values."""
        return self.model_dump(exclude_unset=True)


class PatchModel(RequestModel):
    """Every field optional; any field present must pass its own constraint."""

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("may be omitted but cannot be null")
        return v

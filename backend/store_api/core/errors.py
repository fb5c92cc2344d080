"""Error Hierarchy - typed, categorized exceptions for every Store API failure mode.

Invariants:
    - Every error carries a message, a code and an ErrorKind
    - ErrorKind is a closed set: CLIENT_INPUT, NOT_FOUND, UNEXPECTED
    - classify() is total: any exception maps to exactly one ErrorKind

Design Decisions:
    - Single hierarchy with StoreError base: one global handler covers every domain error
    - http_status derived from kind, never chosen per raise site
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pydantic import ValidationError


class ErrorKind(str, Enum):
    """Closed classification used by the error translator."""
    CLIENT_INPUT = "client_input"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


HTTP_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.CLIENT_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNEXPECTED: 500,
}


@dataclass
class ErrorContext:
    """Observability context attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None


class StoreError(Exception):
    """Base exception for all Store API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        kind: ErrorKind,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.kind = kind
        self.context = context or ErrorContext()

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_KIND[self.kind]

    def to_response(self) -> dict:
        """REST error body: {"message": ...}."""
        return {"message": self.message}


# ─── Client input errors (400) ──────────────────────────────────

class PayloadValidationError(StoreError):
    """Request payload or query parameter failed its contract."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorKind.CLIENT_INPUT, context,
        )


class PersistenceValidationError(StoreError):
    """The store rejected the shape of the data (constraint or type)."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PERSISTENCE_VALIDATION_ERROR",
            ErrorKind.CLIENT_INPUT, context,
        )


# ─── Not found (404) ────────────────────────────────────────────

class ResourceNotFoundError(StoreError):
    """No row matches the requested id."""
    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity} '{entity_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorKind.NOT_FOUND,
            ErrorContext(entity=entity, entity_id=entity_id),
        )


# ─── Unexpected (500) ───────────────────────────────────────────

class DatabaseError(StoreError):
    """Database operation failed for a reason other than bad input."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorKind.UNEXPECTED, context,
        )
        self.operation = operation


def classify(exc: BaseException) -> ErrorKind:
    """Map a domain or pydantic exception to its ErrorKind.

    Framework-level request validation errors are converted to
    PayloadValidationError by the API layer before reaching here.
    """
    if isinstance(exc, StoreError):
        return exc.kind
    if isinstance(exc, ValidationError):
        return ErrorKind.CLIENT_INPUT
    return ErrorKind.UNEXPECTED


def format_validation_errors(errors: list[dict]) -> str:
    """Flatten pydantic error dicts into one human-readable message.

    The "body"/"query"/"path" location prefix is dropped so the message
    names the offending field directly.
    """
    parts = []
    for e in errors:
        loc = [
            str(part) for part in e.get("loc", ())
            if part not in ("body", "query", "path")
        ]
        where = ".".join(loc)
        parts.append(f"{where}: {e['msg']}" if where else e["msg"])
    return "; ".join(parts) or "Invalid request data"

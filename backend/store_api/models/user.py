"""User ORM - persists a store customer.

Invariants:
    - id is a UUID generated on insert, never updated
    - email is unique across users
    - first_name / last_name are 1-60 chars (enforced by schemas and CHECK constraints)
    - created_at is set once on insert
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from store_api.db.base import Base


class User(Base):
    """User entity."""
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "length(first_name) BETWEEN 1 AND 60", name="ck_users_first_name_length",
        ),
        CheckConstraint(
            "length(last_name) BETWEEN 1 AND 60", name="ck_users_last_name_length",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    first_name: Mapped[str] = mapped_column(String(60), nullable=False)
    last_name: Mapped[str] = mapped_column(String(60), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

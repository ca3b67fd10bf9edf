"""
Notes API - Note SQLAlchemy Model
==================================

What:  ORM model representing the `notes` table.
How:   Inherits from the declarative Base; Alembic reads this for migrations.
Who:   Used by the SQLAlchemy notes repository.

Table Design:
    - id: UUID primary key generated on insert; never changes afterwards
    - title / text: non-empty TEXT columns (emptiness is rejected by the API)
    - updated_at: NULL until the first update, then set by every update
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from notes_api.database import Base


class Note(Base):
    """A single stored note."""

    __tablename__ = "notes"

    # Generated in Python so the same model works on PostgreSQL and SQLite
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    # Exposed on input as "body"; the rename happens in the API layer
    text: Mapped[str] = mapped_column(Text, nullable=False)

    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}')>"

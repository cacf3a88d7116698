"""Preference ORM: one persisted key-value pair inside a named namespace.

Invariants:
    - (namespace, key) is the composite primary key: one value per key
    - value is JSON so ints and strings round-trip with their type

Design Decisions:
    - Namespace column mirrors a named preferences file: several stores can
      share the table without key collisions
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from ria.db.base import Base


class Preference(Base):
    """Persisted preference value (e.g. the player's score)."""
    __tablename__ = "preferences"

    namespace: Mapped[str] = mapped_column(String(100), primary_key=True)
    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

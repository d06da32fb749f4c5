"""
SQLAlchemy models for stored games.

Each game is one row holding its latest snapshot as JSON; the engine never
queries inside the blob.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import JSON, BigInteger, DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


def utc_now() -> datetime:
    """Generate timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


class GameSnapshot(Base):
    """Latest state of one game."""

    __tablename__ = "game_snapshots"

    game_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    status: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    state: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False)
    last_update: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Milliseconds since epoch, strictly increasing per game",
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now
    )

    def __repr__(self) -> str:
        return f"<GameSnapshot(game_id={self.game_id}, status={self.status}, last_update={self.last_update})>"

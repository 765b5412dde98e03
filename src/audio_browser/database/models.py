"""SQLAlchemy database models for persisted favorites."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ..models import Entry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class Favorite(Base):
    """A pinned file or directory."""

    __tablename__ = "favorites"

    path: Mapped[str] = mapped_column(String(4096), primary_key=True)
    name: Mapped[str] = mapped_column(String(1000), nullable=False)
    is_directory: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_utcnow
    )

    def to_entry(self) -> Entry:
        """Convert to a pinned browser entry."""
        return Entry(
            path=self.path,
            name=self.name,
            is_directory=self.is_directory,
            is_pinned=True,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Favorite(path='{self.path}', is_directory={self.is_directory})>"

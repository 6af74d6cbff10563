"""Database base and model registry."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class TimestampMixin:
    """created_at / updated_at columns maintained on insert and update."""

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


class SoftDeleteMixin:
    """Rows are marked deleted instead of being removed."""

    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)

    @classmethod
    def active(cls):
        """Predicate selecting rows that have not been soft-deleted."""
        return cls.deleted_at.is_(None)


# Register all models so metadata.create_all sees them
import quizbank.models  # noqa: E402, F401

# ==============================================================================
# BASE MODEL - SQLAlchemy Foundation
# ==============================================================================
# Base declarative class shared by all SQL models
# ==============================================================================

from __future__ import annotations

from typing import Any

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class SQLBase(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides a common foundation with:
    - Auto-incrementing integer primary key
    - Dictionary serialization method

    Example:
        >>> class CourseCategory(SQLBase):
        ...     __tablename__ = "course_categories"
        ...     name: Mapped[str] = mapped_column(String(100))
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Returns:
            Dictionary with all column values
        """
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        return f"<{class_name}(id={self.id})>"

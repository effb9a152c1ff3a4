# ==============================================================================
# REVIEW MODEL - Course Reviews
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from online_course.domain_models.base import SQLBase
from online_course.utils.helpers import utc_now

if TYPE_CHECKING:
    from online_course.domain_models.course import Course
    from online_course.domain_models.user import User


class Review(SQLBase):
    """
    Rating and comment left by a user on a course.

    The author is loaded with the review so the reviewer's display name
    can be produced without another query.
    """

    __tablename__ = "reviews"

    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    rating: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
    comments: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    review_date: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="reviews",
        lazy="joined",
    )
    course: Mapped["Course"] = relationship(
        "Course",
        back_populates="reviews",
    )

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, course_id={self.course_id}, rating={self.rating})>"

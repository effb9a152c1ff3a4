# ==============================================================================
# USER MODEL - Platform Users
# ==============================================================================
# Profile data for users authenticated by the external identity provider
# ==============================================================================

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from online_course.domain_models.base import SQLBase

if TYPE_CHECKING:
    from online_course.domain_models.enrollment import Enrollment
    from online_course.domain_models.review import Review
    from online_course.domain_models.video_request import VideoRequest


class User(SQLBase):
    """
    User profile.

    Credentials live with the identity provider; ``adobject_id`` links the
    local row to the provider's object id.

    Attributes:
        display_name: Name shown in the UI
        first_name: Given name
        last_name: Family name
        email: Unique email address
        adobject_id: Identity provider object id
        bio: Free-text biography
        profile_picture_url: Blob storage URL of the profile picture

    Relationships:
        enrollments: Course enrollments
        reviews: Course reviews written by the user
        video_requests: Video topics requested by the user
    """

    __tablename__ = "users"

    display_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    first_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    last_name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    email: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        index=True,
        nullable=False,
    )
    adobject_id: Mapped[Optional[str]] = mapped_column(
        String(128),
        unique=True,
        nullable=True,
    )
    bio: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    profile_picture_url: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    # Relationships
    enrollments: Mapped[List["Enrollment"]] = relationship(
        "Enrollment",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    reviews: Mapped[List["Review"]] = relationship(
        "Review",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    video_requests: Mapped[List["VideoRequest"]] = relationship(
        "VideoRequest",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"

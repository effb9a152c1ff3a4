# ==============================================================================
# COURSE MODELS - Catalogue
# ==============================================================================
# Category, Instructor, Course and SessionDetail entities
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from online_course.domain_models.base import SQLBase

if TYPE_CHECKING:
    from online_course.domain_models.enrollment import Enrollment
    from online_course.domain_models.review import Review


class CourseCategory(SQLBase):
    """
    Category grouping courses.

    Attributes:
        name: Category name (required)
        description: Category description
    """

    __tablename__ = "course_categories"

    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        String(250),
        nullable=True,
    )

    courses: Mapped[List["Course"]] = relationship(
        "Course",
        back_populates="category",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<CourseCategory(id={self.id}, name={self.name})>"


class Instructor(SQLBase):
    """Course instructor, optionally linked to a platform user."""

    __tablename__ = "instructors"

    first_name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    courses: Mapped[List["Course"]] = relationship(
        "Course",
        back_populates="instructor",
    )


class Course(SQLBase):
    """
    Course offered on the platform.

    Attributes:
        title: Course title (required)
        description: Course overview
        price: Course price
        course_type: Delivery type (e.g. Online, Offline)
        seats_available: Remaining seats, when limited
        duration: Length in hours
        category_id: Owning category
        instructor_id: Teaching instructor
        start_date / end_date: Schedule window
        thumbnail_url: Blob storage URL of the preview image

    Relationships:
        category, instructor: loaded together with the course
        session_details, reviews: loaded together with the course
        enrollments: lazily loaded
    """

    __tablename__ = "courses"

    title: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    price: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2),
        default=Decimal("0.00"),
        nullable=False,
    )
    course_type: Mapped[str] = mapped_column(
        String(10),
        default="Online",
        nullable=False,
    )
    seats_available: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    duration: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2),
        default=Decimal("0.00"),
        nullable=False,
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("course_categories.id"),
        index=True,
        nullable=False,
    )
    instructor_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("instructors.id"),
        index=True,
        nullable=True,
    )
    start_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        nullable=True,
    )
    end_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        nullable=True,
    )
    thumbnail_url: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )

    # Relationships
    category: Mapped["CourseCategory"] = relationship(
        "CourseCategory",
        back_populates="courses",
        lazy="joined",
    )
    instructor: Mapped[Optional["Instructor"]] = relationship(
        "Instructor",
        back_populates="courses",
        lazy="joined",
    )
    session_details: Mapped[List["SessionDetail"]] = relationship(
        "SessionDetail",
        back_populates="course",
        cascade="all, delete-orphan",
        order_by="SessionDetail.video_order",
        lazy="selectin",
    )
    reviews: Mapped[List["Review"]] = relationship(
        "Review",
        back_populates="course",
        cascade="all, delete-orphan",
        lazy="selectin",
    )
    enrollments: Mapped[List["Enrollment"]] = relationship(
        "Enrollment",
        back_populates="course",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Course(id={self.id}, title={self.title})>"


class SessionDetail(SQLBase):
    """One video session of a course, ordered by ``video_order``."""

    __tablename__ = "session_details"

    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    video_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    video_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    course: Mapped["Course"] = relationship(
        "Course",
        back_populates="session_details",
    )

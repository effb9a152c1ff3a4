# ==============================================================================
# ENROLLMENT MODELS - Enrollment Aggregate
# ==============================================================================
# Enrollment and its owned Payment records
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from online_course.core.constants import PaymentStatus
from online_course.domain_models.base import SQLBase
from online_course.utils.helpers import utc_now

if TYPE_CHECKING:
    from online_course.domain_models.course import Course
    from online_course.domain_models.user import User


class Enrollment(SQLBase):
    """
    Enrollment linking a user to a course.

    A user holds at most one enrollment per course; the UNIQUE constraint on
    (user_id, course_id) enforces this inside the database so concurrent
    enroll requests cannot both insert.

    Attributes:
        user_id: Enrolled user
        course_id: Enrolled course
        enrollment_date: When the enrollment was created
        payment_status: Summary payment status

    Relationships:
        course: loaded with the enrollment (supplies the course title)
        payments: loaded with the enrollment (supplies the current payment)
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_course"),
    )

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    course_id: Mapped[int] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    enrollment_date: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )
    payment_status: Mapped[str] = mapped_column(
        String(20),
        default=PaymentStatus.PENDING,
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="enrollments",
    )
    course: Mapped["Course"] = relationship(
        "Course",
        back_populates="enrollments",
        lazy="joined",
    )
    payments: Mapped[List["Payment"]] = relationship(
        "Payment",
        back_populates="enrollment",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<Enrollment(user_id={self.user_id}, course_id={self.course_id})>"


class Payment(SQLBase):
    """Payment made against an enrollment."""

    __tablename__ = "payments"

    enrollment_id: Mapped[int] = mapped_column(
        ForeignKey("enrollments.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2),
        nullable=False,
    )
    payment_date: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )
    payment_method: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    payment_status: Mapped[str] = mapped_column(
        String(20),
        default=PaymentStatus.PENDING,
        nullable=False,
    )

    enrollment: Mapped["Enrollment"] = relationship(
        "Enrollment",
        back_populates="payments",
    )

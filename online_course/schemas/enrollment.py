# ==============================================================================
# ENROLLMENT SCHEMAS
# ==============================================================================
# Enrollment requests and responses with payment summary
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from online_course.core.constants import PaymentStatus
from online_course.schemas.base import BaseSchema

PAYMENT_STATUS_PATTERN = "^(Pending|Completed|Failed)$"


class PaymentCreate(BaseSchema):
    """Initial payment recorded together with an enrollment."""

    amount: Decimal = Field(
        ...,
        ge=0,
        description="Paid amount",
    )
    payment_date: Optional[datetime] = Field(
        None,
        description="Payment timestamp, defaults to now",
    )
    payment_method: Optional[str] = Field(
        None,
        max_length=50,
        description="Payment method (card, transfer, ...)",
    )
    payment_status: str = Field(
        PaymentStatus.PENDING,
        pattern=PAYMENT_STATUS_PATTERN,
        description="Payment status",
    )


class PaymentResponse(BaseSchema):
    id: int
    amount: Decimal
    payment_date: datetime
    payment_method: Optional[str] = None
    payment_status: str


class EnrollmentCreate(BaseSchema):
    """
    Schema for enrolling a user in a course.

    Non-admin callers may only enroll themselves.
    """

    user_id: int = Field(..., ge=1, description="User to enroll")
    course_id: int = Field(..., ge=1, description="Course to enroll in")
    payment_status: str = Field(
        PaymentStatus.PENDING,
        pattern=PAYMENT_STATUS_PATTERN,
        description="Summary payment status",
    )
    payment: Optional[PaymentCreate] = Field(
        None,
        description="Optional initial payment",
    )


class EnrollmentResponse(BaseSchema):
    """Enrollment with denormalised course title and current payment."""

    id: int
    user_id: int
    course_id: int
    course_title: Optional[str] = Field(None, description="Title of the course")
    enrollment_date: datetime
    payment_status: str
    current_payment: Optional[PaymentResponse] = Field(
        None,
        description="Most recent payment, if any",
    )

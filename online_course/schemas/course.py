# ==============================================================================
# COURSE SCHEMAS - Catalogue
# ==============================================================================
# Request/Response schemas for courses, instructors and sessions
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from online_course.schemas.base import BaseSchema
from online_course.schemas.review import ReviewResponse


# ==============================================================================
# INSTRUCTORS & SESSIONS
# ==============================================================================

class InstructorResponse(BaseSchema):
    """Schema for instructor response."""

    id: int
    first_name: str
    last_name: str
    email: str
    bio: Optional[str] = None
    user_id: Optional[int] = None


class SessionDetailCreate(BaseSchema):
    """Schema for a course session supplied with a course."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Session title",
    )
    description: Optional[str] = Field(
        None,
        description="Session description",
    )
    video_url: Optional[str] = Field(
        None,
        max_length=500,
        description="Session video URL",
    )
    video_order: int = Field(
        0,
        ge=0,
        description="Display order",
    )


class SessionDetailResponse(SessionDetailCreate):
    """Schema for course session response."""

    id: int
    course_id: int


class UserRatingResponse(BaseSchema):
    """Aggregate rating of a course."""

    course_id: int
    average_rating: float = Field(..., description="Mean rating, 0 when unrated")
    total_ratings: int


# ==============================================================================
# COURSES
# ==============================================================================

class CourseCreate(BaseSchema):
    """Schema for creating a course."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Course title",
    )
    description: Optional[str] = Field(
        None,
        description="Course description",
    )
    price: Decimal = Field(
        Decimal("0.00"),
        ge=0,
        description="Course price",
    )
    course_type: str = Field(
        "Online",
        pattern="^(Online|Offline|Hybrid)$",
        description="Delivery type",
    )
    seats_available: Optional[int] = Field(
        None,
        ge=0,
        description="Remaining seats when limited",
    )
    duration: Decimal = Field(
        Decimal("0.00"),
        ge=0,
        description="Duration in hours",
    )
    category_id: int = Field(
        ...,
        ge=1,
        description="Owning category",
    )
    instructor_id: Optional[int] = Field(
        None,
        ge=1,
        description="Teaching instructor",
    )
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    thumbnail_url: Optional[str] = Field(
        None,
        max_length=500,
        description="Course thumbnail URL",
    )
    session_details: List[SessionDetailCreate] = Field(
        default_factory=list,
        description="Ordered course sessions",
    )

    @model_validator(mode="after")
    def check_schedule(self) -> "CourseCreate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class CourseUpdate(BaseSchema):
    """
    Schema for updating a course.

    ``id`` must match the route id. Omitted fields are left unchanged;
    a supplied ``session_details`` list replaces the existing sessions.
    """

    id: int = Field(..., description="Course identifier")
    title: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    course_type: Optional[str] = Field(None, pattern="^(Online|Offline|Hybrid)$")
    seats_available: Optional[int] = Field(None, ge=0)
    duration: Optional[Decimal] = Field(None, ge=0)
    category_id: Optional[int] = Field(None, ge=1)
    instructor_id: Optional[int] = Field(None, ge=1)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    thumbnail_url: Optional[str] = Field(None, max_length=500)
    session_details: Optional[List[SessionDetailCreate]] = None

    @field_validator(
        "title", "price", "course_type", "duration", "category_id", "session_details"
    )
    @classmethod
    def reject_null(cls, value, info):
        # Omitting a field leaves it unchanged; an explicit null is refused.
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value


class CourseResponse(BaseSchema):
    """Course as listed in the catalogue."""

    id: int
    title: str
    description: Optional[str] = None
    price: Decimal
    course_type: str
    seats_available: Optional[int] = None
    duration: Decimal
    category_id: int
    category_name: Optional[str] = None
    instructor_id: Optional[int] = None
    instructor: Optional[InstructorResponse] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    thumbnail_url: Optional[str] = None
    user_rating: UserRatingResponse


class CourseDetailResponse(CourseResponse):
    """Course with its sessions and reviews."""

    session_details: List[SessionDetailResponse] = Field(default_factory=list)
    reviews: List[ReviewResponse] = Field(default_factory=list)


class ThumbnailUploadResponse(BaseSchema):
    message: str
    thumbnail_url: str

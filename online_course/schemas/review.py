# ==============================================================================
# REVIEW SCHEMAS
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from online_course.schemas.base import BaseSchema


class ReviewCreate(BaseSchema):
    """Schema for posting a review."""

    course_id: int = Field(..., ge=1, description="Reviewed course")
    user_id: int = Field(..., ge=1, description="Reviewing user")
    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comments: Optional[str] = Field(
        None,
        max_length=4000,
        description="Review text",
    )


class ReviewUpdate(BaseSchema):
    """Schema for editing a review. ``id`` must match the route id."""

    id: int = Field(..., description="Review identifier")
    rating: Optional[int] = Field(None, ge=1, le=5)
    comments: Optional[str] = Field(None, max_length=4000)

    @field_validator("rating")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value


class ReviewResponse(BaseSchema):
    """Review with the reviewer's display name ("Last, First")."""

    id: int
    course_id: int
    user_id: int
    user_name: str = Field(..., description="Reviewer display name")
    rating: int
    comments: Optional[str] = None
    review_date: datetime

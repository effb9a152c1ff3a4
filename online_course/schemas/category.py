# ==============================================================================
# CATEGORY SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from online_course.schemas.base import BaseSchema


class CourseCategoryCreate(BaseSchema):
    """Schema for creating a course category."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=50,
        description="Category name",
    )
    description: Optional[str] = Field(
        None,
        max_length=250,
        description="Category description",
    )


class CourseCategoryUpdate(BaseSchema):
    """Schema for updating a course category."""

    name: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=250)

    @field_validator("name")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value


class CourseCategoryResponse(BaseSchema):
    """Schema for course category response."""

    id: int = Field(..., description="Category identifier")
    name: str = Field(..., description="Category name")
    description: Optional[str] = Field(None, description="Category description")

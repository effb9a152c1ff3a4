# ==============================================================================
# USER PROFILE SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from online_course.schemas.base import BaseSchema


class UserProfileCreate(BaseSchema):
    """Schema for registering a local user profile."""

    display_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Name shown in the UI",
    )
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., description="Unique email address")
    adobject_id: Optional[str] = Field(
        None,
        max_length=128,
        description="Identity provider object id",
    )
    bio: Optional[str] = Field(None, max_length=4000)


class UserProfileUpdate(BaseSchema):
    """Schema for updating a profile. Omitted fields are unchanged."""

    id: int = Field(..., description="User identifier")
    display_name: Optional[str] = Field(None, min_length=1, max_length=100)
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    bio: Optional[str] = Field(None, max_length=4000)

    @field_validator("display_name", "first_name", "last_name", "email")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value


class UserProfileResponse(BaseSchema):
    id: int
    display_name: str
    first_name: str
    last_name: str
    email: str
    adobject_id: Optional[str] = None
    bio: Optional[str] = None
    profile_picture_url: Optional[str] = None


class ProfileUpdateResult(BaseSchema):
    """Result of the multipart profile update."""

    message: str
    profile_picture_url: Optional[str] = None
    bio: Optional[str] = None

# ==============================================================================
# CONTACT SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field

from online_course.schemas.base import BaseSchema


class ContactMessage(BaseSchema):
    """Message submitted through the public contact form."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Sender name",
    )
    email: EmailStr = Field(..., description="Reply-to address")
    subject: Optional[str] = Field(None, max_length=200)
    message: str = Field(
        ...,
        min_length=1,
        max_length=5000,
        description="Message body",
    )

# ==============================================================================
# VIDEO REQUEST SCHEMAS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator

from online_course.schemas.base import BaseSchema


class VideoRequestCreate(BaseSchema):
    """Schema for requesting a video on a topic."""

    user_id: int = Field(..., ge=1, description="Requesting user")
    topic: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Requested topic",
    )
    sub_topic: Optional[str] = Field(None, max_length=200)
    short_title: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Short title of the request",
    )
    request_description: Optional[str] = Field(
        None,
        max_length=4000,
        description="What the video should cover",
    )


class VideoRequestUpdate(BaseSchema):
    """
    Schema for updating a video request.

    Owners edit the request text; admins usually fill in ``response``,
    ``video_urls`` and ``status``.
    """

    id: int = Field(..., description="Video request identifier")
    topic: Optional[str] = Field(None, min_length=1, max_length=200)
    sub_topic: Optional[str] = Field(None, max_length=200)
    short_title: Optional[str] = Field(None, min_length=1, max_length=200)
    request_description: Optional[str] = Field(None, max_length=4000)
    response: Optional[str] = Field(None, max_length=4000)
    video_urls: Optional[str] = Field(None, max_length=2000)
    status: Optional[str] = Field(
        None,
        pattern="^(Requested|Reviewed|In Progress|Completed)$",
    )

    @field_validator("topic", "short_title", "status")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value


class VideoRequestResponse(BaseSchema):
    """Video request with the requester's display name ("First, Last")."""

    id: int
    user_id: int
    user_name: str
    topic: str
    sub_topic: Optional[str] = None
    short_title: Optional[str] = None
    request_description: Optional[str] = None
    response: Optional[str] = None
    video_urls: Optional[str] = None
    status: str

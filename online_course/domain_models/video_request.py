# ==============================================================================
# VIDEO REQUEST MODEL - Requested Video Topics
# ==============================================================================

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from online_course.core.constants import VideoRequestStatus
from online_course.domain_models.base import SQLBase

if TYPE_CHECKING:
    from online_course.domain_models.user import User


class VideoRequest(SQLBase):
    """
    A user's request for a new video on a topic.

    Attributes:
        user_id: Requesting user
        topic / sub_topic / short_title: What the video should cover
        request_description: Free-text request
        response: Admin reply
        video_urls: Comma separated links once the video exists
        status: Workflow status label
    """

    __tablename__ = "video_requests"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    topic: Mapped[str] = mapped_column(String(200), nullable=False)
    sub_topic: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    short_title: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    request_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    response: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    video_urls: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(50),
        default=VideoRequestStatus.REQUESTED,
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="video_requests",
        lazy="joined",
    )

    def __repr__(self) -> str:
        return f"<VideoRequest(id={self.id}, topic={self.topic}, status={self.status})>"

# ==============================================================================
# FEEDBACK REPOSITORIES - Reviews and Video Requests
# ==============================================================================

from __future__ import annotations

from typing import List

from online_course.core.constants import APIConstants, DatabaseConstants
from online_course.database.repositories.base_repository import BaseRepository
from online_course.domain_models import Review, VideoRequest


class ReviewRepository(BaseRepository[Review]):
    collection_name = DatabaseConstants.REVIEWS_COLLECTION

    async def get_by_course(
        self,
        course_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[Review]:
        return await self.get_all(
            skip=skip,
            limit=limit,
            filters={"course_id": course_id},
            sort_by="review_date",
            sort_order="desc",
        )


class VideoRequestRepository(BaseRepository[VideoRequest]):
    collection_name = DatabaseConstants.VIDEO_REQUESTS_COLLECTION

    async def get_by_user(
        self,
        user_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[VideoRequest]:
        return await self.get_all(
            skip=skip,
            limit=limit,
            filters={"user_id": user_id},
        )

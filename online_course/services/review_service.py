# ==============================================================================
# REVIEW SERVICE
# ==============================================================================

from __future__ import annotations

from typing import List

from online_course.core.constants import APIConstants, ErrorMessages
from online_course.core.exceptions import NotFoundError
from online_course.database.repositories import (
    CourseRepository,
    ReviewRepository,
    UserRepository,
)
from online_course.mapping.profile import MappingProfile
from online_course.schemas.review import ReviewCreate, ReviewResponse, ReviewUpdate
from online_course.services.base_service import BaseService


class ReviewService(BaseService[ReviewCreate, ReviewUpdate, ReviewResponse]):
    """Course reviews; reviewer names render as "Last, First"."""

    response_model = ReviewResponse

    def __init__(
        self,
        repository: ReviewRepository,
        course_repository: CourseRepository,
        user_repository: UserRepository,
        mapper: MappingProfile,
    ) -> None:
        super().__init__(repository, mapper)
        self._reviews = repository
        self._courses = course_repository
        self._users = user_repository

    async def get_by_course(
        self,
        course_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[ReviewResponse]:
        entities = await self._reviews.get_by_course(course_id, skip=skip, limit=limit)
        return self._mapper.map_many(entities, ReviewResponse)

    async def get_by_user(
        self,
        user_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[ReviewResponse]:
        entities = await self._reviews.get_all(
            skip=skip,
            limit=limit,
            filters={"user_id": user_id},
        )
        return self._mapper.map_many(entities, ReviewResponse)

    async def create(self, schema: ReviewCreate) -> ReviewResponse:
        """
        Post a review.

        Raises:
            NotFoundError: If the course or the user does not exist
        """
        if not await self._courses.exists(schema.course_id):
            raise NotFoundError(
                message=ErrorMessages.COURSE_NOT_FOUND,
                resource_type="course",
                resource_id=schema.course_id,
            )
        if not await self._users.exists(schema.user_id):
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=schema.user_id,
            )
        return await super().create(schema)

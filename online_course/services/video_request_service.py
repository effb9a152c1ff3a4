# ==============================================================================
# VIDEO REQUEST SERVICE
# ==============================================================================

from __future__ import annotations

from typing import List

from online_course.core.constants import APIConstants, ErrorMessages
from online_course.core.exceptions import NotFoundError
from online_course.database.repositories import UserRepository, VideoRequestRepository
from online_course.mapping.profile import MappingProfile
from online_course.schemas.video_request import (
    VideoRequestCreate,
    VideoRequestResponse,
    VideoRequestUpdate,
)
from online_course.services.base_service import BaseService


class VideoRequestService(
    BaseService[VideoRequestCreate, VideoRequestUpdate, VideoRequestResponse]
):
    """Video topic requests; requester names render as "First, Last"."""

    response_model = VideoRequestResponse

    def __init__(
        self,
        repository: VideoRequestRepository,
        user_repository: UserRepository,
        mapper: MappingProfile,
    ) -> None:
        super().__init__(repository, mapper)
        self._video_requests = repository
        self._users = user_repository

    async def get_by_user(
        self,
        user_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[VideoRequestResponse]:
        entities = await self._video_requests.get_by_user(user_id, skip=skip, limit=limit)
        return self._mapper.map_many(entities, VideoRequestResponse)

    async def create(self, schema: VideoRequestCreate) -> VideoRequestResponse:
        """
        Record a video request in the Requested state.

        Raises:
            NotFoundError: If the requesting user does not exist
        """
        if not await self._users.exists(schema.user_id):
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=schema.user_id,
            )
        return await super().create(schema)

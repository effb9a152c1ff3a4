# ==============================================================================
# USER PROFILE SERVICE
# ==============================================================================
# Local profile data for users of the external identity provider
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from online_course.core.constants import ErrorMessages, StorageConstants
from online_course.core.exceptions import AlreadyExistsError, BadRequestError
from online_course.database.repositories import UserRepository
from online_course.integrations.blob_storage import BlobStorageService
from online_course.mapping.profile import MappingProfile
from online_course.schemas.user import (
    ProfileUpdateResult,
    UserProfileCreate,
    UserProfileResponse,
    UserProfileUpdate,
)
from online_course.services.base_service import BaseService
from online_course.utils.helpers import file_extension

logger = logging.getLogger(__name__)


def profile_picture_blob_name(user_id: int, file_name: str) -> str:
    """
    Blob name of a profile picture.

    Example:
        >>> profile_picture_blob_name(3, "me.jpeg")
        '3_profile_picture.jpeg'
    """
    return f"{user_id}{StorageConstants.PROFILE_PICTURE_SUFFIX}.{file_extension(file_name)}"


class UserProfileService(
    BaseService[UserProfileCreate, UserProfileUpdate, UserProfileResponse]
):
    """
    User profile service.

    Features:
        - Unique email per profile
        - Profile picture upload to blob storage
        - Bio updates
    """

    response_model = UserProfileResponse

    def __init__(
        self,
        repository: UserRepository,
        mapper: MappingProfile,
        blob_storage: Optional[BlobStorageService] = None,
    ) -> None:
        super().__init__(repository, mapper)
        self._users = repository
        self._blob_storage = blob_storage

    async def _ensure_email_free(self, email: str, user_id: Optional[int] = None) -> None:
        existing = await self._users.get_by_email(email)
        if existing and existing.id != user_id:
            raise AlreadyExistsError(
                message="Email already registered",
                resource_type="user",
            )

    async def create(self, schema: UserProfileCreate) -> UserProfileResponse:
        """
        Register a profile.

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        await self._ensure_email_free(schema.email)
        return await super().create(schema)

    async def update(
        self,
        id: int,
        schema: UserProfileUpdate,
    ) -> Optional[UserProfileResponse]:
        if schema.email is not None:
            await self._ensure_email_free(schema.email, user_id=id)
        return await super().update(id, schema)

    async def get_by_email(self, email: str) -> Optional[UserProfileResponse]:
        entity = await self._users.get_by_email(email)
        return self._to_response(entity) if entity else None

    async def update_profile(
        self,
        user_id: int,
        bio: Optional[str] = None,
        picture: Optional[bytes] = None,
        picture_name: Optional[str] = None,
    ) -> Optional[ProfileUpdateResult]:
        """
        Update the profile picture and/or bio.

        Each part is applied only when supplied.

        Args:
            user_id: Profile owner
            bio: New biography
            picture: Picture bytes
            picture_name: Original picture file name, its extension is kept

        Returns:
            Result with the stored picture URL, None if the user does not exist

        Raises:
            BadRequestError: If an empty picture is supplied
        """
        if not await self._users.exists(user_id):
            return None

        changes: Dict[str, Any] = {}
        picture_url: Optional[str] = None

        if picture is not None:
            if not picture:
                raise BadRequestError(message=ErrorMessages.EMPTY_FILE)
            if self._blob_storage is None:
                raise RuntimeError("UserProfileService was built without blob storage")
            picture_url = await self._blob_storage.upload(
                picture,
                profile_picture_blob_name(user_id, picture_name or ""),
                StorageConstants.PROFILE_PICTURE_CONTAINER,
            )
            changes["profile_picture_url"] = picture_url

        if bio is not None:
            changes["bio"] = bio

        if changes:
            await self._users.update(user_id, changes)
            logger.info(f"Profile updated for user id={user_id}: {sorted(changes)}")

        return ProfileUpdateResult(
            message="Profile updated successfully",
            profile_picture_url=picture_url,
            bio=bio,
        )

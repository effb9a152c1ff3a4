# ==============================================================================
# USER REPOSITORY
# ==============================================================================

from __future__ import annotations

from typing import Optional

from online_course.core.constants import DatabaseConstants
from online_course.database.repositories.base_repository import BaseRepository
from online_course.domain_models import User


class UserRepository(BaseRepository[User]):
    collection_name = DatabaseConstants.USERS_COLLECTION

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self.find_one({"email": email})

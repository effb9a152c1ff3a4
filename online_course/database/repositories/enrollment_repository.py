# ==============================================================================
# ENROLLMENT REPOSITORY
# ==============================================================================

from __future__ import annotations

from typing import List, Optional

from online_course.core.constants import APIConstants, DatabaseConstants
from online_course.database.repositories.base_repository import BaseRepository
from online_course.domain_models import Enrollment


class EnrollmentRepository(BaseRepository[Enrollment]):
    """Enrollments; (user_id, course_id) is unique in the database."""

    collection_name = DatabaseConstants.ENROLLMENTS_COLLECTION

    async def get_by_user(
        self,
        user_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[Enrollment]:
        return await self.get_all(
            skip=skip,
            limit=limit,
            filters={"user_id": user_id},
            sort_by="enrollment_date",
        )

    async def find_by_user_and_course(
        self,
        user_id: int,
        course_id: int,
    ) -> Optional[Enrollment]:
        return await self.find_one({"user_id": user_id, "course_id": course_id})

# ==============================================================================
# CATALOGUE REPOSITORIES - Categories, Courses, Instructors
# ==============================================================================

from __future__ import annotations

from typing import List

from online_course.core.constants import APIConstants, DatabaseConstants
from online_course.database.repositories.base_repository import BaseRepository
from online_course.domain_models import Course, CourseCategory, Instructor


class CourseCategoryRepository(BaseRepository[CourseCategory]):
    collection_name = DatabaseConstants.COURSE_CATEGORIES_COLLECTION


class CourseRepository(BaseRepository[Course]):
    collection_name = DatabaseConstants.COURSES_COLLECTION

    async def get_by_category(
        self,
        category_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[Course]:
        """List the courses of one category."""
        return await self.get_all(
            skip=skip,
            limit=limit,
            filters={"category_id": category_id},
        )


class InstructorRepository(BaseRepository[Instructor]):
    collection_name = DatabaseConstants.INSTRUCTORS_COLLECTION

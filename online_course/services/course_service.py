# ==============================================================================
# COURSE SERVICE - Catalogue Management
# ==============================================================================
# Course reads, admin maintenance, instructors and thumbnail upload
# ==============================================================================

from __future__ import annotations

import logging
from typing import List, Optional

from online_course.core.constants import APIConstants, ErrorMessages, StorageConstants
from online_course.core.exceptions import BadRequestError, NotFoundError
from online_course.database.repositories import (
    CourseCategoryRepository,
    CourseRepository,
    InstructorRepository,
)
from online_course.integrations.blob_storage import BlobStorageService
from online_course.mapping.profile import MappingProfile
from online_course.schemas.course import (
    CourseCreate,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdate,
    InstructorResponse,
)
from online_course.services.base_service import BaseService
from online_course.utils.helpers import blob_safe_name, file_extension

logger = logging.getLogger(__name__)


def thumbnail_blob_name(course_id: int, title: str, file_name: str) -> str:
    """
    Blob name of a course thumbnail.

    Example:
        >>> thumbnail_blob_name(7, " Intro to SQL ", "cover.png")
        '7_Intro_to_SQL.png'
    """
    return f"{course_id}_{blob_safe_name(title)}.{file_extension(file_name)}"


class CourseService(BaseService[CourseCreate, CourseUpdate, CourseResponse]):
    """
    Course catalogue service.

    Lists return :class:`CourseResponse`; single-course reads and writes
    return :class:`CourseDetailResponse` with sessions and reviews.
    """

    response_model = CourseResponse

    def __init__(
        self,
        repository: CourseRepository,
        category_repository: CourseCategoryRepository,
        instructor_repository: InstructorRepository,
        mapper: MappingProfile,
        blob_storage: Optional[BlobStorageService] = None,
    ) -> None:
        super().__init__(repository, mapper)
        self._courses = repository
        self._categories = category_repository
        self._instructors = instructor_repository
        self._blob_storage = blob_storage

    def _to_detail(self, entity) -> CourseDetailResponse:
        return self._mapper.map(entity, CourseDetailResponse)

    async def _check_references(
        self,
        category_id: Optional[int],
        instructor_id: Optional[int],
    ) -> None:
        if category_id is not None and not await self._categories.exists(category_id):
            raise NotFoundError(
                message="Category not found",
                resource_type="course_category",
                resource_id=category_id,
            )
        if instructor_id is not None and not await self._instructors.exists(instructor_id):
            raise NotFoundError(
                message="Instructor not found",
                resource_type="instructor",
                resource_id=instructor_id,
            )

    # ==========================================================================
    # READS
    # ==========================================================================

    async def get_by_category(
        self,
        category_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[CourseResponse]:
        entities = await self._courses.get_by_category(category_id, skip=skip, limit=limit)
        return self._mapper.map_many(entities, CourseResponse)

    async def get_detail(self, course_id: int) -> Optional[CourseDetailResponse]:
        """
        Course with its ordered sessions, reviews and rating summary.

        Returns:
            Detail model, or None when the course does not exist
        """
        entity = await self._courses.get_by_id(course_id)
        return self._to_detail(entity) if entity else None

    async def get_instructors(self) -> List[InstructorResponse]:
        entities = await self._instructors.get_all(limit=APIConstants.MAX_QUERY_LIMIT)
        return self._mapper.map_many(entities, InstructorResponse)

    # ==========================================================================
    # WRITES
    # ==========================================================================

    async def create(self, schema: CourseCreate) -> CourseDetailResponse:
        """
        Create a course together with its sessions.

        Raises:
            NotFoundError: If the category or instructor does not exist
        """
        await self._check_references(schema.category_id, schema.instructor_id)
        entity = await self._courses.create(self._mapper.map(schema, dict))
        logger.info(f"Created course id={entity.id} title='{entity.title}'")
        return self._to_detail(entity)

    async def update(
        self,
        id: int,
        schema: CourseUpdate,
    ) -> Optional[CourseDetailResponse]:
        """
        Update a course. A supplied session list replaces the stored one.

        Returns:
            Updated course, None if not found

        Raises:
            NotFoundError: If a referenced category or instructor does not exist
            BadRequestError: If the resulting end date precedes the start date
        """
        existing = await self._courses.get_by_id(id)
        if existing is None:
            return None

        await self._check_references(schema.category_id, schema.instructor_id)

        supplied = schema.model_fields_set
        start = schema.start_date if "start_date" in supplied else existing.start_date
        end = schema.end_date if "end_date" in supplied else existing.end_date
        if start and end and end < start:
            raise BadRequestError(message="end_date must not be before start_date")

        entity = await self._courses.update(id, self._mapper.map(schema, dict))
        if entity is None:
            return None
        logger.info(f"Updated course id={id}")
        return self._to_detail(entity)

    async def upload_thumbnail(
        self,
        course_id: int,
        content: bytes,
        file_name: str,
    ) -> Optional[str]:
        """
        Store a thumbnail image and point the course at it.

        Args:
            course_id: Course receiving the thumbnail
            content: Image bytes
            file_name: Original file name, its extension is kept

        Returns:
            Stored thumbnail URL, or None when the course does not exist

        Raises:
            BadRequestError: If the file is empty (storage is not called)
        """
        if not content:
            raise BadRequestError(message=ErrorMessages.EMPTY_FILE)

        course = await self._courses.get_by_id(course_id)
        if course is None:
            return None

        if self._blob_storage is None:
            raise RuntimeError("CourseService was built without blob storage")

        blob_name = thumbnail_blob_name(course_id, course.title, file_name)
        url = await self._blob_storage.upload(
            content,
            blob_name,
            StorageConstants.COURSE_PREVIEW_CONTAINER,
        )
        await self._courses.update(course_id, {"thumbnail_url": url})
        logger.info(f"Thumbnail uploaded for course id={course_id}: {blob_name}")
        return url

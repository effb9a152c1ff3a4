# ==============================================================================
# COURSE CATEGORY SERVICE
# ==============================================================================

from __future__ import annotations

from online_course.database.repositories import CourseCategoryRepository
from online_course.mapping.profile import MappingProfile
from online_course.schemas.category import (
    CourseCategoryCreate,
    CourseCategoryResponse,
    CourseCategoryUpdate,
)
from online_course.services.base_service import BaseService


class CourseCategoryService(
    BaseService[CourseCategoryCreate, CourseCategoryUpdate, CourseCategoryResponse]
):
    """Category reads and admin maintenance."""

    response_model = CourseCategoryResponse

    def __init__(
        self,
        repository: CourseCategoryRepository,
        mapper: MappingProfile,
    ) -> None:
        super().__init__(repository, mapper)

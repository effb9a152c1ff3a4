# ==============================================================================
# ENROLLMENT SERVICE - Course Enrollment
# ==============================================================================
# One enrollment per (user, course). The pre-check gives callers a clear
# error; the database UNIQUE constraint decides concurrent requests.
# ==============================================================================

from __future__ import annotations

import logging
from typing import List, Optional

from online_course.core.constants import APIConstants, ErrorMessages, PaymentStatus
from online_course.core.exceptions import (
    DuplicateEnrollmentError,
    IntegrityViolationError,
    NotFoundError,
)
from online_course.database.repositories import (
    CourseRepository,
    EnrollmentRepository,
    UserRepository,
)
from online_course.mapping.profile import MappingProfile
from online_course.schemas.enrollment import (
    EnrollmentCreate,
    EnrollmentResponse,
    PaymentCreate,
)
from online_course.services.base_service import BaseService

logger = logging.getLogger(__name__)


class EnrollmentService(BaseService[EnrollmentCreate, EnrollmentCreate, EnrollmentResponse]):
    """
    Enrollment service.

    Features:
        - Duplicate enrollments rejected with ``DuplicateEnrollmentError``
        - Optional initial payment stored with the enrollment
        - Responses carry the course title and the most recent payment
    """

    response_model = EnrollmentResponse

    def __init__(
        self,
        repository: EnrollmentRepository,
        course_repository: CourseRepository,
        user_repository: UserRepository,
        mapper: MappingProfile,
    ) -> None:
        super().__init__(repository, mapper)
        self._enrollments = repository
        self._courses = course_repository
        self._users = user_repository

    async def enroll(
        self,
        user_id: int,
        course_id: int,
        payment_status: str = PaymentStatus.PENDING,
        payment: Optional[PaymentCreate] = None,
    ) -> EnrollmentResponse:
        """
        Enroll a user in a course.

        Args:
            user_id: User to enroll
            course_id: Course to enroll in
            payment_status: Summary payment status
            payment: Optional initial payment

        Returns:
            The new enrollment

        Raises:
            NotFoundError: If the course or user does not exist
            DuplicateEnrollmentError: If the pair is already enrolled,
                including when a concurrent request inserted it first
        """
        if not await self._courses.exists(course_id):
            raise NotFoundError(
                message=ErrorMessages.COURSE_NOT_FOUND,
                resource_type="course",
                resource_id=course_id,
            )
        if not await self._users.exists(user_id):
            raise NotFoundError(
                message=ErrorMessages.USER_NOT_FOUND,
                resource_type="user",
                resource_id=user_id,
            )

        if await self._enrollments.find_by_user_and_course(user_id, course_id):
            logger.warning(
                f"Duplicate enrollment rejected: user={user_id} course={course_id}"
            )
            raise DuplicateEnrollmentError(user_id=user_id, course_id=course_id)

        schema = EnrollmentCreate(
            user_id=user_id,
            course_id=course_id,
            payment_status=payment_status,
            payment=payment,
        )
        try:
            entity = await self._enrollments.create(self._mapper.map(schema, dict))
        except IntegrityViolationError:
            # Lost the race against a concurrent enroll for the same pair
            if await self._enrollments.find_by_user_and_course(user_id, course_id):
                logger.warning(
                    f"Concurrent duplicate enrollment rejected: "
                    f"user={user_id} course={course_id}"
                )
                raise DuplicateEnrollmentError(user_id=user_id, course_id=course_id)
            raise

        logger.info(
            f"Enrollment created id={entity.id} user={user_id} course={course_id}"
        )
        return self._to_response(entity)

    async def create(self, schema: EnrollmentCreate) -> EnrollmentResponse:
        return await self.enroll(
            schema.user_id,
            schema.course_id,
            payment_status=schema.payment_status,
            payment=schema.payment,
        )

    async def get_by_user(
        self,
        user_id: int,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[EnrollmentResponse]:
        """All enrollments of a user, oldest first (possibly empty)."""
        entities = await self._enrollments.get_by_user(user_id, skip=skip, limit=limit)
        return self._mapper.map_many(entities, EnrollmentResponse)

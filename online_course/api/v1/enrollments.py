# ==============================================================================
# ENROLLMENT ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from online_course.api.dependencies import (
    EnrollmentServiceDep,
    ReadScope,
    WriteScope,
    ensure_can_act_for,
)
from online_course.schemas.enrollment import EnrollmentCreate, EnrollmentResponse

router = APIRouter(prefix="/enrollment", tags=["Enrollments"])


@router.post(
    "",
    response_model=EnrollmentResponse,
    summary="Enroll in a course",
    description=(
        "Creates the enrollment, with an optional initial payment. "
        "Returns 400 when the user is already enrolled in the course."
    ),
)
async def enroll(
    schema: EnrollmentCreate,
    principal: WriteScope,
    service: EnrollmentServiceDep,
) -> EnrollmentResponse:
    ensure_can_act_for(principal, schema.user_id)
    return await service.create(schema)


@router.get(
    "/user/{user_id}",
    response_model=List[EnrollmentResponse],
    summary="List a user's enrollments",
)
async def list_user_enrollments(
    user_id: int,
    principal: ReadScope,
    service: EnrollmentServiceDep,
) -> List[EnrollmentResponse]:
    ensure_can_act_for(principal, user_id)
    return await service.get_by_user(user_id)


@router.get(
    "/{enrollment_id}",
    response_model=EnrollmentResponse,
    summary="Get enrollment",
)
async def get_enrollment(
    enrollment_id: int,
    principal: ReadScope,
    service: EnrollmentServiceDep,
) -> EnrollmentResponse:
    enrollment = await service.get_by_id(enrollment_id)
    if enrollment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Enrollment not found",
        )
    ensure_can_act_for(principal, enrollment.user_id)
    return enrollment

# ==============================================================================
# COURSE ENDPOINTS - Catalogue
# ==============================================================================
# Anonymous catalogue reads, admin maintenance and thumbnail upload
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from online_course.api.dependencies import (
    AdminPrincipal,
    CourseServiceDep,
    ReadScope,
    WriteScope,
)
from online_course.core.constants import ErrorMessages
from online_course.core.exceptions import BadRequestError
from online_course.schemas.course import (
    CourseCreate,
    CourseDetailResponse,
    CourseResponse,
    CourseUpdate,
    InstructorResponse,
    ThumbnailUploadResponse,
)

router = APIRouter(prefix="/course", tags=["Courses"])


def _course_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=ErrorMessages.COURSE_NOT_FOUND,
    )


# ==============================================================================
# CATALOGUE READS
# ==============================================================================

@router.get(
    "",
    response_model=List[CourseResponse],
    summary="List courses",
)
async def list_courses(service: CourseServiceDep) -> List[CourseResponse]:
    return await service.get_all()


@router.get(
    "/category/{category_id}",
    response_model=List[CourseResponse],
    summary="List courses of a category",
)
async def list_courses_by_category(
    category_id: int,
    service: CourseServiceDep,
) -> List[CourseResponse]:
    return await service.get_by_category(category_id)


@router.get(
    "/detail/{course_id}",
    response_model=CourseDetailResponse,
    summary="Course detail",
    description="Course with its sessions, reviews and rating summary.",
)
async def get_course_detail(
    course_id: int,
    service: CourseServiceDep,
) -> CourseDetailResponse:
    course = await service.get_detail(course_id)
    if course is None:
        raise _course_not_found()
    return course


@router.get(
    "/instructors",
    response_model=List[InstructorResponse],
    summary="List instructors",
)
async def list_instructors(
    _: ReadScope,
    service: CourseServiceDep,
) -> List[InstructorResponse]:
    return await service.get_instructors()


@router.get(
    "/{course_id}",
    response_model=CourseDetailResponse,
    summary="Get course",
)
async def get_course(
    course_id: int,
    service: CourseServiceDep,
) -> CourseDetailResponse:
    course = await service.get_detail(course_id)
    if course is None:
        raise _course_not_found()
    return course


# ==============================================================================
# ADMIN MAINTENANCE
# ==============================================================================

@router.post(
    "",
    response_model=CourseDetailResponse,
    summary="Create course",
    description="Administrators only; requires the write scope.",
)
async def create_course(
    schema: CourseCreate,
    admin: AdminPrincipal,
    _: WriteScope,
    service: CourseServiceDep,
) -> CourseDetailResponse:
    return await service.create(schema)


@router.put(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update course",
)
async def update_course(
    course_id: int,
    schema: CourseUpdate,
    admin: AdminPrincipal,
    _: WriteScope,
    service: CourseServiceDep,
) -> None:
    if schema.id != course_id:
        raise BadRequestError(message=ErrorMessages.ID_MISMATCH)
    if await service.update(course_id, schema) is None:
        raise _course_not_found()


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete course",
)
async def delete_course(
    course_id: int,
    admin: AdminPrincipal,
    _: WriteScope,
    service: CourseServiceDep,
) -> None:
    await service.delete(course_id)


@router.post(
    "/upload-thumbnail",
    response_model=ThumbnailUploadResponse,
    summary="Upload course thumbnail",
    description=(
        "Multipart form with `courseId` and `file`. The image is stored as "
        "`{courseId}_{Title_With_Underscores}.{ext}` in the course-preview container."
    ),
)
async def upload_thumbnail(
    admin: AdminPrincipal,
    service: CourseServiceDep,
    course_id: int = Form(..., alias="courseId"),
    file: UploadFile = File(...),
) -> ThumbnailUploadResponse:
    content = await file.read()
    if not content:
        raise BadRequestError(message=ErrorMessages.EMPTY_FILE)

    url = await service.upload_thumbnail(course_id, content, file.filename or "")
    if url is None:
        raise _course_not_found()

    return ThumbnailUploadResponse(
        message="Thumbnail uploaded successfully",
        thumbnail_url=url,
    )

# ==============================================================================
# REVIEW ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from online_course.api.dependencies import (
    CurrentPrincipal,
    ReviewServiceDep,
    ensure_can_act_for,
)
from online_course.core.constants import ErrorMessages
from online_course.core.exceptions import BadRequestError
from online_course.schemas.review import ReviewCreate, ReviewResponse, ReviewUpdate

router = APIRouter(prefix="/review", tags=["Reviews"])


def _review_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Review not found",
    )


@router.get(
    "/course/{course_id}",
    response_model=List[ReviewResponse],
    summary="List reviews of a course",
)
async def list_course_reviews(
    course_id: int,
    principal: CurrentPrincipal,
    service: ReviewServiceDep,
) -> List[ReviewResponse]:
    return await service.get_by_course(course_id)


@router.get(
    "/user/{user_id}",
    response_model=List[ReviewResponse],
    summary="List reviews written by a user",
)
async def list_user_reviews(
    user_id: int,
    principal: CurrentPrincipal,
    service: ReviewServiceDep,
) -> List[ReviewResponse]:
    return await service.get_by_user(user_id)


@router.get(
    "/{review_id}",
    response_model=ReviewResponse,
    summary="Get review",
)
async def get_review(
    review_id: int,
    principal: CurrentPrincipal,
    service: ReviewServiceDep,
) -> ReviewResponse:
    review = await service.get_by_id(review_id)
    if review is None:
        raise _review_not_found()
    return review


@router.post(
    "",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post review",
)
async def create_review(
    schema: ReviewCreate,
    principal: CurrentPrincipal,
    service: ReviewServiceDep,
) -> ReviewResponse:
    ensure_can_act_for(principal, schema.user_id)
    return await service.create(schema)


@router.put(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update review",
)
async def update_review(
    review_id: int,
    schema: ReviewUpdate,
    principal: CurrentPrincipal,
    service: ReviewServiceDep,
) -> None:
    if schema.id != review_id:
        raise BadRequestError(message=ErrorMessages.ID_MISMATCH)

    review = await service.get_by_id(review_id)
    if review is None:
        raise _review_not_found()
    ensure_can_act_for(principal, review.user_id)

    await service.update(review_id, schema)


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete review",
)
async def delete_review(
    review_id: int,
    principal: CurrentPrincipal,
    service: ReviewServiceDep,
) -> None:
    review = await service.get_by_id(review_id)
    if review is None:
        return
    ensure_can_act_for(principal, review.user_id)
    await service.delete(review_id)

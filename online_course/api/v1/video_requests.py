# ==============================================================================
# VIDEO REQUEST ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from online_course.api.dependencies import (
    ReadScope,
    VideoRequestServiceDep,
    WriteScope,
    ensure_can_act_for,
)
from online_course.core.constants import ErrorMessages
from online_course.core.exceptions import AuthorizationError, BadRequestError
from online_course.core.settings import settings
from online_course.schemas.video_request import (
    VideoRequestCreate,
    VideoRequestResponse,
    VideoRequestUpdate,
)

router = APIRouter(prefix="/videorequest", tags=["Video Requests"])


def _video_request_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Video request not found",
    )


@router.get(
    "",
    response_model=List[VideoRequestResponse],
    summary="List video requests",
    description="Administrators see every request; other callers see their own.",
)
async def list_video_requests(
    principal: ReadScope,
    service: VideoRequestServiceDep,
) -> List[VideoRequestResponse]:
    if principal.is_admin:
        return await service.get_all()
    return await service.get_by_user(principal.user_id)


@router.get(
    "/user/{user_id}",
    response_model=List[VideoRequestResponse],
    summary="List a user's video requests",
)
async def list_user_video_requests(
    user_id: int,
    principal: ReadScope,
    service: VideoRequestServiceDep,
) -> List[VideoRequestResponse]:
    ensure_can_act_for(principal, user_id)
    return await service.get_by_user(user_id)


@router.get(
    "/{video_request_id}",
    response_model=VideoRequestResponse,
    summary="Get video request",
)
async def get_video_request(
    video_request_id: int,
    principal: ReadScope,
    service: VideoRequestServiceDep,
) -> VideoRequestResponse:
    video_request = await service.get_by_id(video_request_id)
    if video_request is None:
        raise _video_request_not_found()
    ensure_can_act_for(principal, video_request.user_id)
    return video_request


@router.post(
    "",
    response_model=VideoRequestResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Request a video",
)
async def create_video_request(
    schema: VideoRequestCreate,
    principal: WriteScope,
    service: VideoRequestServiceDep,
) -> VideoRequestResponse:
    ensure_can_act_for(principal, schema.user_id)
    return await service.create(schema)


@router.put(
    "/{video_request_id}",
    response_model=VideoRequestResponse,
    summary="Update video request",
)
async def update_video_request(
    video_request_id: int,
    schema: VideoRequestUpdate,
    principal: WriteScope,
    service: VideoRequestServiceDep,
) -> VideoRequestResponse:
    if schema.id != video_request_id:
        raise BadRequestError(message=ErrorMessages.ID_MISMATCH)

    existing = await service.get_by_id(video_request_id)
    if existing is None:
        raise _video_request_not_found()
    ensure_can_act_for(principal, existing.user_id)

    # Responding to a request is an administrator action
    answered_fields = {"response", "video_urls", "status"} & schema.model_fields_set
    if answered_fields and not principal.is_admin:
        raise AuthorizationError(
            message=ErrorMessages.ADMIN_REQUIRED,
            required_permission=settings.ADMIN_ROLE,
        )

    updated = await service.update(video_request_id, schema)
    if updated is None:
        raise _video_request_not_found()
    return updated


@router.delete(
    "/{video_request_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete video request",
)
async def delete_video_request(
    video_request_id: int,
    principal: WriteScope,
    service: VideoRequestServiceDep,
) -> None:
    existing = await service.get_by_id(video_request_id)
    if existing is None:
        return
    ensure_can_act_for(principal, existing.user_id)
    await service.delete(video_request_id)

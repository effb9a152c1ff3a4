# ==============================================================================
# USER PROFILE ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status

from online_course.api.dependencies import (
    AdminPrincipal,
    CurrentPrincipal,
    UserProfileServiceDep,
    ensure_can_act_for,
)
from online_course.core.constants import ErrorMessages
from online_course.core.exceptions import BadRequestError
from online_course.schemas.user import (
    ProfileUpdateResult,
    UserProfileCreate,
    UserProfileResponse,
    UserProfileUpdate,
)

router = APIRouter(prefix="/userprofile", tags=["User Profiles"])


def _user_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=ErrorMessages.USER_NOT_FOUND,
    )


@router.get(
    "/{user_id}",
    response_model=UserProfileResponse,
    summary="Get user profile",
)
async def get_user_profile(
    user_id: int,
    principal: CurrentPrincipal,
    service: UserProfileServiceDep,
) -> UserProfileResponse:
    ensure_can_act_for(principal, user_id)
    profile = await service.get_by_id(user_id)
    if profile is None:
        raise _user_not_found()
    return profile


@router.post(
    "",
    response_model=UserProfileResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register user profile",
    description="Links a local profile to an identity provider account.",
)
async def create_user_profile(
    schema: UserProfileCreate,
    admin: AdminPrincipal,
    service: UserProfileServiceDep,
) -> UserProfileResponse:
    return await service.create(schema)


@router.post(
    "/updateProfile",
    response_model=ProfileUpdateResult,
    summary="Update profile picture and bio",
    description=(
        "Multipart form with `userId`, optional `bio` and optional `picture`. "
        "The picture is stored as `{userId}_profile_picture.{ext}`."
    ),
)
async def update_profile(
    principal: CurrentPrincipal,
    service: UserProfileServiceDep,
    user_id: int = Form(..., alias="userId"),
    bio: Optional[str] = Form(None),
    picture: Optional[UploadFile] = File(None),
) -> ProfileUpdateResult:
    ensure_can_act_for(principal, user_id)

    content: Optional[bytes] = None
    picture_name: Optional[str] = None
    if picture is not None:
        content = await picture.read()
        picture_name = picture.filename

    result = await service.update_profile(
        user_id,
        bio=bio,
        picture=content,
        picture_name=picture_name,
    )
    if result is None:
        raise _user_not_found()
    return result


@router.put(
    "/{user_id}",
    response_model=UserProfileResponse,
    summary="Update user profile",
)
async def update_user_profile(
    user_id: int,
    schema: UserProfileUpdate,
    principal: CurrentPrincipal,
    service: UserProfileServiceDep,
) -> UserProfileResponse:
    if schema.id != user_id:
        raise BadRequestError(message=ErrorMessages.ID_MISMATCH)
    ensure_can_act_for(principal, user_id)

    profile = await service.update(user_id, schema)
    if profile is None:
        raise _user_not_found()
    return profile


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user profile",
)
async def delete_user_profile(
    user_id: int,
    admin: AdminPrincipal,
    service: UserProfileServiceDep,
) -> None:
    await service.delete(user_id)

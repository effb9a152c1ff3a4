# ==============================================================================
# USER ADMIN ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query

from online_course.api.dependencies import AdminPrincipal, ReadScope, UserProfileServiceDep
from online_course.core.constants import APIConstants
from online_course.schemas.user import UserProfileResponse

router = APIRouter(prefix="/useradmin", tags=["User Admin"])


@router.get(
    "",
    response_model=List[UserProfileResponse],
    summary="List all users",
    description="Administrators only; requires the read scope.",
)
async def list_users(
    admin: AdminPrincipal,
    _: ReadScope,
    service: UserProfileServiceDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(APIConstants.DEFAULT_QUERY_LIMIT, ge=1, le=APIConstants.MAX_QUERY_LIMIT),
) -> List[UserProfileResponse]:
    return await service.get_all(skip=skip, limit=limit)

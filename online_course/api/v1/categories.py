# ==============================================================================
# CATEGORY ENDPOINTS
# ==============================================================================

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from online_course.api.dependencies import AdminPrincipal, CategoryServiceDep, WriteScope
from online_course.core.constants import APIConstants
from online_course.schemas.category import (
    CourseCategoryCreate,
    CourseCategoryResponse,
    CourseCategoryUpdate,
)

router = APIRouter(prefix="/category", tags=["Categories"])


@router.get(
    "",
    response_model=List[CourseCategoryResponse],
    summary="List categories",
)
async def list_categories(
    service: CategoryServiceDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(APIConstants.DEFAULT_QUERY_LIMIT, ge=1, le=APIConstants.MAX_QUERY_LIMIT),
) -> List[CourseCategoryResponse]:
    return await service.get_all(skip=skip, limit=limit)


@router.get(
    "/{category_id}",
    response_model=CourseCategoryResponse,
    summary="Get category",
)
async def get_category(
    category_id: int,
    service: CategoryServiceDep,
) -> CourseCategoryResponse:
    category = await service.get_by_id(category_id)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return category


@router.post(
    "",
    response_model=CourseCategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    description="Administrators only; requires the write scope.",
)
async def create_category(
    schema: CourseCategoryCreate,
    admin: AdminPrincipal,
    _: WriteScope,
    service: CategoryServiceDep,
) -> CourseCategoryResponse:
    return await service.create(schema)


@router.put(
    "/{category_id}",
    response_model=CourseCategoryResponse,
    summary="Update category",
)
async def update_category(
    category_id: int,
    schema: CourseCategoryUpdate,
    admin: AdminPrincipal,
    _: WriteScope,
    service: CategoryServiceDep,
) -> CourseCategoryResponse:
    category = await service.update(category_id, schema)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found",
        )
    return category


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete category",
    description="Fails with 409 while courses still reference the category.",
)
async def delete_category(
    category_id: int,
    admin: AdminPrincipal,
    _: WriteScope,
    service: CategoryServiceDep,
) -> None:
    await service.delete(category_id)

# ==============================================================================
# MAIN API ROUTER - Route Aggregation
# ==============================================================================

from __future__ import annotations

from fastapi import APIRouter

from online_course.core.settings import settings
from online_course.api.v1 import (
    categories_router,
    contact_router,
    courses_router,
    enrollments_router,
    reviews_router,
    user_admin_router,
    user_profiles_router,
    video_requests_router,
)

# Create main API router
api_router = APIRouter()

# Include resource routers under the API prefix
api_router.include_router(categories_router, prefix=settings.API_PREFIX)
api_router.include_router(courses_router, prefix=settings.API_PREFIX)
api_router.include_router(enrollments_router, prefix=settings.API_PREFIX)
api_router.include_router(reviews_router, prefix=settings.API_PREFIX)
api_router.include_router(video_requests_router, prefix=settings.API_PREFIX)
api_router.include_router(user_profiles_router, prefix=settings.API_PREFIX)
api_router.include_router(user_admin_router, prefix=settings.API_PREFIX)
api_router.include_router(contact_router, prefix=settings.API_PREFIX)

# ==============================================================================
# API V1 ENDPOINTS PACKAGE
# ==============================================================================

"""
API V1 Endpoints
================

One router per resource.
"""

from online_course.api.v1.categories import router as categories_router
from online_course.api.v1.courses import router as courses_router
from online_course.api.v1.enrollments import router as enrollments_router
from online_course.api.v1.reviews import router as reviews_router
from online_course.api.v1.video_requests import router as video_requests_router
from online_course.api.v1.user_profiles import router as user_profiles_router
from online_course.api.v1.user_admin import router as user_admin_router
from online_course.api.v1.contact import router as contact_router

__all__ = [
    "categories_router",
    "courses_router",
    "enrollments_router",
    "reviews_router",
    "video_requests_router",
    "user_profiles_router",
    "user_admin_router",
    "contact_router",
]

# ==============================================================================
# SCHEMAS PACKAGE INITIALIZATION
# ==============================================================================

"""
Pydantic Schemas
================

Request/Response validation schemas for API endpoints:
- Base: Response envelope and health report
- Category / Course: Catalogue schemas
- Enrollment: Enrollment and payment schemas
- Review / VideoRequest: Learner feedback schemas
- User: Profile schemas
- Contact: Contact form
"""

from online_course.schemas.base import (
    BaseSchema,
    APIResponse,
    HealthCheckEntry,
    HealthResponse,
)
from online_course.schemas.category import (
    CourseCategoryCreate,
    CourseCategoryUpdate,
    CourseCategoryResponse,
)
from online_course.schemas.course import (
    InstructorResponse,
    SessionDetailCreate,
    SessionDetailResponse,
    UserRatingResponse,
    CourseCreate,
    CourseUpdate,
    CourseResponse,
    CourseDetailResponse,
    ThumbnailUploadResponse,
)
from online_course.schemas.enrollment import (
    PaymentCreate,
    PaymentResponse,
    EnrollmentCreate,
    EnrollmentResponse,
)
from online_course.schemas.review import (
    ReviewCreate,
    ReviewUpdate,
    ReviewResponse,
)
from online_course.schemas.video_request import (
    VideoRequestCreate,
    VideoRequestUpdate,
    VideoRequestResponse,
)
from online_course.schemas.user import (
    UserProfileCreate,
    UserProfileUpdate,
    UserProfileResponse,
    ProfileUpdateResult,
)
from online_course.schemas.contact import ContactMessage

__all__ = [
    "BaseSchema",
    "APIResponse",
    "HealthCheckEntry",
    "HealthResponse",
    "CourseCategoryCreate",
    "CourseCategoryUpdate",
    "CourseCategoryResponse",
    "InstructorResponse",
    "SessionDetailCreate",
    "SessionDetailResponse",
    "UserRatingResponse",
    "CourseCreate",
    "CourseUpdate",
    "CourseResponse",
    "CourseDetailResponse",
    "ThumbnailUploadResponse",
    "PaymentCreate",
    "PaymentResponse",
    "EnrollmentCreate",
    "EnrollmentResponse",
    "ReviewCreate",
    "ReviewUpdate",
    "ReviewResponse",
    "VideoRequestCreate",
    "VideoRequestUpdate",
    "VideoRequestResponse",
    "UserProfileCreate",
    "UserProfileUpdate",
    "UserProfileResponse",
    "ProfileUpdateResult",
    "ContactMessage",
]

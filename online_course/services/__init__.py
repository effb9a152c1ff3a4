# ==============================================================================
# SERVICES PACKAGE INITIALIZATION
# ==============================================================================

"""
Domain Services
===============

One service per aggregate, orchestrating repositories and mapping:
- CourseCategoryService, CourseService
- EnrollmentService
- ReviewService, VideoRequestService
- UserProfileService
- ContactService
"""

from online_course.services.base_service import BaseService
from online_course.services.category_service import CourseCategoryService
from online_course.services.course_service import CourseService
from online_course.services.enrollment_service import EnrollmentService
from online_course.services.review_service import ReviewService
from online_course.services.video_request_service import VideoRequestService
from online_course.services.user_profile_service import UserProfileService
from online_course.services.contact_service import ContactService

__all__ = [
    "BaseService",
    "CourseCategoryService",
    "CourseService",
    "EnrollmentService",
    "ReviewService",
    "VideoRequestService",
    "UserProfileService",
    "ContactService",
]

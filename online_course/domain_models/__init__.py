# ==============================================================================
# DOMAIN MODELS PACKAGE INITIALIZATION
# ==============================================================================

"""
Domain Models
=============

SQLAlchemy ORM models for database entities:
- User: Platform user profiles
- Course: Categories, instructors, courses and session details
- Enrollment: Enrollments and their payments
- Review: Course reviews
- VideoRequest: Requested video topics
"""

from online_course.domain_models.base import SQLBase
from online_course.domain_models.user import User
from online_course.domain_models.course import (
    CourseCategory,
    Instructor,
    Course,
    SessionDetail,
)
from online_course.domain_models.enrollment import Enrollment, Payment
from online_course.domain_models.review import Review
from online_course.domain_models.video_request import VideoRequest

__all__ = [
    "SQLBase",
    "User",
    "CourseCategory",
    "Instructor",
    "Course",
    "SessionDetail",
    "Enrollment",
    "Payment",
    "Review",
    "VideoRequest",
]

# ==============================================================================
# REPOSITORIES PACKAGE INITIALIZATION
# ==============================================================================

"""
Repository Pattern Implementation
=================================

Provides data access abstraction through the Repository Pattern:
- BaseRepository: Generic CRUD over the adapter
- Domain-specific repositories for each aggregate
"""

from online_course.database.repositories.base_repository import BaseRepository
from online_course.database.repositories.catalogue_repository import (
    CourseCategoryRepository,
    CourseRepository,
    InstructorRepository,
)
from online_course.database.repositories.enrollment_repository import EnrollmentRepository
from online_course.database.repositories.feedback_repository import (
    ReviewRepository,
    VideoRequestRepository,
)
from online_course.database.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "CourseCategoryRepository",
    "CourseRepository",
    "InstructorRepository",
    "EnrollmentRepository",
    "ReviewRepository",
    "VideoRequestRepository",
    "UserRepository",
]

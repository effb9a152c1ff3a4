# ==============================================================================
# APPLICATION CONSTANTS - Centralized Configuration Values
# ==============================================================================
# Immutable constants used throughout the application
# ==============================================================================

from __future__ import annotations

from typing import Final


# ==============================================================================
# API CONSTANTS
# ==============================================================================

class APIConstants:
    """API-related constants."""

    DEFAULT_QUERY_LIMIT: Final[int] = 100
    MAX_QUERY_LIMIT: Final[int] = 500

    REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
    RESPONSE_TIME_HEADER: Final[str] = "X-Response-Time"


# ==============================================================================
# DATABASE CONSTANTS
# ==============================================================================

class DatabaseConstants:
    """Collection/table names registered with the adapter."""

    USERS_COLLECTION: Final[str] = "users"
    COURSE_CATEGORIES_COLLECTION: Final[str] = "course_categories"
    COURSES_COLLECTION: Final[str] = "courses"
    SESSION_DETAILS_COLLECTION: Final[str] = "session_details"
    INSTRUCTORS_COLLECTION: Final[str] = "instructors"
    ENROLLMENTS_COLLECTION: Final[str] = "enrollments"
    PAYMENTS_COLLECTION: Final[str] = "payments"
    REVIEWS_COLLECTION: Final[str] = "reviews"
    VIDEO_REQUESTS_COLLECTION: Final[str] = "video_requests"


# ==============================================================================
# STORAGE CONSTANTS
# ==============================================================================

class StorageConstants:
    """Blob containers and naming."""

    COURSE_PREVIEW_CONTAINER: Final[str] = "course-preview"
    PROFILE_PICTURE_CONTAINER: Final[str] = "profile-pictures"
    PROFILE_PICTURE_SUFFIX: Final[str] = "_profile_picture"


# ==============================================================================
# DOMAIN CONSTANTS
# ==============================================================================

class PaymentStatus:
    PENDING: Final[str] = "Pending"
    COMPLETED: Final[str] = "Completed"
    FAILED: Final[str] = "Failed"


class VideoRequestStatus:
    REQUESTED: Final[str] = "Requested"
    REVIEWED: Final[str] = "Reviewed"
    IN_PROGRESS: Final[str] = "In Progress"
    COMPLETED: Final[str] = "Completed"


class ErrorMessages:
    """Standard error messages."""

    NOT_AUTHENTICATED: Final[str] = "Not authenticated"
    ADMIN_REQUIRED: Final[str] = "Administrator role required"
    SCOPE_REQUIRED: Final[str] = "Required scope is missing"
    NOT_OWNER: Final[str] = "You can only act on your own records"
    EMPTY_FILE: Final[str] = "No file uploaded"
    COURSE_NOT_FOUND: Final[str] = "Course not found"
    USER_NOT_FOUND: Final[str] = "User not found"
    ID_MISMATCH: Final[str] = "Route id does not match body id"

# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================
# Core utilities: Settings, Security, Exceptions, Constants, Health
# ==============================================================================

"""
Core Module
===========

Contains core utilities and configurations for the application:
- settings: Environment configuration management
- security: Bearer token verification and caller principal
- exceptions: Custom exception classes
- constants: Application-wide constants
- health: Health check registry
"""

from online_course.core.settings import settings, get_settings, DatabaseType
from online_course.core.exceptions import (
    AppException,
    DatabaseError,
    IntegrityViolationError,
    NotFoundError,
    AlreadyExistsError,
    DuplicateEnrollmentError,
    ValidationError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    ServiceUnavailableError,
)

__all__ = [
    "settings",
    "get_settings",
    "DatabaseType",
    "AppException",
    "DatabaseError",
    "IntegrityViolationError",
    "NotFoundError",
    "AlreadyExistsError",
    "DuplicateEnrollmentError",
    "ValidationError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "ServiceUnavailableError",
]

# ==============================================================================
# CUSTOM EXCEPTIONS - Application Error Hierarchy
# ==============================================================================
# Structured exception classes for consistent error handling
# Each exception maps to appropriate HTTP status codes
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception for all application errors.

    Provides a consistent interface for error handling with:
    - Error code for programmatic identification
    - HTTP status code mapping
    - Detailed message and optional context

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        status_code: HTTP status code to return
        details: Additional context dictionary
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary format for JSON response.

        Returns:
            Dictionary containing error details
        """
        return {
            "success": False,
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"status_code={self.status_code})"
        )


# ==============================================================================
# DATABASE EXCEPTIONS
# ==============================================================================

class DatabaseError(AppException):
    """
    Base exception for database-related errors.

    Raised when the persistence gateway cannot complete an operation
    (connection issues, query failures).
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="DATABASE_ERROR",
            status_code=503,
            details=details,
        )


class IntegrityViolationError(DatabaseError):
    """
    Raised when a write breaks a database constraint.

    Unique keys, foreign keys and NOT NULL columns are enforced by the
    store itself; the adapter translates the driver error into this one.
    Maps to HTTP 409 Conflict unless a service translates it further.
    """

    def __init__(
        self,
        message: str = "Write conflicts with existing data",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
        self.error_code = "INTEGRITY_VIOLATION"
        self.status_code = 409


# ==============================================================================
# RESOURCE EXCEPTIONS
# ==============================================================================

class NotFoundError(AppException):
    """
    Raised when a requested resource does not exist.

    Maps to HTTP 404 Not Found.

    Attributes:
        resource_type: Type of resource that was not found
        resource_id: Identifier of the missing resource
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ) -> None:
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=details,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class AlreadyExistsError(AppException):
    """
    Raised when attempting to create a resource that already exists.

    Maps to HTTP 409 Conflict.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        _details = details or {}
        if resource_type:
            _details["resource_type"] = resource_type

        super().__init__(
            message=message,
            error_code="ALREADY_EXISTS",
            status_code=409,
            details=_details,
        )


class DuplicateEnrollmentError(AlreadyExistsError):
    """
    Raised when a user is already enrolled in a course.

    The enrollment endpoint reports this as HTTP 400 Bad Request.
    """

    def __init__(
        self,
        user_id: int,
        course_id: int,
        message: str = "Enrollment to this course already exists",
    ) -> None:
        super().__init__(
            message=message,
            resource_type="enrollment",
            details={"user_id": user_id, "course_id": course_id},
        )
        self.error_code = "DUPLICATE_ENROLLMENT"
        self.status_code = 400
        self.user_id = user_id
        self.course_id = course_id


# ==============================================================================
# VALIDATION EXCEPTIONS
# ==============================================================================

class ValidationError(AppException):
    """
    Raised when input validation fails.

    Maps to HTTP 400 Bad Request.
    Contains field-level validation errors.
    """

    def __init__(
        self,
        message: str = "Validation error",
        errors: Optional[Any] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details={"validation_errors": errors or {}},
        )
        self.errors = errors or {}


class BadRequestError(AppException):
    """
    Raised for malformed or invalid requests.

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str = "Bad request",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="BAD_REQUEST",
            status_code=400,
            details=details,
        )


# ==============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# ==============================================================================

class AuthenticationError(AppException):
    """
    Raised when authentication fails.

    Maps to HTTP 401 Unauthorized.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="AUTHENTICATION_ERROR",
            status_code=401,
            details=details,
        )


class AuthorizationError(AppException):
    """
    Raised when the caller lacks a role, scope or ownership.

    Maps to HTTP 403 Forbidden.
    """

    def __init__(
        self,
        message: str = "Permission denied",
        required_permission: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        _details = details or {}
        if required_permission:
            _details["required_permission"] = required_permission

        super().__init__(
            message=message,
            error_code="AUTHORIZATION_ERROR",
            status_code=403,
            details=_details,
        )


class TokenExpiredError(AuthenticationError):
    """
    Raised when the bearer token has expired.
    """

    def __init__(
        self,
        message: str = "Token has expired",
    ) -> None:
        super().__init__(message=message)
        self.error_code = "TOKEN_EXPIRED"


class InvalidTokenError(AuthenticationError):
    """
    Raised when the bearer token is invalid or malformed.
    """

    def __init__(
        self,
        message: str = "Invalid token",
    ) -> None:
        super().__init__(message=message)
        self.error_code = "INVALID_TOKEN"


# ==============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# ==============================================================================

class ServiceUnavailableError(AppException):
    """
    Raised when an external collaborator (blob storage, email) fails.

    Maps to HTTP 503 Service Unavailable.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        service_name: Optional[str] = None,
        retry_after: Optional[int] = None,
    ) -> None:
        details = {}
        if service_name:
            details["service"] = service_name
        if retry_after:
            details["retry_after_seconds"] = retry_after

        super().__init__(
            message=message,
            error_code="SERVICE_UNAVAILABLE",
            status_code=503,
            details=details,
        )

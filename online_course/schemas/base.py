# ==============================================================================
# BASE SCHEMAS - Common Schema Patterns
# ==============================================================================
# Foundation schemas for API responses
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


# Type variable for generic response types
T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All transport models inherit from this class
    to ensure consistent serialization behavior.
    """

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        populate_by_name=True,
        use_enum_values=True,
    )


class APIResponse(BaseModel, Generic[T]):
    """
    Standard API response wrapper.

    Attributes:
        success: Whether the request was successful
        message: Optional status message
        data: Response payload
        errors: Optional error details
    """

    success: bool = Field(
        True,
        description="Whether the request was successful"
    )
    message: Optional[str] = Field(
        None,
        description="Status message"
    )
    data: Optional[T] = Field(
        None,
        description="Response data"
    )
    errors: Optional[List[dict[str, Any]]] = Field(
        None,
        description="Error details if any"
    )

    @classmethod
    def ok(
        cls,
        data: T,
        message: Optional[str] = None,
    ) -> "APIResponse[T]":
        """Create a successful response."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def error(
        cls,
        message: str,
        errors: Optional[List[dict[str, Any]]] = None,
    ) -> "APIResponse[T]":
        """Create an error response."""
        return cls(success=False, message=message, errors=errors)


class HealthCheckEntry(BaseModel):
    """Result of one registered health check."""

    status: str
    description: Optional[str] = None
    exception: Optional[str] = None
    duration: str


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(
        ...,
        description="Overall health status"
    )
    version: str = Field(
        ...,
        description="Application version"
    )
    results: Dict[str, HealthCheckEntry] = Field(
        default_factory=dict,
        description="Per-check results"
    )

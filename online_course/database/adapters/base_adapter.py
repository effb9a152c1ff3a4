# ==============================================================================
# BASE DATABASE ADAPTER - Abstract Interface
# ==============================================================================
# Defines the contract of the persistence gateway used by the repositories
# ==============================================================================

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import (
    Any,
    AsyncIterator,
    Dict,
    Generic,
    List,
    Optional,
    TypeVar,
)

# Type variable for generic database records
T = TypeVar("T")


class BaseDatabaseAdapter(ABC, Generic[T]):
    """
    Abstract Base Class for Database Adapters.

    Provides a unified interface for CRUD operations so repositories never
    talk to a driver directly.

    Generic Parameters:
        T: The type of records returned by the adapter

    Error Contract:
        Constraint violations (unique, foreign key, not null) surface as
        ``IntegrityViolationError``; connection problems as ``DatabaseError``.

    Example:
        >>> adapter = SQLAlchemyAdapter("sqlite+aiosqlite:///./online_course.db")
        >>> await adapter.connect()
        >>> category = await adapter.create("course_categories", {"name": "Data"})
        >>> await adapter.disconnect()
    """

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    @abstractmethod
    async def connect(self) -> None:
        """
        Establish database connection.

        Initializes the database engine and connection pool.
        Must be called before any database operations.

        Raises:
            DatabaseError: If connection cannot be established
        """
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Release all pooled connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        pass

    # ==========================================================================
    # SESSION MANAGEMENT
    # ==========================================================================

    @abstractmethod
    @asynccontextmanager
    async def session(self) -> AsyncIterator[Any]:
        """
        Provide a transactional session scope.

        Changes are committed on successful exit or rolled back on exception.

        Yields:
            Session object appropriate for the database type

        Raises:
            RuntimeError: If database is not connected
            IntegrityViolationError: If a constraint is violated
        """
        pass

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> T:
        """
        Create a new record.

        Args:
            collection: Table name
            data: Record data as dictionary

        Returns:
            Created record with generated ID and eager relations loaded
        """
        pass

    @abstractmethod
    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[T]:
        """
        Retrieve a record by its primary identifier.

        Returns:
            Record if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[T]:
        """
        Retrieve multiple records with pagination and filtering.

        Args:
            collection: Table name
            skip: Number of records to skip (offset)
            limit: Maximum number of records to return
            filters: Field-value pairs for equality filtering
            sort_by: Field name to sort by
            sort_order: Sort direction ("asc" or "desc")

        Returns:
            List of matching records
        """
        pass

    @abstractmethod
    async def update(
        self,
        collection: str,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[T]:
        """
        Update an existing record.

        Returns:
            Updated record if found, None if not exists
        """
        pass

    @abstractmethod
    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """
        Delete a record by ID.

        Returns:
            True if deleted, False if not found
        """
        pass

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    @abstractmethod
    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count records matching filters."""
        pass

    @abstractmethod
    async def exists(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> bool:
        """Check if any record matches the filters."""
        pass

    @abstractmethod
    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[T]:
        """
        Find a single record matching filters.

        Returns:
            First matching record, None if no match
        """
        pass

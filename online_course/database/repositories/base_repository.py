# ==============================================================================
# BASE REPOSITORY - Generic Data Access Abstraction
# ==============================================================================
# Repository Pattern implementation over the database adapter
# ==============================================================================

from __future__ import annotations

from typing import (
    Any,
    ClassVar,
    Dict,
    Generic,
    List,
    Optional,
    TypeVar,
)

from online_course.core.constants import APIConstants
from online_course.database.adapters.base_adapter import BaseDatabaseAdapter

# Type variable for generic repository
ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing standard CRUD operations.

    Repositories receive column data already produced by the mapping
    profile and return SQLAlchemy entities with their eager relations
    loaded.

    Generic Parameters:
        ModelType: Domain entity type

    Attributes:
        collection_name: Table identifier registered with the adapter
        _adapter: Database adapter for database operations

    Example:
        >>> class ReviewRepository(BaseRepository[Review]):
        ...     collection_name = "reviews"
        ...
        >>> repo = ReviewRepository(adapter)
        >>> review = await repo.create({"course_id": 1, "user_id": 2, "rating": 5})
    """

    collection_name: ClassVar[str]

    def __init__(self, adapter: BaseDatabaseAdapter) -> None:
        self._adapter = adapter

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def create(self, data: Dict[str, Any]) -> ModelType:
        """
        Create a new entity.

        Args:
            data: Column data (and owned child entities)

        Returns:
            Created entity with generated ID
        """
        return await self._adapter.create(self.collection_name, data)

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Retrieve entity by ID.

        Returns:
            Entity if found, None otherwise
        """
        return await self._adapter.get_by_id(self.collection_name, id)

    async def get_all(
        self,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[ModelType]:
        """
        Retrieve multiple entities with pagination.

        Args:
            skip: Number of records to skip
            limit: Maximum records to return
            filters: Field-value pairs for filtering
            sort_by: Field to sort by
            sort_order: Sort direction ("asc" or "desc")

        Returns:
            List of matching entities
        """
        return await self._adapter.get_all(
            self.collection_name,
            skip=skip,
            limit=limit,
            filters=filters,
            sort_by=sort_by,
            sort_order=sort_order,
        )

    async def update(
        self,
        id: int,
        data: Dict[str, Any],
    ) -> Optional[ModelType]:
        """
        Update an existing entity.

        Returns:
            Updated entity if found, None otherwise
        """
        return await self._adapter.update(self.collection_name, id, data)

    async def delete(self, id: int) -> bool:
        """
        Delete an entity by ID.

        Returns:
            True if deleted, False if not found
        """
        return await self._adapter.delete(self.collection_name, id)

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def count(
        self,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        return await self._adapter.count(self.collection_name, filters)

    async def exists(self, id: int) -> bool:
        return await self._adapter.exists(self.collection_name, {"id": id})

    async def find_one(
        self,
        filters: Dict[str, Any],
    ) -> Optional[ModelType]:
        """
        Find a single entity matching filters.

        Returns:
            First matching entity, None if not found
        """
        return await self._adapter.find_one(self.collection_name, filters)

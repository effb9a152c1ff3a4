# ==============================================================================
# BASE SERVICE - Generic Business Logic Layer
# ==============================================================================
# Common CRUD operations: repository calls with mapping applied both ways
# ==============================================================================

from __future__ import annotations

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from online_course.core.constants import APIConstants
from online_course.database.repositories.base_repository import BaseRepository
from online_course.mapping.profile import MappingProfile

logger = logging.getLogger(__name__)

# Type variables for generic service
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)
ResponseSchemaType = TypeVar("ResponseSchemaType", bound=BaseModel)


class BaseService(Generic[CreateSchemaType, UpdateSchemaType, ResponseSchemaType]):
    """
    Base service providing standard business operations.

    Expected absence is reported with ``None`` / ``False`` rather than
    raised; the API layer turns it into HTTP 404.

    Generic Parameters:
        CreateSchemaType: Pydantic schema for creation
        UpdateSchemaType: Pydantic schema for updates
        ResponseSchemaType: Pydantic schema for responses

    Attributes:
        response_model: Transport model returned by reads and writes
        _repository: Repository of the aggregate root
        _mapper: Mapping profile shared by the application

    Example:
        >>> class CourseCategoryService(BaseService[...]):
        ...     response_model = CourseCategoryResponse
        >>> service = CourseCategoryService(CourseCategoryRepository(adapter), mapper)
        >>> await service.get_by_id(1)
    """

    response_model: Type[ResponseSchemaType]

    def __init__(
        self,
        repository: BaseRepository[Any],
        mapper: MappingProfile,
    ) -> None:
        self._repository = repository
        self._mapper = mapper

    def _to_response(self, entity: Any) -> ResponseSchemaType:
        return self._mapper.map(entity, self.response_model)

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def get_by_id(self, id: int) -> Optional[ResponseSchemaType]:
        """
        Retrieve entity by ID.

        Returns:
            Response model, or None when the id is unknown
        """
        entity = await self._repository.get_by_id(id)
        return self._to_response(entity) if entity else None

    async def get_all(
        self,
        skip: int = 0,
        limit: int = APIConstants.DEFAULT_QUERY_LIMIT,
    ) -> List[ResponseSchemaType]:
        entities = await self._repository.get_all(skip=skip, limit=limit)
        return self._mapper.map_many(entities, self.response_model)

    async def create(self, schema: CreateSchemaType) -> ResponseSchemaType:
        """
        Create a new entity.

        Args:
            schema: Creation schema with entity data

        Returns:
            Created entity as response schema
        """
        data = self._mapper.map(schema, dict)
        entity = await self._repository.create(data)
        logger.info(f"Created {self._repository.collection_name} id={entity.id}")
        return self._to_response(entity)

    async def update(
        self,
        id: int,
        schema: UpdateSchemaType,
    ) -> Optional[ResponseSchemaType]:
        """
        Update an existing entity.

        Returns:
            Updated entity as response schema, None if not found
        """
        data = self._mapper.map(schema, dict)
        entity = await self._repository.update(id, data)
        if entity is None:
            return None
        logger.info(f"Updated {self._repository.collection_name} id={id}")
        return self._to_response(entity)

    async def delete(self, id: int) -> bool:
        """
        Delete an entity by ID.

        Returns:
            True if deleted, False if the id was unknown
        """
        deleted = await self._repository.delete(id)
        if deleted:
            logger.info(f"Deleted {self._repository.collection_name} id={id}")
        return deleted

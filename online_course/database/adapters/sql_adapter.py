# ==============================================================================
# SQL ADAPTER - SQLAlchemy Async (aiosqlite / asyncpg)
# ==============================================================================
# Relational persistence gateway shared by SQLite and PostgreSQL
# ==============================================================================

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional, Type

from sqlalchemy import and_, event, func, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from online_course.core.settings import settings
from online_course.core.exceptions import DatabaseError, IntegrityViolationError
from online_course.database.adapters.base_adapter import BaseDatabaseAdapter

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    # SQLite ignores FOREIGN KEY clauses unless enabled per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SQLAlchemyAdapter(BaseDatabaseAdapter[Any]):
    """
    Relational adapter using SQLAlchemy async.

    Serves SQLite (aiosqlite) for development and tests and PostgreSQL
    (asyncpg) in production behind the same interface.

    Features:
        - Automatic table creation on connect
        - Foreign keys enforced on SQLite
        - Constraint violations translated to ``IntegrityViolationError``
        - Records returned with their eager relationships loaded

    Attributes:
        _database_url: Async connection string
        _engine: SQLAlchemy async engine
        _session_factory: Session factory for creating sessions
        _model_registry: Mapping of collection names to model classes

    Example:
        >>> adapter = SQLAlchemyAdapter()
        >>> await adapter.connect()
        >>> adapter.register_model("course_categories", CourseCategory)
        >>> category = await adapter.create("course_categories", {"name": "Data"})
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        """
        Initialize the adapter.

        Args:
            database_url: Connection URL (defaults to settings.database_url)
        """
        url = database_url or settings.database_url
        if url.startswith("sqlite://"):
            url = url.replace("sqlite://", "sqlite+aiosqlite://", 1)

        self._database_url = url
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None
        self._model_registry: Dict[str, Type[DeclarativeBase]] = {}

    @property
    def is_sqlite(self) -> bool:
        return self._database_url.startswith("sqlite")

    # ==========================================================================
    # MODEL REGISTRY
    # ==========================================================================

    def register_model(
        self,
        name: str,
        model: Type[DeclarativeBase],
    ) -> None:
        """
        Register a SQLAlchemy model for table mapping.

        Args:
            name: Collection/table identifier
            model: SQLAlchemy model class
        """
        self._model_registry[name] = model
        logger.debug(f"Registered model '{name}' -> {model.__name__}")

    def _get_model(self, collection: str) -> Type[DeclarativeBase]:
        """
        Get registered model by collection name.

        Raises:
            ValueError: If model not registered
        """
        if collection not in self._model_registry:
            raise ValueError(
                f"Model '{collection}' not registered. "
                f"Available models: {list(self._model_registry.keys())}"
            )
        return self._model_registry[collection]

    # ==========================================================================
    # LIFECYCLE METHODS
    # ==========================================================================

    async def connect(self) -> None:
        """
        Initialize database engine and create tables.

        Raises:
            DatabaseError: If the engine cannot connect
        """
        try:
            if self.is_sqlite:
                self._engine = create_async_engine(
                    self._database_url,
                    echo=settings.DEBUG,
                    connect_args={"check_same_thread": False},
                )
                event.listen(
                    self._engine.sync_engine,
                    "connect",
                    _enable_sqlite_foreign_keys,
                )
            else:
                self._engine = create_async_engine(
                    self._database_url,
                    echo=settings.DEBUG,
                    pool_size=settings.DB_POOL_SIZE,
                    max_overflow=settings.DB_MAX_OVERFLOW,
                    pool_pre_ping=True,
                )

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )

            async with self._engine.begin() as conn:
                from online_course.domain_models.base import SQLBase
                await conn.run_sync(SQLBase.metadata.create_all)

            logger.info(f"SQL adapter connected ({self._engine.dialect.name})")

        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            raise DatabaseError(f"Database connection failed: {e}")

    async def disconnect(self) -> None:
        """Close database connections and dispose engine."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("SQL adapter disconnected")

    async def health_check(self) -> bool:
        """
        Verify database connectivity.

        Returns:
            True if connection is healthy
        """
        try:
            async with self.session() as session:
                await session.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    # ==========================================================================
    # SESSION MANAGEMENT
    # ==========================================================================

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide transactional session scope.

        Commits on successful exit, rolls back on exception.

        Yields:
            AsyncSession instance

        Raises:
            RuntimeError: If database not connected
            IntegrityViolationError: If a flush or commit breaks a constraint
        """
        if not self._session_factory:
            raise RuntimeError(
                "Database not connected. Call connect() first."
            )

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
        except IntegrityError as e:
            await session.rollback()
            logger.warning(f"Integrity violation: {e.orig}")
            # Driver text names tables and columns; only debug builds return it.
            details = {"reason": str(e.orig)} if settings.DEBUG else None
            raise IntegrityViolationError(details=details) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    # ==========================================================================
    # CRUD OPERATIONS
    # ==========================================================================

    async def _reload(
        self,
        session: AsyncSession,
        model: Type[DeclarativeBase],
        id: Any,
    ) -> Any:
        # Re-select so relationships configured as eager are populated
        # on freshly inserted or modified rows.
        result = await session.execute(
            select(model)
            .where(model.id == id)
            .execution_options(populate_existing=True)
        )
        return result.unique().scalar_one()

    def _conditions(
        self,
        model: Type[DeclarativeBase],
        filters: Optional[Dict[str, Any]],
    ) -> List[Any]:
        if not filters:
            return []
        return [
            getattr(model, key) == value
            for key, value in filters.items()
            if hasattr(model, key)
        ]

    async def create(
        self,
        collection: str,
        data: Dict[str, Any],
    ) -> Any:
        """Create a new record."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = model(**data)
            session.add(instance)
            await session.flush()
            return await self._reload(session, model, instance.id)

    async def get_by_id(
        self,
        collection: str,
        id: Any,
    ) -> Optional[Any]:
        """Retrieve record by primary key."""
        model = self._get_model(collection)

        async with self.session() as session:
            result = await session.execute(select(model).where(model.id == id))
            return result.unique().scalar_one_or_none()

    async def get_all(
        self,
        collection: str,
        skip: int = 0,
        limit: int = 100,
        filters: Optional[Dict[str, Any]] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> List[Any]:
        """Retrieve multiple records with pagination and filtering."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = select(model)

            conditions = self._conditions(model, filters)
            if conditions:
                query = query.where(and_(*conditions))

            # Stable ordering, primary key unless told otherwise
            order_column = getattr(model, sort_by) if sort_by and hasattr(model, sort_by) else model.id
            if sort_order.lower() == "desc":
                order_column = order_column.desc()
            query = query.order_by(order_column)

            query = query.offset(skip).limit(limit)

            result = await session.execute(query)
            return list(result.unique().scalars().all())

    async def update(
        self,
        collection: str,
        id: Any,
        data: Dict[str, Any],
    ) -> Optional[Any]:
        """Update an existing record."""
        model = self._get_model(collection)

        async with self.session() as session:
            result = await session.execute(select(model).where(model.id == id))
            instance = result.unique().scalar_one_or_none()
            if not instance:
                return None

            for key, value in data.items():
                if hasattr(instance, key):
                    setattr(instance, key, value)

            await session.flush()
            return await self._reload(session, model, id)

    async def delete(
        self,
        collection: str,
        id: Any,
    ) -> bool:
        """Delete a record by ID."""
        model = self._get_model(collection)

        async with self.session() as session:
            instance = await session.get(model, id)
            if not instance:
                return False

            await session.delete(instance)
            await session.flush()
            return True

    # ==========================================================================
    # QUERY OPERATIONS
    # ==========================================================================

    async def count(
        self,
        collection: str,
        filters: Optional[Dict[str, Any]] = None,
    ) -> int:
        """Count records matching filters."""
        model = self._get_model(collection)

        async with self.session() as session:
            query = select(func.count()).select_from(model)

            conditions = self._conditions(model, filters)
            if conditions:
                query = query.where(and_(*conditions))

            result = await session.execute(query)
            return result.scalar() or 0

    async def exists(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> bool:
        """Check if any record matches filters."""
        count = await self.count(collection, filters)
        return count > 0

    async def find_one(
        self,
        collection: str,
        filters: Dict[str, Any],
    ) -> Optional[Any]:
        """Find a single record matching filters."""
        results = await self.get_all(
            collection,
            skip=0,
            limit=1,
            filters=filters,
        )
        return results[0] if results else None

# ==============================================================================
# DATABASE FACTORY - Adapter Instantiation & Lifecycle Management
# ==============================================================================
# Factory Pattern for creating and managing database adapters
# Singleton caching for efficient resource utilization
# ==============================================================================

from __future__ import annotations

import logging
from typing import Dict, Optional

from online_course.core.constants import DatabaseConstants
from online_course.core.settings import settings, DatabaseType
from online_course.core.exceptions import DatabaseError
from online_course.database.adapters.base_adapter import BaseDatabaseAdapter
from online_course.database.adapters.sql_adapter import SQLAlchemyAdapter

logger = logging.getLogger(__name__)


class DatabaseFactory:
    """
    Factory class for creating and managing database adapters.

    Class Attributes:
        _instances: Cache of initialized adapter instances

    Example:
        >>> # Initialize at application startup
        >>> await DatabaseFactory.initialize()
        >>>
        >>> # Get adapter for database operations
        >>> adapter = DatabaseFactory.get_adapter()
        >>> course = await adapter.get_by_id("courses", 1)
        >>>
        >>> # Shutdown at application exit
        >>> await DatabaseFactory.shutdown()
    """

    _instances: Dict[DatabaseType, BaseDatabaseAdapter] = {}

    @classmethod
    def create_adapter(
        cls,
        db_type: Optional[DatabaseType] = None,
        database_url: Optional[str] = None,
    ) -> BaseDatabaseAdapter:
        """
        Create and return appropriate database adapter.

        Returns cached instance if available, otherwise creates new.

        Args:
            db_type: Database type (defaults to settings.DATABASE_TYPE)
            database_url: Custom connection URL

        Returns:
            Database adapter instance

        Raises:
            ValueError: If database type is not supported
        """
        db_type = db_type or settings.DATABASE_TYPE

        if db_type in cls._instances:
            return cls._instances[db_type]

        if db_type == DatabaseType.SQLITE:
            adapter = SQLAlchemyAdapter(
                database_url=database_url or settings.sqlite_async_url
            )
            logger.info("Created SQLite adapter")

        elif db_type == DatabaseType.POSTGRESQL:
            adapter = SQLAlchemyAdapter(
                database_url=database_url or settings.postgres_url
            )
            logger.info("Created PostgreSQL adapter")

        else:
            raise ValueError(f"Unsupported database type: {db_type}")

        cls._register_models(adapter)
        cls._instances[db_type] = adapter
        return adapter

    @classmethod
    async def initialize(
        cls,
        db_type: Optional[DatabaseType] = None,
        database_url: Optional[str] = None,
    ) -> BaseDatabaseAdapter:
        """
        Initialize database connection.

        Should be called at application startup.

        Raises:
            DatabaseError: If connection fails
        """
        adapter = cls.create_adapter(db_type, database_url=database_url)

        try:
            await adapter.connect()
            logger.info(
                f"Database initialized: {db_type or settings.DATABASE_TYPE}"
            )
            return adapter
        except DatabaseError:
            raise
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")
            raise DatabaseError(f"Failed to initialize database: {e}")

    @classmethod
    def _register_models(cls, adapter: SQLAlchemyAdapter) -> None:
        """Register all domain models with the adapter."""
        from online_course.domain_models import (
            Course,
            CourseCategory,
            Enrollment,
            Instructor,
            Payment,
            Review,
            SessionDetail,
            User,
            VideoRequest,
        )

        adapter.register_model(DatabaseConstants.USERS_COLLECTION, User)
        adapter.register_model(DatabaseConstants.COURSE_CATEGORIES_COLLECTION, CourseCategory)
        adapter.register_model(DatabaseConstants.COURSES_COLLECTION, Course)
        adapter.register_model(DatabaseConstants.SESSION_DETAILS_COLLECTION, SessionDetail)
        adapter.register_model(DatabaseConstants.INSTRUCTORS_COLLECTION, Instructor)
        adapter.register_model(DatabaseConstants.ENROLLMENTS_COLLECTION, Enrollment)
        adapter.register_model(DatabaseConstants.PAYMENTS_COLLECTION, Payment)
        adapter.register_model(DatabaseConstants.REVIEWS_COLLECTION, Review)
        adapter.register_model(DatabaseConstants.VIDEO_REQUESTS_COLLECTION, VideoRequest)

        logger.info("Registered all domain models with adapter")

    @classmethod
    async def shutdown(cls) -> None:
        """
        Close all database connections.

        Releases all resources and clears adapter cache.
        """
        for db_type, adapter in cls._instances.items():
            try:
                await adapter.disconnect()
                logger.info(f"Disconnected: {db_type}")
            except Exception as e:
                logger.error(f"Error disconnecting {db_type}: {e}")

        cls._instances.clear()
        logger.info("All database connections closed")

    @classmethod
    def get_adapter(
        cls,
        db_type: Optional[DatabaseType] = None,
    ) -> BaseDatabaseAdapter:
        """
        Get existing adapter instance.

        Raises:
            RuntimeError: If adapter not initialized
        """
        db_type = db_type or settings.DATABASE_TYPE

        if db_type not in cls._instances:
            raise RuntimeError(
                f"Database adapter for {db_type} not initialized. "
                f"Call DatabaseFactory.initialize() first."
            )

        return cls._instances[db_type]

    @classmethod
    def is_initialized(
        cls,
        db_type: Optional[DatabaseType] = None,
    ) -> bool:
        db_type = db_type or settings.DATABASE_TYPE
        return db_type in cls._instances

    @classmethod
    async def health_check(
        cls,
        db_type: Optional[DatabaseType] = None,
    ) -> bool:
        """
        Check database health.

        Returns:
            True if database is healthy, False when unreachable or
            not initialized
        """
        if not cls.is_initialized(db_type):
            return False
        return await cls.get_adapter(db_type).health_check()

    @classmethod
    def reset(cls) -> None:
        """
        Reset factory state.

        Clears adapter cache without disconnecting.
        Primarily for testing purposes.
        """
        cls._instances.clear()

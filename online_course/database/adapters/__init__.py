# ==============================================================================
# DATABASE ADAPTERS PACKAGE
# ==============================================================================

"""
Database Adapters
=================

Provides the persistence gateway used by the repositories:
- BaseDatabaseAdapter: Abstract interface definition
- SQLAlchemyAdapter: SQLite (aiosqlite) and PostgreSQL (asyncpg)
"""

from online_course.database.adapters.base_adapter import BaseDatabaseAdapter
from online_course.database.adapters.sql_adapter import SQLAlchemyAdapter

__all__ = [
    "BaseDatabaseAdapter",
    "SQLAlchemyAdapter",
]

# ==============================================================================
# DATABASE PACKAGE INITIALIZATION
# ==============================================================================
# Relational persistence gateway
# ==============================================================================

"""
Database Module
===============

Key Components:
- Adapters: SQLAlchemy async gateway (SQLite / PostgreSQL)
- Factory: Adapter instantiation and lifecycle
- Repositories: Per-aggregate data access
"""

from online_course.database.factory import DatabaseFactory
from online_course.database.adapters.base_adapter import BaseDatabaseAdapter

__all__ = [
    "DatabaseFactory",
    "BaseDatabaseAdapter",
]

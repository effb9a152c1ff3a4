# ==============================================================================
# SETTINGS CONFIGURATION - Environment Management
# ==============================================================================
# Pydantic Settings for type-safe environment variable management
# Supports: Development, Staging, Production environments
# ==============================================================================

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import List, Optional

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseType(str, Enum):
    """
    Supported relational backends.

    Attributes:
        SQLITE: File-based database for development/testing
        POSTGRESQL: Production-grade relational database
    """
    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application Settings Configuration.

    Manages all environment variables with type validation and defaults.
    Values are read from the process environment and an optional ``.env``
    file.

    Example:
        >>> from online_course.core.settings import settings
        >>> print(settings.APP_NAME)
        'Online Course API'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # --------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # --------------------------------------------------------------------------
    APP_NAME: str = Field(
        default="Online Course API",
        description="Application display name"
    )
    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application semantic version"
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (logs, stack traces)"
    )
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current deployment environment"
    )

    # --------------------------------------------------------------------------
    # API CONFIGURATION
    # --------------------------------------------------------------------------
    API_PREFIX: str = Field(
        default="/api",
        description="Route prefix for all resource endpoints"
    )
    API_TITLE: str = Field(
        default="Online Course API",
        description="OpenAPI documentation title"
    )
    API_DESCRIPTION: str = Field(
        default="Courses, categories, enrollments, reviews, video requests and user profiles",
        description="OpenAPI documentation description"
    )

    # --------------------------------------------------------------------------
    # DATABASE
    # --------------------------------------------------------------------------
    DATABASE_TYPE: DatabaseType = Field(
        default=DatabaseType.SQLITE,
        description="Active database backend (sqlite, postgresql)"
    )
    SQLITE_URL: str = Field(
        default="sqlite:///./online_course.db",
        description="SQLite database file path"
    )
    POSTGRES_HOST: str = Field(default="localhost")
    POSTGRES_PORT: int = Field(default=5432, ge=1, le=65535)
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: str = Field(default="password")
    POSTGRES_DB: str = Field(default="online_course")
    DB_POOL_SIZE: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Database connection pool size (PostgreSQL only)"
    )
    DB_MAX_OVERFLOW: int = Field(
        default=20,
        ge=0,
        le=100,
        description="Maximum overflow connections beyond pool size"
    )

    # --------------------------------------------------------------------------
    # IDENTITY PROVIDER TOKENS
    # --------------------------------------------------------------------------
    SECRET_KEY: str = Field(
        default="your-super-secret-key-change-in-production",
        min_length=32,
        description="Token verification key shared with the identity provider"
    )
    ALGORITHM: str = Field(
        default="HS256",
        description="Token signing algorithm"
    )
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(
        default=30,
        ge=1,
        le=1440,
        description="Lifetime of locally minted access tokens"
    )
    TOKEN_AUDIENCE: Optional[str] = Field(
        default=None,
        description="Expected 'aud' claim, checked when set"
    )
    TOKEN_ISSUER: Optional[str] = Field(
        default=None,
        description="Expected 'iss' claim, checked when set"
    )
    ROLES_CLAIM: str = Field(default="roles")
    SCOPES_CLAIM: str = Field(default="scp")
    ADMIN_ROLE: str = Field(default="Admin")
    READ_SCOPE: str = Field(default="read")
    WRITE_SCOPE: str = Field(default="write")

    # --------------------------------------------------------------------------
    # BLOB STORAGE
    # --------------------------------------------------------------------------
    BLOB_STORAGE_PATH: str = Field(
        default="./blob_storage",
        description="Root directory for stored blobs"
    )
    BLOB_BASE_URL: str = Field(
        default="http://localhost:8000/blobs",
        description="Public URL prefix for stored blobs"
    )

    # --------------------------------------------------------------------------
    # EMAIL
    # --------------------------------------------------------------------------
    SMTP_HOST: Optional[str] = Field(
        default=None,
        description="SMTP server; messages are only logged when unset"
    )
    SMTP_PORT: int = Field(default=587, ge=1, le=65535)
    SMTP_USERNAME: Optional[str] = Field(default=None)
    SMTP_PASSWORD: Optional[str] = Field(default=None)
    SMTP_USE_TLS: bool = Field(default=True)
    EMAIL_FROM: str = Field(default="no-reply@example.com")
    CONTACT_EMAIL_TO: str = Field(default="contact@example.com")

    # --------------------------------------------------------------------------
    # HEALTH CHECKS
    # --------------------------------------------------------------------------
    HEALTH_MAX_MEMORY_MB: int = Field(
        default=1024,
        ge=1,
        description="Resident memory above which the process reports unhealthy"
    )

    # --------------------------------------------------------------------------
    # CORS SETTINGS
    # --------------------------------------------------------------------------
    CORS_ORIGINS: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True,
        description="Allow credentials in CORS requests"
    )

    # --------------------------------------------------------------------------
    # LOGGING CONFIGURATION
    # --------------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # --------------------------------------------------------------------------
    # COMPUTED PROPERTIES
    # --------------------------------------------------------------------------
    @computed_field
    @property
    def postgres_url(self) -> str:
        """Async PostgreSQL connection string with the asyncpg driver."""
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:"
            f"{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:"
            f"{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    @computed_field
    @property
    def sqlite_async_url(self) -> str:
        """Async SQLite connection string with the aiosqlite driver."""
        if "aiosqlite" in self.SQLITE_URL:
            return self.SQLITE_URL
        return self.SQLITE_URL.replace("sqlite://", "sqlite+aiosqlite://")

    @computed_field
    @property
    def database_url(self) -> str:
        """
        Get the database URL for the configured DATABASE_TYPE.

        Raises:
            ValueError: If DATABASE_TYPE is not supported
        """
        if self.DATABASE_TYPE == DatabaseType.SQLITE:
            return self.sqlite_async_url
        elif self.DATABASE_TYPE == DatabaseType.POSTGRESQL:
            return self.postgres_url
        raise ValueError(f"Unsupported database type: {self.DATABASE_TYPE}")

    @computed_field
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    @computed_field
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == Environment.PRODUCTION

    # --------------------------------------------------------------------------
    # VALIDATORS
    # --------------------------------------------------------------------------
    @field_validator("SECRET_KEY")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Warn when the default verification key is in use."""
        if v == "your-super-secret-key-change-in-production":
            import warnings
            warnings.warn(
                "Using default SECRET_KEY. Configure the identity provider key for production!",
                UserWarning
            )
        return v

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [origin.strip() for origin in v.split(",")]
        return v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Settings are loaded once per process.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()


# Module-level settings instance for convenient imports
settings = get_settings()

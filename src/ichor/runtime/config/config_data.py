"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default=["*"])


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./ichor.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @computed_field
    @property
    def connection_string(self) -> str:
        """Construct the database connection string, reading the password file if set."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if not self.password_file:
            return self.url

        try:
            with open(self.password_file) as f:
                password = f.read().strip()
        except OSError as e:
            raise ValueError("Failed to read database password from file.") from e

        if base_url.password:
            logger.warning(
                "Database URL contains a password; using the password file instead."
            )
        return base_url.set(password=password).render_as_string(hide_password=False)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=3000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{self.host}:{self.port}"


class AuthConfig(BaseModel):
    """Token signing, verification and table access policy."""

    issuer: str = Field(default="ichor project", description="Token issuer")
    active_kid: str = Field(
        default="54bb2165-71e1-41a6-af3e-7da4a0e1e2c1",
        description="Key id used when signing new tokens",
    )
    keys: dict[str, str] = Field(
        default_factory=lambda: {
            "54bb2165-71e1-41a6-af3e-7da4a0e1e2c1": "change-me-development-secret"
        },
        description="Signing secrets by key id",
    )
    algorithm: str = Field(default="HS256", description="Signing algorithm")
    token_ttl_seconds: int = Field(
        default=8 * 3600, description="Lifetime of issued tokens"
    )
    check_user_enabled: bool = Field(
        default=True, description="Reject tokens of disabled users"
    )
    table_access: dict[str, dict[str, list[str]]] = Field(
        default_factory=lambda: {
            "USER": {"*": ["READ"], "core.users": ["READ", "UPDATE"]}
        },
        description="Per-role table permissions: role -> table -> actions",
    )


class CacheConfig(BaseModel):
    """Read-through cache settings."""

    enabled: bool = Field(default=True, description="Enable entity caches")
    ttl_seconds: int = Field(default=600, description="Entry time to live")
    max_size: int = Field(default=10_000, description="Maximum cached entries")


class QueryConfig(BaseModel):
    """List query defaults."""

    default_rows: int = Field(default=10, description="Rows per page when omitted")
    max_rows: int = Field(default=100, description="Upper bound for rows per page")


class WorkflowConfig(BaseModel):
    """Workflow event bridge configuration."""

    enabled: bool = Field(default=True, description="Publish entity trigger events")
    queue_size: int = Field(default=1000, description="Bounded event queue size")


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    auth: AuthConfig = Field(
        default_factory=AuthConfig, description="Authentication configuration"
    )
    cache: CacheConfig = Field(
        default_factory=CacheConfig, description="Cache configuration"
    )
    query: QueryConfig = Field(
        default_factory=QueryConfig, description="Query configuration"
    )
    workflow: WorkflowConfig = Field(
        default_factory=WorkflowConfig, description="Workflow configuration"
    )

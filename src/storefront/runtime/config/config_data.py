"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field

LOCAL_FRONTEND_ORIGIN = "http://localhost:3000"
DEPLOYED_FRONTEND_ORIGIN = "https://frontend-nextjs-clothingapp.vercel.app"

CRUD_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


class CORSPolicyConfig(BaseModel):
    """Cross-origin policy applied to a single route."""

    allowed_origin: str = Field(
        default=LOCAL_FRONTEND_ORIGIN, description="Origin allowed to call the route"
    )
    allowed_methods: list[str] = Field(
        default_factory=lambda: list(CRUD_METHODS),
        description="Methods advertised in Access-Control-Allow-Methods",
    )
    allowed_headers: list[str] = Field(default_factory=lambda: ["Content-Type"])
    allow_credentials: bool = True


def _default_cors_routes() -> dict[str, CORSPolicyConfig]:
    return {
        "/api/auth": CORSPolicyConfig(
            allowed_origin=DEPLOYED_FRONTEND_ORIGIN,
            allowed_methods=["POST", "OPTIONS"],
        ),
        "/api/categories": CORSPolicyConfig(),
        "/api/products": CORSPolicyConfig(),
        "/api/orders": CORSPolicyConfig(
            allowed_methods=["GET", "POST", "DELETE", "OPTIONS"]
        ),
        "/api/review": CORSPolicyConfig(),
    }


class CORSConfig(BaseModel):
    """CORS configuration for the application, keyed by route path."""

    routes: dict[str, CORSPolicyConfig] = Field(
        default_factory=_default_cors_routes,
        description="Per-route CORS policies",
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(
        default="logs/app.log", description="Log file path (empty disables file logging)"
    )
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./storefront.db",
        description="Database connection URL",
    )
    create_tables: bool = Field(
        default=True, description="Create missing tables on application startup"
    )
    pool_size: int = Field(default=20, description="Connection pool size")
    environment_mode: str = Field(
        default="development", description="Environment mode: development or production"
    )
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    password_env_var: str | None = Field(
        default=None,
        description="Environment variable name containing database password",
    )
    password_file: str | None = Field(
        default=None,
        description="Path to file containing database password",
    )

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def password(self) -> str | None:
        """
        Get the database password from the appropriate source.
        1. In development or test mode, take it from the URL (if any)
        2. In production mode, read from the secrets file specified
            by `password_file` or the environment variable named by `password_env_var`
        """
        from sqlalchemy.engine import make_url

        if self.environment_mode in ("development", "test"):
            return make_url(self.url).password

        if self.environment_mode != "production":
            raise ValueError(
                "Invalid environment_mode; must be 'development', 'production', or 'test'"
            )

        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError("Failed to read database password from file.") from e
        if self.password_env_var:
            password = os.getenv(self.password_env_var)
            if not password:
                raise ValueError(f"Environment variable {self.password_env_var} not set")
            return password
        if self.is_sqlite:
            return None
        raise ValueError(
            "In production mode, either password_file or password_env_var must be set"
        )

    @property
    def connection_string(self) -> str:
        """Construct the database connection string with the resolved password."""
        from sqlalchemy.engine import make_url

        base_url = make_url(self.url)
        if self.is_sqlite:
            return self.url

        if base_url.password and self.environment_mode == "production":
            logger.warning(
                "Database URL contains a password in production mode; "
                "consider using a secrets file or environment variable."
            )

        resolved_password = self.password
        if resolved_password and resolved_password != base_url.password:
            base_url = base_url.set(password=resolved_password)

        # render_as_string keeps the password; str() would mask it
        return base_url.render_as_string(hide_password=False)


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="localhost", description="Application host")
    port: int = Field(default=8000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class SecurityConfig(BaseModel):
    """Credential hashing configuration."""

    bcrypt_rounds: int = Field(
        default=10, ge=4, le=31, description="bcrypt cost factor for password hashes"
    )


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
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security configuration"
    )

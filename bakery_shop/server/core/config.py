"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

import os
from datetime import time
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class LogfireConfig(BaseModel):
    """Pydantic Logfire tracing configuration."""

    enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED", description="Enable Logfire tracing")
    token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN", description="Logfire write token")
    environment: str = Field(default="development", alias="LOGFIRE_ENVIRONMENT", description="Deployment environment")
    service_name: str = Field(default="bakery-shop-server", alias="LOGFIRE_SERVICE_NAME", description="Service name")
    service_version: str = Field(default="0.1.0", alias="LOGFIRE_SERVICE_VERSION", description="Service version")
    trace_sqlalchemy: bool = Field(
        default=True, alias="LOGFIRE_TRACE_SQLALCHEMY", description="Instrument SQLAlchemy operations"
    )
    trace_fastapi: bool = Field(default=True, alias="LOGFIRE_TRACE_FASTAPI", description="Instrument FastAPI endpoints")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Bakery server host address to bind to",
        alias="BAKERY_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="Bakery server port number",
        alias="BAKERY_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="BAKERY_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="LOG_FORMAT",
    )
    log_file_dir: str = Field(default="logs", description="Directory for the log file", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to <LOG_FILE_DIR>/bakery_shop.log",
        alias="ENABLE_FILE_LOGGING",
    )
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins as a JSON list (use * for all)",
        alias="CORS_ORIGINS",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./bakery.db",
        description="Async connection URL for the application database",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(default=False, description="Echo SQL statements", alias="DATABASE_ECHO")

    # =====================================================================
    # Business Configuration
    # =====================================================================
    default_due_time: time = Field(
        default=time(16, 0),
        description="Due time assigned to freshly created orders",
        alias="BAKERY_DEFAULT_DUE_TIME",
    )
    seed_data: bool = Field(
        default=False,
        description="Seed default pickup locations and an admin account on startup",
        alias="BAKERY_SEED_DATA",
    )
    admin_email: str = Field(
        default="admin@bakery.local",
        description="Email of the seeded admin account",
        alias="BAKERY_ADMIN_EMAIL",
    )
    admin_password: str = Field(
        default="admin",
        description="Password of the seeded admin account",
        alias="BAKERY_ADMIN_PASSWORD",
    )
    password_hash_iterations: int = Field(
        default=260000,
        ge=1,
        description="PBKDF2-SHA256 iterations for newly hashed passwords",
        alias="BAKERY_PASSWORD_HASH_ITERATIONS",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def logfire(self) -> LogfireConfig:
        """Get Logfire configuration from environment variables."""
        return LogfireConfig.model_validate({**os.environ, **self.model_dump(by_alias=True)})


settings = Settings()

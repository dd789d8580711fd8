"""Configuration management for the console."""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

WINDOWS_PG_HOME = Path("C:\\Program Files\\PostgreSQL\\17")
POSIX_PG_HOME = Path("/usr/local/pgsql")


def default_pg_home(platform: str | None = None) -> Path:
    """Return the PostgreSQL install directory for a platform."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return WINDOWS_PG_HOME
    return POSIX_PG_HOME


class ServerControlConfig(BaseModel):
    """Local server control configuration."""

    manage: bool = Field(default=True, description="Check and start the local server on launch")
    pg_ctl_path: Path = Field(
        default_factory=lambda: default_pg_home() / "bin" / "pg_ctl",
        description="Path to the pg_ctl executable",
    )
    data_dir: Path = Field(
        default_factory=lambda: default_pg_home() / "data",
        description="Server data directory passed to pg_ctl -D",
    )


class DatabaseConfig(BaseModel):
    """Connection configuration."""

    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=5432, ge=1, le=65535, description="Server port")
    user: str = Field(default="postgres", description="Login role")
    password: str = Field(default="postgres", description="Login password")
    default_database: str = Field(
        default="postgres", min_length=1, description="Database used for a blank name"
    )
    sslmode: Literal["disable", "require"] = Field(default="disable", description="TLS mode")


class RetryConfig(BaseModel):
    """Connection retry configuration."""

    max_attempts: int = Field(default=5, ge=1, le=100, description="Connection attempts")
    retry_delay_seconds: float = Field(
        default=2.0, ge=0.0, description="Pause between connection attempts"
    )


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="console", description="Log format")
    metrics_port: int | None = Field(
        default=None, ge=1, le=65535, description="Prometheus metrics port (disabled if unset)"
    )
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="pgshell", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the console."""

    model_config = SettingsConfigDict(
        env_prefix="PGSHELL_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    server: ServerControlConfig = Field(default_factory=ServerControlConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    retry: RetryConfig = Field(default_factory=RetryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()

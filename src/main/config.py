"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import (
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    LOOPBACK_ADDRESS,
    EnumEnvironment,
    EnumLogLevel,
)


class DashboardSettings(BaseSettings):
    """HTTP API configuration settings."""

    title: str = Field(default="Devilbox Dashboard", description="API title")
    description: str = Field(
        default="Service health and control surface for the Devilbox stack",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Address to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_", case_sensitive=False, extra="ignore"
    )


class DevilboxSettings(BaseSettings):
    """Location of the Devilbox checkout and how to drive it."""

    path: str = Field(default=".", description="Devilbox checkout directory")
    env_file: str = Field(
        default=".env", description="Devilbox .env file, relative to path"
    )
    data_dir: str = Field(
        default="data/www", description="Project root, relative to path"
    )
    compose_command: str = Field(
        default="docker-compose", description="Compose CLI invocation"
    )
    docker_command: str = Field(default="docker", description="Docker CLI invocation")
    container_template: str = Field(
        default="devilbox-{service}-1",
        description="Container name for a compose service",
    )
    php_service: str = Field(
        default="php", description="Service used to run database clients"
    )
    command_timeout: float = Field(
        default=60.0, gt=0, description="Seconds before a CLI call is killed"
    )

    model_config = SettingsConfigDict(
        env_prefix="DEVILBOX_", case_sensitive=False, extra="ignore"
    )


class HealthSettings(BaseSettings):
    """Probe configuration settings."""

    probe_timeout: float = Field(
        default=DEFAULT_PROBE_TIMEOUT_SECONDS,
        gt=0,
        description="Seconds each probe may take",
    )
    auxiliary_host: str = Field(
        default=LOOPBACK_ADDRESS,
        description="Host where the auxiliary service ports are checked",
    )

    model_config = SettingsConfigDict(
        env_prefix="HEALTH_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    devilbox: DevilboxSettings = Field(default_factory=DevilboxSettings)
    health: HealthSettings = Field(default_factory=HealthSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()

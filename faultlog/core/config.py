"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every variable is prefixed with ``FAULTLOG_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Defaults are safe for local development

Usage:
    from faultlog.core.config import settings

    # Access config
    depth = settings.max_cause_depth

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from faultlog.core.enums import Environment, LogSeverity


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (``FAULTLOG_*``)
        2. Default values

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Development logger
    log_level: str = Field(
        default="INFORMATION",
        description="Minimum severity rendered by the development logger "
        "(VERBOSE, DEBUG, INFORMATION, WARNING, ERROR, CRITICAL)",
    )
    fallback_logger_name: str = Field(
        default="faultlog.fallback",
        description="Name of the stdlib logger used as the last-resort sink",
    )

    # Message formatting
    max_cause_depth: int = Field(
        default=64,
        description="Maximum number of inner exceptions rendered for one error",
    )

    # Fault taxonomy
    more_info_base_url: str = Field(
        default="https://faultlog.readthedocs.io/en/latest/faults",
        description="Documentation page linked from every fault's more_info_url",
    )

    model_config = SettingsConfigDict(
        env_prefix="FAULTLOG_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize the log level and make sure it names a LogSeverity.

        Args:
            v: Severity name (case-insensitive). ``INFO`` is accepted as an
                alias for ``INFORMATION``.

        Returns:
            str: Upper-case LogSeverity member name.

        Raises:
            ValueError: If the name is not a LogSeverity member.
        """
        name = v.strip().upper()
        if name == "INFO":
            name = "INFORMATION"
        if name not in LogSeverity.__members__:
            raise ValueError(
                f"log_level must be one of {', '.join(LogSeverity.__members__)}"
            )
        return name

    @field_validator("max_cause_depth")
    @classmethod
    def validate_max_cause_depth(cls, v: int) -> int:
        """
        Validate that at least one inner exception can be rendered.

        Args:
            v: Maximum depth.

        Returns:
            int: Validated depth.

        Raises:
            ValueError: If depth is less than 1.
        """
        if v < 1:
            raise ValueError("max_cause_depth must be at least 1")
        return v

    @field_validator("more_info_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @property
    def log_severity(self) -> LogSeverity:
        """
        Minimum severity as an enum member.

        Returns:
            LogSeverity: Parsed log_level.
        """
        return LogSeverity[self.log_level]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()

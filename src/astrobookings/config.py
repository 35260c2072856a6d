"""
Application configuration and environment variables.

This module unifies configuration using pydantic-settings.
Variables can come from:
1. .env file
2. System environment variables (have priority)
3. Default values

Naming convention:
- In Python code: snake_case (log_level)
- In .env or ENV vars: UPPER_CASE (LOG_LEVEL)
- Pydantic automatically converts between both
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Unified application configuration.

    All variables can be defined in:
    - .env file: VARIABLE_NAME=value
    - Environment variables: export VARIABLE_NAME=value

    Example:
        # In .env or as environment variable:
        PORT=3000
        LOG_VERBOSE=false
        ID_STRATEGY=sequential
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allows using uppercase or lowercase
        extra="ignore",  # Ignores extra variables in .env
    )

    # ============================================================================
    # PROJECT SETTINGS
    # ============================================================================
    project_name: str = Field(
        default="AstroBookings Backend", description="Project name"
    )
    project_description: str = Field(
        default="Rockets, launches and customers for a space travel operator",
        description="Project description",
    )

    # ============================================================================
    # SERVER SETTINGS
    # ============================================================================
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    enable_docs: bool = Field(
        default=False, description="Enable API documentation (Swagger/ReDoc)"
    )

    # ============================================================================
    # LOGGING SETTINGS
    # ============================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_verbose: bool = Field(
        default=True,
        description="Emit INFO records; when false only WARNING and above are logged",
    )
    log_format: str = Field(
        default="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | trace_id={extra[trace_id]} | {name}:{function}:{line} - {message}",  # noqa: E501
        description="Log format",
    )
    logger_enqueue: bool = Field(
        default=False, description="Enqueue logs using multiprocessing"
    )

    # ============================================================================
    # CORS SETTINGS
    # ============================================================================
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Allowed origins for CORS (comma-separated)",
    )
    cors_allowed_methods: str = Field(
        default="GET,POST,PUT,DELETE,OPTIONS",
        description="Allowed HTTP methods for CORS",
    )
    cors_allowed_headers: str = Field(
        default="Content-Type,X-Trace-ID", description="Allowed headers for CORS"
    )

    # ============================================================================
    # REPOSITORY SETTINGS
    # ============================================================================
    repository_provider: Literal["memory"] = Field(
        default="memory",
        description="Repository provider (only in-memory storage is available)",
    )
    id_strategy: Literal["uuid", "sequential"] = Field(
        default="uuid",
        description="Identifier generation for rockets and launches (uuid, sequential)",
    )

    # ============================================================================
    # HELPER METHODS
    # ============================================================================

    def get_allowed_origins(self) -> list[str]:
        """
        Get list of allowed origins for CORS.

        Returns:
            list[str]: List of allowed origin URLs.
        """
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    def get_cors_allowed_methods(self) -> list[str]:
        """
        Get list of allowed HTTP methods for CORS.

        Returns:
            list[str]: List of allowed HTTP methods. Returns ["*"] if all methods are allowed.
        """
        if self.cors_allowed_methods == "*":
            return ["*"]
        return [method.strip() for method in self.cors_allowed_methods.split(",")]

    def get_cors_allowed_headers(self) -> list[str]:
        """
        Get list of allowed headers for CORS.

        Returns:
            list[str]: List of allowed headers. Returns ["*"] if all headers are allowed.
        """
        if self.cors_allowed_headers == "*":
            return ["*"]
        return [header.strip() for header in self.cors_allowed_headers.split(",")]

    def get_effective_log_level(self) -> str:
        """
        Get the log level actually applied to the handler.

        Non-verbose mode raises anything below WARNING up to WARNING.

        Returns:
            str: Upper-case loguru level name.
        """
        level = self.log_level.upper()
        if not self.log_verbose and level in ("TRACE", "DEBUG", "INFO", "SUCCESS"):
            return "WARNING"
        return level


# ============================================================================
# SINGLETON PATTERN - Global settings instance
# ============================================================================


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings (LRU cached).

    This function is cached, so the .env file is only read once.
    To refresh the configuration, clear the cache:
        get_settings.cache_clear()

    Usage:
        # In FastAPI endpoints (dependency injection):
        def my_endpoint(settings: Settings = Depends(get_settings)):
            print(settings.project_name)

        # In normal code (outside FastAPI):
        from astrobookings.config import get_settings
        settings = get_settings()
        print(settings.project_name)

    Returns:
        Settings: Application configuration instance.
    """
    return Settings()


# Create global instance for use outside FastAPI
settings = get_settings()

"""
Environment configuration loader with validation for the pilot passport.
"""

import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

TRUE_VALUES = ("true", "1", "yes", "on")


class PassportConfig(BaseModel):
    """Configuration model for the pilot passport with validation."""

    # Database Configuration
    database_url: str = Field(
        default="sqlite:///pilot_passport.db", description="Database connection URL"
    )
    database_echo: bool = Field(default=False, description="Log emitted SQL")

    # Application Configuration
    passport_debug: bool = Field(default=False, description="Enable debug mode")
    passport_log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("passport_log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {VALID_LOG_LEVELS}")
        return v.upper()

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v:
            raise ValueError("DATABASE_URL is required")
        return v


def load_config(env_file: Optional[str] = None) -> PassportConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        PassportConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    config_data: Dict[str, Any] = {
        "database_url": os.getenv("DATABASE_URL", "sqlite:///pilot_passport.db"),
        "database_echo": os.getenv("DATABASE_ECHO", "false").lower() in TRUE_VALUES,
        "passport_debug": os.getenv("PASSPORT_DEBUG", "false").lower() in TRUE_VALUES,
        "passport_log_level": os.getenv("PASSPORT_LOG_LEVEL", "INFO"),
    }

    try:
        return PassportConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}") from e


# Global configuration instance
_config: Optional[PassportConfig] = None


def get_config() -> PassportConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        PassportConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None

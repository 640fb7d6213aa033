"""
Configuration settings for gridref.
"""

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from gridref.core.errors import ConfigurationError


class Settings(BaseSettings):
    """
    Library settings with environment variable support.

    Attributes:
        default_accuracy: MGRS digit count used when none is given (0-5)
        environment: Deployment environment, drives log formatting
        log_level: Log level name, or None to pick one from the environment
        log_file: Optional path for a rotating log file
        json_logs: Whether file logs are written as JSON
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="GRIDREF_",
    )

    # Grid reference settings
    default_accuracy: int = Field(default=5, ge=0, le=5)

    # Logging settings
    log_level: Optional[str] = None
    log_file: Optional[Path] = None
    json_logs: bool = False

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def precision_meters(self) -> int:
        """Get the grid square size implied by the default accuracy."""
        return 10 ** (5 - self.default_accuracy)


def load_settings(**overrides: Any) -> Settings:
    """
    Build a Settings instance from the environment plus explicit overrides.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        Validated Settings instance

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return Settings(**overrides)
    except PydanticValidationError as e:
        keys = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigurationError(
            f"Invalid gridref configuration: {keys or 'unknown field'}",
            config_key=keys or None,
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


# Global settings instance
settings = load_settings()

"""Configuration management for the lending library.

Settings are loaded with pydantic-settings so that:
1. Defaults work with no environment at all
2. Every field can be overridden with a ``LENDING_LIBRARY_`` environment variable
3. Invalid values fail fast with a ``ValidationError``

The configuration object is passed explicitly to the components that need it
(for example ``CollectionManager``). ``get_config`` only provides the
process-wide default for callers that do not build their own.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibraryConfig(BaseSettings):
    """Runtime settings for a lending library."""

    model_config = SettingsConfigDict(
        env_prefix="LENDING_LIBRARY_",
        # Load from .env file if present
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    library_name: str = Field(
        default="lending-library",
        description="Name used in log output and the demo banner",
        pattern=r"^[a-z0-9-]+$",
    )

    strict_returns: bool = Field(
        default=False,
        description=(
            "Reject returning a record that is not lent out. When False, "
            "returns always succeed and simply mark the record available."
        ),
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("library_name")
    @classmethod
    def validate_library_name(cls, v: str) -> str:
        """Keep library names readable in log lines."""
        if len(v) < 3:
            raise ValueError("Library name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Library name must not exceed 50 characters")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    @property
    def effective_log_level(self) -> str:
        """Level actually applied to the root logger."""
        return "DEBUG" if self.debug else self.log_level


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: LibraryConfig | None = None


def get_config() -> LibraryConfig:
    """Get or create the process-wide configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = LibraryConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]

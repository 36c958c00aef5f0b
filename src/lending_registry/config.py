"""Configuration management for the lending registry.

Settings are read from the environment (``LENDING_REGISTRY_`` prefix) or a
local ``.env`` file and validated with Pydantic v2:
1. Loan policy - default and maximum loan periods
2. Logging - level and debug toggle
"""

import logging
import sys

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class RegistryConfig(BaseSettings):
    """Lending registry configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LENDING_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Loan Policy ===

    default_loan_days: int = Field(
        default=7,
        description="Loan period applied when a borrow request gives none",
        ge=1,
        le=365,
    )

    max_loan_days: int = Field(
        default=365,
        description="Longest loan period a borrow request may ask for",
        ge=1,
        le=3650,
    )

    # === Logging ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @model_validator(mode="after")
    def validate_loan_periods(self) -> "RegistryConfig":
        """Ensure the default loan period fits under the maximum."""
        if self.default_loan_days > self.max_loan_days:
            raise ValueError("default_loan_days cannot exceed max_loan_days")
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"

    def check_loan_days(self, borrow_days: int) -> int:
        """
        Validate a requested loan period against the policy.

        Raises:
            ValueError: If the period is below one day or above the maximum
        """
        if borrow_days < 1:
            raise ValueError(f"borrow_days must be at least 1, got {borrow_days}")
        if borrow_days > self.max_loan_days:
            raise ValueError(
                f"borrow_days must not exceed {self.max_loan_days}, got {borrow_days}"
            )
        return borrow_days


def configure_logging(config: RegistryConfig | None = None) -> None:
    """Configure root logging on stderr from the registry settings."""
    config = config or get_config()
    level = logging.DEBUG if config.debug else getattr(logging, config.log_level)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger().setLevel(level)


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: RegistryConfig | None = None


def get_config() -> RegistryConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = RegistryConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]

"""
Centralized settings configuration using Pydantic BaseSettings.

All tunables of the progression engine are defined here with types,
defaults, and validation. Values can be overridden from environment
variables or a .env file.

Usage:
    from engine.settings import get_settings, Settings

    # Module-level access
    settings = get_settings()
    print(settings.sts_max_suggestions)

    # Explicit settings for tests
    settings = Settings(environment="test", _env_file=None)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )

    # -------------------------------------------------------------------------
    # Numeric tolerance
    # -------------------------------------------------------------------------
    progression_epsilon: float = Field(
        default=1e-6,
        gt=0,
        description="Tolerance for 'strictly exceeds' comparisons between 1RM values",
    )

    # -------------------------------------------------------------------------
    # STS search
    # -------------------------------------------------------------------------
    sts_max_suggestions: int = Field(
        default=10,
        ge=1,
        description="Maximum number of STS candidates returned",
    )
    sts_search_window: int = Field(
        default=2,
        ge=0,
        description="Increments tried on each side of the solved base weight",
    )

    # -------------------------------------------------------------------------
    # RPT failure handling
    # -------------------------------------------------------------------------
    rpt_failure_threshold: int = Field(
        default=2,
        ge=1,
        description="Consecutive missed top sets before the top set is discounted",
    )
    rpt_failure_discount_percent: float = Field(
        default=10.0,
        ge=0,
        lt=100,
        description="Percentage removed from a failed set's weight",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Engine settings instance
    """
    return Settings()

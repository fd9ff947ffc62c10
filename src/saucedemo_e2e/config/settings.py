"""Suite settings using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SauceDemo E2E configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,  # SAUCE_PASSWORD= falls back to the default
        extra="ignore",
    )

    # Targets
    sauce_base_url: str = Field(
        default="https://www.saucedemo.com", description="SauceDemo storefront URL"
    )
    api_base_url: str = Field(
        default="http://localhost:3000",
        validation_alias=AliasChoices("base_url", "api_base_url"),
        description="REST backend URL (BASE_URL)",
    )

    # Role credentials
    sauce_standard_user: str = Field(default="standard_user")
    sauce_locked_out_user: str = Field(default="locked_out_user")
    sauce_problem_user: str = Field(default="problem_user")
    sauce_performance_glitch_user: str = Field(default="performance_glitch_user")
    sauce_error_user: str = Field(default="error_user")
    sauce_visual_user: str = Field(default="visual_user")
    sauce_password: str = Field(default="secret_sauce", description="Shared password")

    # Timeouts (milliseconds unless noted)
    login_redirect_timeout_ms: int = Field(default=10_000, ge=0)
    performance_redirect_timeout_ms: int = Field(default=15_000, ge=0)
    page_load_timeout_ms: int = Field(default=10_000, ge=0)
    logout_timeout_ms: int = Field(default=10_000, ge=0)
    probe_timeout_ms: int = Field(
        default=1_000, ge=0, description="Short wait used by visibility probes"
    )
    api_timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")

    # Visual regression
    snapshot_dir: Path = Field(default=Path("tests/e2e/__snapshots__"))
    visual_output_dir: Path = Field(default=Path("test-results/visual"))
    screenshot_dir: Path = Field(default=Path("test-results/screenshots"))
    default_max_diff_pixels: int = Field(default=100, ge=0)
    default_threshold: float = Field(default=0.2)
    update_snapshots: bool = Field(default=False, description="Rewrite baselines")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    debug: bool = Field(default=False, description="Pretty console logs")

    @field_validator("sauce_base_url", "api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate URL scheme and drop the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("default_threshold")
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Similarity threshold is a ratio."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("Threshold must be between 0 and 1")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

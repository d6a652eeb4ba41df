"""Process settings using Pydantic Settings.

These come from the environment only and tell the process where to find
its YAML configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardSettings(BaseSettings):
    """Settings loaded from DASHBOARD_* environment variables."""

    config_dir: str = "config"
    app_env: str = "dev"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="DASHBOARD_",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> DashboardSettings:
    """Get cached settings instance."""
    return DashboardSettings()

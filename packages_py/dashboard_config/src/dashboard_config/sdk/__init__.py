"""SDK utilities for dashboard configuration management.

Provides high-level functions for loading configuration with sensible defaults.
"""

import os
from typing import Optional

from ..config_store import config, LoadResult
from ..settings import get_settings


def load_yaml_config(
    config_dir: Optional[str] = None,
    app_env: Optional[str] = None,
) -> LoadResult:
    """
    Load YAML configuration with sensible defaults.

    Args:
        config_dir: Path to config directory (default: DASHBOARD_CONFIG_DIR)
        app_env: Environment name (default: APP_ENV, then DASHBOARD_APP_ENV)

    Returns:
        LoadResult with load status information
    """
    settings = get_settings()
    path = config_dir or settings.config_dir

    # APP_ENV wins over the prefixed setting so deployments can share one variable
    raw_env = app_env or os.environ.get("APP_ENV") or settings.app_env
    env = raw_env.lower()

    return config.load(config_dir=path, app_env=env)

"""Configuration store singleton for dashboard YAML config management.

Loads ``dashboard.{APP_ENV}.yaml`` (falling back to ``dashboard.yaml``)
once at startup and exposes both the raw mapping and the validated
DashboardConfig model.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from .exceptions import ConfigNotInitializedError, ConfigurationError
from .types import DashboardConfig

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Result of loading configuration files."""
    files_loaded: List[str] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)
    config_file: Optional[str] = None
    app_env: Optional[str] = None


class ConfigStore:
    """
    Singleton store for configuration loaded from YAML files.
    """
    _instance: Optional["ConfigStore"] = None
    _initialized: bool = False

    def __new__(cls) -> "ConfigStore":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._data = {}
            cls._instance._config = None
            cls._instance._load_result = None
            cls._instance._initialized = False
        return cls._instance

    def _find_config_path(self, base_path: Path, app_env: str) -> Path:
        """Find the configuration file path based on APP_ENV."""
        env_specific = base_path / f"dashboard.{app_env}.yaml"
        if env_specific.exists():
            logger.debug(f"Using environment-specific config: {env_specific}")
            return env_specific

        default = base_path / "dashboard.yaml"
        if default.exists():
            logger.debug(f"Using default config: {default}")
            return default

        raise FileNotFoundError(
            f"No config file found. Tried: {env_specific}, {default}"
        )

    def _parse_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Parse a YAML file and return its contents."""
        logger.debug(f"Parsing YAML file: {file_path}")
        content = file_path.read_text(encoding="utf-8")
        data = yaml.safe_load(content) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Top level of {file_path} must be a mapping, got {type(data).__name__}"
            )
        return data

    def _validate_config(self, data: Dict[str, Any]) -> DashboardConfig:
        """Validate and parse configuration data into DashboardConfig model."""
        logger.debug("Validating configuration against DashboardConfig model")
        try:
            return DashboardConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid dashboard configuration: {e}") from e

    def load_data(self, data: Dict[str, Any]) -> DashboardConfig:
        """
        Validate an already parsed configuration mapping and store it.

        Args:
            data: Raw configuration mapping

        Returns:
            The validated DashboardConfig

        Raises:
            ConfigurationError: If validation fails
        """
        validated = self._validate_config(data)
        self._data = dict(data)
        self._config = validated
        self._initialized = True
        return validated

    def load(
        self,
        config_dir: str,
        app_env: Optional[str] = None,
    ) -> LoadResult:
        """
        Load configuration from a YAML file.

        A missing directory or file is recorded in the result and leaves the
        store initialized with default settings. A file that cannot be parsed
        or validated is recorded and raised.

        Args:
            config_dir: Path to the configuration directory
            app_env: Environment name (default: from APP_ENV env var or 'dev')

        Returns:
            LoadResult with information about loaded config and any errors

        Raises:
            ConfigurationError: If the file is not valid YAML or fails validation
        """
        result = LoadResult()

        env = app_env or os.environ.get("APP_ENV", "dev")
        result.app_env = env
        logger.info(f"Loading dashboard config for APP_ENV={env}")

        self._load_result = result
        path = Path(config_dir)
        if not path.exists():
            error_msg = f"Config directory does not exist: {path}"
            logger.error(error_msg)
            result.errors.append({"path": str(path), "error": error_msg})
            self.load_data({})
            return result

        try:
            config_path = self._find_config_path(path, env)
        except FileNotFoundError as e:
            error_msg = str(e)
            logger.error(error_msg)
            result.errors.append({"path": str(path), "error": error_msg})
            self.load_data({})
            return result

        result.config_file = str(config_path)
        try:
            raw_data = self._parse_yaml(config_path)
            self.load_data(raw_data)
        except yaml.YAMLError as e:
            error_msg = f"YAML parsing error: {e}"
            logger.error(error_msg)
            result.errors.append({"path": str(config_path), "error": error_msg})
            raise ConfigurationError(error_msg) from e
        except ConfigurationError as e:
            logger.error(str(e))
            result.errors.append({"path": str(config_path), "error": str(e)})
            raise

        result.files_loaded.append(str(config_path))
        logger.info(f"Successfully loaded config from: {config_path}")
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a top-level configuration value.

        Args:
            key: The configuration key (e.g., 'Services', 'CoordinateSource')
            default: Default value if not found

        Returns:
            The value or default if not found
        """
        return self._data.get(key, default)

    def get_nested(self, *keys: str, default: Any = None) -> Any:
        """
        Get a nested configuration value.

        Args:
            *keys: Path of keys to traverse (e.g., 'Services', 'StammServiceUrl')
            default: Default value if not found

        Returns:
            The value or default if not found
        """
        current = self._data
        for key in keys:
            if isinstance(current, dict):
                current = current.get(key)
                if current is None:
                    return default
            else:
                return default
        return current

    def get_config(self) -> DashboardConfig:
        """
        Get the validated DashboardConfig object.

        Raises:
            ConfigNotInitializedError: If nothing has been loaded yet
        """
        if self._config is None:
            raise ConfigNotInitializedError(
                "Dashboard config has not been loaded; call load() first"
            )
        return self._config

    def get_all(self) -> Dict[str, Any]:
        """Get all loaded configuration data."""
        return dict(self._data)

    def is_initialized(self) -> bool:
        """Check if the store has been initialized."""
        return self._initialized

    def get_load_result(self) -> Optional[LoadResult]:
        """Get the result from the last load operation."""
        return self._load_result

    def reset(self) -> None:
        """
        Clear the store and reset to uninitialized state.
        """
        self._data = {}
        self._config = None
        self._load_result = None
        self._initialized = False


# Singleton instance
config = ConfigStore()

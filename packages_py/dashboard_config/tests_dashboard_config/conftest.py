"""
Shared fixtures for dashboard_config tests.
"""
from pathlib import Path

import pytest
import yaml

from dashboard_config import config, get_settings


@pytest.fixture(autouse=True)
def reset_config():
    """Reset config store and cached settings around each test."""
    config.reset()
    get_settings.cache_clear()
    yield
    config.reset()
    get_settings.cache_clear()


@pytest.fixture
def sample_config():
    """Sample dashboard configuration as written in YAML."""
    return {
        "Services": {
            "StammServiceUrl": "",
            "ServiceTemplateUrl": "https://{service}.internal/api",
        },
        "Authentication": {
            "TokenUrl": "https://auth.internal/connect/token",
            "ClientId": "dashboard",
            "EnvClientSecret": "DASHBOARD_CLIENT_SECRET",
        },
        "CoordinateSource": "Nominatim",
        "EmployeeAddressesSource": "OBSStamm",
        "Nominatim": {"CountryCodes": "de", "RequestIntervalSeconds": 0},
        "Company": {
            "Name": "OBS",
            "Street": "Hauptstr. 1",
            "PostalCode": "10115",
            "City": "Berlin",
            "Latitude": 52.53,
            "Longitude": 13.38,
        },
        "Circles": [{"Name": "dev", "DisplayName": "Development", "Color": "#00ff00"}],
    }


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a mapping as dashboard.<env>.yaml (or dashboard.yaml) into tmp_path."""

    def _write(data, app_env=None):
        name = f"dashboard.{app_env}.yaml" if app_env else "dashboard.yaml"
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write

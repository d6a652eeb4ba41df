"""
Python client for the OBS-Stamm API.

Provides the persons endpoints and a mergeable client configuration.
"""
from .configuration import (
    Configuration,
    merge_configurations,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from .exceptions import StammApiError
from .api import PersonsApi

__all__ = [
    "Configuration",
    "merge_configurations",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "StammApiError",
    "PersonsApi",
]

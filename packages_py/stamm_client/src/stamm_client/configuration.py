"""
Configuration for stamm_client.
"""
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .utils import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 100.0
DEFAULT_USER_AGENT = "OBS-Stamm-Client/python"


def _mask_sensitive(value: Optional[str], visible_chars: int = 4) -> str:
    """Mask sensitive value for safe logging."""
    if value is None:
        return "<None>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


@dataclass
class Configuration:
    """Settings of an OBS-Stamm API client.

    Every field defaults to None ("unset") so that a partial configuration,
    e.g. one carrying only an access token, can be merged over a complete
    one with merge_configurations().
    """

    base_path: Optional[str] = None
    access_token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    user_agent: Optional[str] = None
    timeout: Optional[float] = None  # seconds
    default_headers: Optional[Dict[str, str]] = None
    api_key: Optional[Dict[str, str]] = None
    api_key_prefix: Optional[Dict[str, str]] = None

    @classmethod
    def default(cls, base_path: Optional[str] = None) -> "Configuration":
        """Return the configuration a freshly constructed client starts with."""
        return cls(
            base_path=base_path,
            user_agent=DEFAULT_USER_AGENT,
            timeout=DEFAULT_TIMEOUT,
            default_headers={},
            api_key={},
            api_key_prefix={},
        )

    def __repr__(self) -> str:
        """Safe repr that masks sensitive values."""
        return (
            f"Configuration(base_path={self.base_path!r}, "
            f"access_token={_mask_sensitive(self.access_token)!r}, "
            f"username={self.username!r}, "
            f"password={_mask_sensitive(self.password)!r}, "
            f"user_agent={self.user_agent!r}, "
            f"timeout={self.timeout!r}, "
            f"default_headers={self.default_headers!r}, "
            f"api_key_names={sorted(self.api_key or {})!r})"
        )


def _is_set(value: Any) -> bool:
    if isinstance(value, dict):
        return any(item is not None for item in value.values())
    return value is not None and value != ""


def merge_configurations(credential: Configuration, base: Configuration) -> Configuration:
    """
    Merge a credential configuration over a base configuration.

    Each field of the result takes the credential's value when it is set
    (not None, not empty) and the base's value otherwise. Mapping fields are
    merged key by key with the credential's entries winning. Neither input
    is modified.

    Args:
        credential: Partial configuration, typically only access_token
        base: The client's existing configuration

    Returns:
        A new Configuration
    """
    values: Dict[str, Any] = {}
    for f in fields(Configuration):
        credential_value = getattr(credential, f.name)
        base_value = getattr(base, f.name)

        if not _is_set(credential_value):
            values[f.name] = dict(base_value) if isinstance(base_value, dict) else base_value
        elif isinstance(credential_value, dict):
            values[f.name] = deep_merge(base_value if isinstance(base_value, dict) else None, credential_value)
        else:
            values[f.name] = credential_value

    merged = Configuration(**values)
    logger.debug(f"merge_configurations: {merged!r}")
    return merged

"""
Deep merge utility for client configuration mappings.

Recursively merges source dict into target dict. Source values
override target values, with nested dicts being merged recursively.
"""

from typing import Any, Dict, Optional


def deep_merge(
    target: Optional[Dict[str, Any]],
    source: Optional[Dict[str, Any]],
) -> Dict[str, Any]:
    """
    Deep merge two dictionaries recursively.

    Args:
        target: The base dictionary to merge into
        source: The dictionary with override values

    Returns:
        A new merged dictionary; neither argument is modified

    Example:
        >>> base = {"Accept": "application/json", "X-Tenant": "obs"}
        >>> override = {"X-Tenant": "obs-test", "X-Trace": None}
        >>> deep_merge(base, override)
        {'Accept': 'application/json', 'X-Tenant': 'obs-test'}
    """
    result: Dict[str, Any] = dict(target or {})

    for key, source_value in (source or {}).items():
        # Skip None values in source (don't override with None)
        if source_value is None:
            continue

        target_value = result.get(key)

        if isinstance(source_value, dict) and isinstance(target_value, dict):
            result[key] = deep_merge(target_value, source_value)
        else:
            result[key] = source_value

    return result

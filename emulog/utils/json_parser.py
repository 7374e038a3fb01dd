"""
Helpers for reading provider JSON envelopes.
Providers are inconsistent about key capitalisation, so lookups ignore case.
"""

from typing import Any, Optional


def get_key(data: Any, key: str, default: Any = None) -> Any:
    """Case-insensitive dict lookup. Exact matches win over folded ones."""
    if not isinstance(data, dict):
        return default
    if key in data:
        return data[key]
    folded = key.lower()
    for k, v in data.items():
        if isinstance(k, str) and k.lower() == folded:
            return v
    return default


def get_nested(data: dict, *keys: str, default: Any = None) -> Any:
    """Safely navigate nested dict keys. Returns default if any key is missing."""
    current = data
    for key in keys:
        current = get_key(current, key, default)
        if current is default:
            return default
    return current


def get_string(data: dict, key: str) -> Optional[str]:
    """Return data[key] if it is a non-empty string, otherwise None."""
    value = get_key(data, key)
    if isinstance(value, str) and value:
        return value
    return None

"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Keys that accept either a colon-separated string or a list of directories
SEARCH_PATH_KEYS = {"session_dirs"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - ``None`` in 'update' (an empty YAML key) keeps the 'base' value.
    - Lists given for search-path keys are joined with ':'.
    """
    result = base.copy()
    for key, value in update.items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif key in SEARCH_PATH_KEYS and isinstance(value, list):
            result[key] = ":".join(str(v) for v in value)
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result

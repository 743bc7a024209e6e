"""Logic for layering user configuration over the defaults."""

from typing import Any

# Lists under these keys accumulate instead of being replaced.
ADDITIVE_LIST_KEYS = {"extensions", "test_path_markers"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge `update` into a copy of `base`.

    - Nested dictionaries are merged recursively.
    - Lists replace the base list, except under ADDITIVE_LIST_KEYS where the
      two are unioned and sorted.
    - Scalars are replaced.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_LIST_KEYS
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            result[key] = sorted(set(current) | set(value))
        else:
            result[key] = value
    return result

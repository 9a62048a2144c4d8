"""
Utility functions for the CollectorConf configuration system.

This module provides helper functions used by the configuration system,
including deep dictionary merging and conversion between nested trees and
flat dot-delimited keys.
"""

import copy
from typing import Any, Dict, List

KEY_DELIMITER = '.'


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries, with override values taking precedence.

    Rules:
    - If both values are dictionaries, recursively merge them
    - If the value is a list, replace it completely (no merging)
    - Otherwise, override the base value with the override value

    Neither input is mutated.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        New dictionary with merged values
    """
    result = copy.deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)

    return result


def split_key(key: str) -> List[str]:
    """Split a dot-delimited key into its path segments."""
    return key.split(KEY_DELIMITER)


def flatten(tree: Dict[str, Any], prefix: str = '') -> Dict[str, Any]:
    """
    Flatten a nested dictionary into ``{dotted_key: leaf_value}``.

    Lists and empty dictionaries are leaves.

    Example:
        >>> flatten({'processors': {'batch': {'timeout': '2s'}}, 'a': [1, 2]})
        {'processors.batch.timeout': '2s', 'a': [1, 2]}
    """
    flat: Dict[str, Any] = {}
    for key, value in tree.items():
        full_key = f"{prefix}{KEY_DELIMITER}{key}" if prefix else str(key)
        if isinstance(value, dict) and value:
            flat.update(flatten(value, full_key))
        else:
            flat[full_key] = value
    return flat



def lower_keys(value: Any) -> Any:
    """
    Lowercase every map key in ``value``, recursively.

    Lists are left as they are; non-map values are returned unchanged.
    """
    if isinstance(value, dict):
        return {str(key).lower(): lower_keys(item) for key, item in value.items()}
    return value

"""
CollectorConf Configuration System.

This package provides the collector's hierarchical configuration store and
the ``--set`` command-line override mechanism.

Usage:
    from CollectorConf.config import get_config, add_set_flag_properties

    store = get_config()
    store.load_from_file("config.yaml")

    # Arrays are overridden, maps are joined
    add_set_flag_properties(store, ["processors.batch.timeout=2s"])
"""

from CollectorConf.config.manager import ConfigManager, get_config
from CollectorConf.config.properties import decode_properties
from CollectorConf.config.set_flag import (
    SET_FLAG_NAME,
    add_set_flag_properties,
    apply_set_flag,
    get_set_flag_values,
    set_flag_option,
)
from CollectorConf.config.utils import deep_merge, flatten

__all__ = [
    "ConfigManager",
    "get_config",
    "decode_properties",
    "SET_FLAG_NAME",
    "add_set_flag_properties",
    "apply_set_flag",
    "get_set_flag_values",
    "set_flag_option",
    "deep_merge",
    "flatten",
]

"""
Configuration manager for CollectorConf.

This module implements the ConfigManager class, the in-memory hierarchical
store backing the collector's runtime settings, with support for
hierarchical keys, deep merging, and loading from files.
"""

import copy
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from CollectorConf.config.utils import deep_merge, flatten, lower_keys, split_key
from CollectorConf.exceptions import ConfigFileError
from CollectorConf.utils.logging import get_logger

logger = get_logger(__name__)

# Sentinel distinguishing "missing" from a stored None
_MISSING = object()


class ConfigManager:
    """
    Hierarchical configuration store for the collector.

    Features:
    - Hierarchical key access (e.g., "processors.batch.timeout")
    - Case-insensitive keys, stored lowercased
    - Implicit creation of intermediate maps on set
    - Map values are joined on set, scalars and lists are replaced
    - Loading from YAML or JSON files

    Attributes:
        _config (Dict[str, Any]): The configuration tree
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        """
        Create a store, optionally seeded with a copy of ``initial``.

        Args:
            initial: Nested mapping to start from. Defaults to an empty store.
        """
        self._config: Dict[str, Any] = copy.deepcopy(lower_keys(initial)) if initial else {}

    def _lookup(self, key: str) -> Any:
        if not key:
            return _MISSING

        value: Any = self._config
        for part in split_key(key.lower()):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return _MISSING
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key (str): Hierarchical key using dot notation (e.g., "processors.batch.timeout")
            default (Any, optional): Value returned when the key is not found. Defaults to None.

        Returns:
            Any: The configuration value if found, otherwise the default value.

        Examples:
            >>> store = ConfigManager({"processors": {"batch": {"timeout": "2s"}}})
            >>> store.get("processors.batch.timeout")
            '2s'
            >>> store.get("exporters.otlp.endpoint", "localhost:4317")
            'localhost:4317'
        """
        value = self._lookup(key)
        return default if value is _MISSING else value

    def is_set(self, key: str) -> bool:
        """Return True if ``key`` resolves to a value (including None)."""
        return self._lookup(key) is not _MISSING

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value using dot notation.

        Intermediate maps are created as needed, replacing any non-map value
        found on the way. When both the current value and ``value`` are maps
        they are deep-merged so sibling keys survive; any other value
        replaces what was there.

        Args:
            key (str): Hierarchical key using dot notation
            value (Any): Value to set

        Examples:
            >>> store = ConfigManager({"m": {"z": 3}})
            >>> store.set("m", {"x": 1})
            >>> store.get("m")
            {'z': 3, 'x': 1}
        """
        if not key:
            return

        parts = split_key(key.lower())
        value = lower_keys(value)
        config = self._config

        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                config[part] = {}
            config = config[part]

        leaf = parts[-1]
        current = config.get(leaf)
        if isinstance(current, dict) and isinstance(value, dict):
            config[leaf] = deep_merge(current, value)
        else:
            config[leaf] = copy.deepcopy(value)

    def all_keys(self) -> List[str]:
        """
        Get every leaf key in dot notation, sorted.

        Lists and empty maps are leaves.

        Examples:
            >>> ConfigManager({"a": {"b": 1, "c": [1, 2]}, "d": {}}).all_keys()
            ['a.b', 'a.c', 'd']
        """
        return sorted(flatten(self._config))

    def merge(self, other: Dict[str, Any]) -> None:
        """
        Deep-merge a nested mapping into the store.

        Args:
            other: Mapping whose values take precedence over the current ones
        """
        self._config = deep_merge(self._config, lower_keys(other))

    def load_from_file(self, path: Union[str, Path]) -> None:
        """
        Load configuration from a YAML or JSON file and merge it in.

        Args:
            path (Union[str, Path]): Path to the configuration file

        Raises:
            ConfigFileError: If the file is missing, has an unsupported
                extension, cannot be decoded, or its root is not a mapping.

        Examples:
            >>> store = ConfigManager()
            >>> store.load_from_file("/etc/otelcol/config.yaml")
        """
        path = Path(path)

        if not path.is_file():
            raise ConfigFileError(
                f"Configuration file not found: {path}",
                context={'path': str(path)}
            )

        suffix = path.suffix.lower()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                if suffix in ('.yaml', '.yml'):
                    data = yaml.safe_load(f)
                elif suffix == '.json':
                    data = json.load(f)
                else:
                    raise ConfigFileError(
                        f"Unsupported configuration file format: {path.suffix}",
                        context={'path': str(path)}
                    )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigFileError(
                f"Failed to decode configuration file {path}: {e}",
                context={'path': str(path)},
                cause=e
            ) from e

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigFileError(
                f"Configuration root must be a mapping, got: {type(data).__name__}",
                context={'path': str(path)}
            )

        self.merge(data)
        logger.info(f"Loaded configuration from {path}")

    def get_all(self) -> Dict[str, Any]:
        """
        Get the entire configuration dictionary.

        Returns:
            Dict[str, Any]: A deep copy of the configuration tree
        """
        return copy.deepcopy(self._config)

    def reset(self) -> None:
        """Remove every key from the store."""
        self._config = {}


_default_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """
    Get the process-wide ConfigManager instance.

    Creates an empty store on first use.

    Examples:
        >>> from CollectorConf.config import get_config
        >>> get_config().set("processors.batch.timeout", "2s")
    """
    global _default_manager
    if _default_manager is None:
        _default_manager = ConfigManager()
    return _default_manager

"""
CollectorConf - configuration loading for a telemetry collector with
command-line ``--set`` overrides.

Key Components:
- ConfigManager: Hierarchical configuration store with dot-notation keys
- add_set_flag_properties: Apply ``key=value`` overrides to a store
- CLI: Command-line interface for inspecting the effective configuration

Usage Examples:
    from CollectorConf import ConfigManager, add_set_flag_properties

    store = ConfigManager()
    store.load_from_file("config.yaml")
    add_set_flag_properties(store, ["processors.batch.timeout=2s"])

    # Setting the log level
    from CollectorConf import set_log_level
    set_log_level('debug')
"""

__version__ = '1.0.0'

from CollectorConf.utils.logging import get_logger, set_log_level, configure_logging
from CollectorConf.config import ConfigManager, get_config, add_set_flag_properties, apply_set_flag
from CollectorConf.exceptions import CollectorConfError, ConfigError, ParseError, FlagReadError, ConfigFileError

logger = get_logger(__name__)

__all__ = [
    'ConfigManager',
    'get_config',
    'add_set_flag_properties',
    'apply_set_flag',
    'set_log_level',
    'configure_logging',
    'CollectorConfError',
    'ConfigError',
    'ParseError',
    'FlagReadError',
    'ConfigFileError',
]

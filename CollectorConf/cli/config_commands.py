"""
Configuration-related commands for the CollectorConf CLI.

This module builds the effective configuration for a command invocation
(config file first, then ``--set`` overrides) and provides commands for
viewing it.
"""

from typing import Any, Optional

import click

from CollectorConf.config import ConfigManager, apply_set_flag
from CollectorConf.exceptions import CollectorConfError
from CollectorConf.utils import format_json, format_yaml, report_error
from CollectorConf.utils.logging import get_logger

logger = get_logger(__name__)


def build_config(ctx: click.Context, config_path: Optional[str] = None) -> ConfigManager:
    """
    Build the effective configuration for the invoked command.

    Args:
        ctx: Context of the invoked command, carrying its ``--set`` values
        config_path: Optional YAML or JSON file loaded before the overrides

    Returns:
        ConfigManager: The populated store

    Raises:
        ConfigFileError: If the configuration file cannot be loaded
        FlagReadError: If the ``--set`` flag cannot be read
        ParseError: If an override is malformed
    """
    store = ConfigManager()
    if config_path:
        store.load_from_file(config_path)
    apply_set_flag(store, ctx)
    logger.debug(f"Effective configuration has {len(store.all_keys())} key(s)")
    return store


def _render(data: Any, format_type: str) -> str:
    if format_type.lower() == 'json':
        return format_json(data)
    return format_yaml(data).rstrip('\n')


def config_show(ctx: click.Context, config_path: Optional[str] = None,
                format_type: str = 'yaml', section: Optional[str] = None) -> int:
    """
    Display the effective configuration.

    Args:
        ctx: Context of the invoked command
        config_path: Optional configuration file
        format_type: Output format (yaml or json)
        section: Optional section to display (e.g., 'processors.batch')

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        store = build_config(ctx, config_path)
    except CollectorConfError as e:
        return report_error(e, "Error building configuration")

    if section:
        if not store.is_set(section):
            click.echo(f"Error: Section '{section}' not found in configuration", err=True)
            return 1
        data = store.get(section)
    else:
        data = store.get_all()

    click.echo(_render(data, format_type))
    return 0


def config_keys(ctx: click.Context, config_path: Optional[str] = None) -> int:
    """
    List every leaf key of the effective configuration with its value.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        store = build_config(ctx, config_path)
    except CollectorConfError as e:
        return report_error(e, "Error building configuration")

    for key in store.all_keys():
        click.echo(f"{key}={format_json(store.get(key), indent=None)}")
    return 0


def config_get(ctx: click.Context, key: str, config_path: Optional[str] = None) -> int:
    """
    Print a single value of the effective configuration as JSON.

    Returns:
        Exit code (0 for success, 1 if the key is not set or on error)
    """
    try:
        store = build_config(ctx, config_path)
    except CollectorConfError as e:
        return report_error(e, "Error building configuration")

    if not store.is_set(key):
        click.echo(f"Error: Key '{key}' not found in configuration", err=True)
        return 1

    click.echo(format_json(store.get(key)))
    return 0

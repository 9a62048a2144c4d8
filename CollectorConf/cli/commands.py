"""
Command-line interface (CLI) commands for the CollectorConf package.

This module provides CLI commands for inspecting the effective collector
configuration, including ``--set`` overrides.
"""

import click

from CollectorConf.cli.config_commands import config_get, config_keys, config_show
from CollectorConf.config import set_flag_option
from CollectorConf.utils.logging import get_logger, set_log_level

logger = get_logger(__name__)


# Common options
def config_path_option(f):
    return click.option('--config', 'config_path', type=click.Path(dir_okay=False),
                        help='Path to a YAML or JSON collector configuration file')(f)


def apply_log_level(ctx, param, value):
    if value:
        set_log_level(value)
    return value


def log_level_option(f):
    return click.option('--log-level',
                        type=click.Choice(['debug', 'info', 'warning', 'error', 'critical'], case_sensitive=False),
                        callback=apply_log_level, expose_value=False, is_eager=True,
                        help='Set the logging level')(f)


@click.group()
def cli():
    """CollectorConf CLI for inspecting collector configuration."""
    pass


@cli.group('config')
def config_group():
    """
    Inspect the effective collector configuration.

    The configuration file is loaded first; --set overrides are applied on
    top of it. Array properties are overridden and maps are joined.
    """
    pass


@config_group.command('show')
@config_path_option
@set_flag_option
@click.option('--format', 'format_type', type=click.Choice(['yaml', 'json'], case_sensitive=False),
              default='yaml', help='Output format (yaml or json)')
@click.option('--section', help='Show only a specific configuration section')
@log_level_option
@click.pass_context
def show_config_command(ctx, config_path, format_type, section, **_):
    """Display the effective configuration."""
    ctx.exit(config_show(ctx, config_path, format_type, section))


@config_group.command('keys')
@config_path_option
@set_flag_option
@log_level_option
@click.pass_context
def keys_config_command(ctx, config_path, **_):
    """List every configuration key with its value."""
    ctx.exit(config_keys(ctx, config_path))


@config_group.command('get')
@click.argument('key')
@config_path_option
@set_flag_option
@log_level_option
@click.pass_context
def get_config_command(ctx, key, config_path, **_):
    """Print the value of a single configuration key."""
    ctx.exit(config_get(ctx, key, config_path))


def main():
    """Main entry point for the CollectorConf command-line interface."""
    logger.debug("Starting CollectorConf CLI")
    return cli(prog_name='CollectorConf')


if __name__ == '__main__':
    main()

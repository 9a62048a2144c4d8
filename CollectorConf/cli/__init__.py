"""
Command-line interface module for the CollectorConf package.

This module provides a command-line interface for inspecting the effective
collector configuration after the configuration file and any ``--set``
overrides have been applied.

Key Components:
- main: Main entry point for the CLI
- cli: The click command group
"""

from CollectorConf.cli.commands import cli, main

__all__ = ['cli', 'main']

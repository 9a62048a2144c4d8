"""
Utility functions for the CollectorConf package.

This module provides helpers used across the package, including error
reporting for CLI commands and JSON/YAML output formatting.
"""

import json
import sys
from typing import Any, Optional

import yaml

from CollectorConf.exceptions import CollectorConfError
from CollectorConf.utils.logging import get_logger

logger = get_logger(__name__)


def report_error(error: Exception, additional_context: Optional[str] = None) -> int:
    """
    Log an error and print a user-facing message to stderr.

    CollectorConf errors print their ``user_message`` and technical message;
    anything else is reported as unexpected with its traceback logged at
    debug level.

    Args:
        error: The exception that occurred
        additional_context: Optional description of what was being done

    Returns:
        The exit code the command should terminate with.

    Example:
        >>> try:
        ...     apply_set_flag(store, ctx)
        ... except ConfigError as e:
        ...     sys.exit(report_error(e, "Error applying overrides"))
    """
    prefix = f"{additional_context}: " if additional_context else ""

    if isinstance(error, CollectorConfError):
        logger.error(f"{prefix}{error.message}", extra={'error_code': error.error_code})
        if error.traceback:
            logger.debug(f"Traceback: {error.traceback}")
        print(f"Error: {error.user_message} ({error})", file=sys.stderr)
        return error.exit_code

    logger.exception(f"{prefix}{error}")
    print(f"Error: An unexpected error occurred: {error}", file=sys.stderr)
    return 1


def format_json(data: Any, indent: int = 2, sort_keys: bool = False) -> str:
    """
    Format data as a JSON string.

    Non-serializable values (dates parsed from YAML, for instance) are
    rendered with ``str``.

    Example:
        >>> print(format_json({'processors': {'batch': {'timeout': '2s'}}}))
        {
          "processors": {
            "batch": {
              "timeout": "2s"
            }
          }
        }
    """
    return json.dumps(
        data,
        indent=indent,
        ensure_ascii=False,
        sort_keys=sort_keys,
        default=str
    )


def format_yaml(data: Any) -> str:
    """Format data as block-style YAML."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

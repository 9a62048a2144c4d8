"""
Centralized logging configuration for the CollectorConf package.

This module provides functions for configuring logging across the package.
It allows for centralized control of logging behavior and exposes functions for
users to modify logging behavior (e.g., changing log levels).
"""

import json
import logging
import os
import platform
import socket
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Dict, Any, Union, List

# Default logging format
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DEFAULT_JSON_FORMAT = False

# Environment variables that can be used to set log level, format and file
LOG_LEVEL_ENV_VAR = 'COLLECTORCONF_LOG_LEVEL'
LOG_FORMAT_ENV_VAR = 'COLLECTORCONF_LOG_FORMAT'  # Can be 'json' or 'text'
LOG_FILE_ENV_VAR = 'COLLECTORCONF_LOG_FILE'

# Mapping of string log levels to logging module constants
LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
    'critical': logging.CRITICAL,
}

_logging_configured = False

_service_info = {
    'service_name': 'collectorconf',
    'service_version': None,  # populated by configure_logging
    'hostname': socket.gethostname(),
    'os': platform.system(),
}


class JsonFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as a JSON string."""
        log_data = {
            'timestamp': self.formatTime(record, '%Y-%m-%dT%H:%M:%S'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        for key, value in _service_info.items():
            if value is not None:
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info),
            }

        # Extra context attached by StructuredLoggerAdapter
        extras = getattr(record, 'extras', None)
        if extras:
            for key, value in extras.items():
                log_data[key] = value

        return json.dumps(log_data, default=str)


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Adapter for structured logging with consistent fields.

    This adapter attaches additional context to log messages
    and ensures consistent field names across all logs.
    """

    def __init__(self, logger: logging.Logger, extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(logger, extra or {})

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """
        Merge the adapter's context with any ``extra`` passed to the call.

        The merged mapping is exposed to formatters as ``record.extras``.
        """
        extras = dict(self.extra)
        if 'extra' in kwargs:
            extras.update(kwargs['extra'])

        kwargs_copy = kwargs.copy()
        kwargs_copy['extra'] = {'extras': extras}
        return msg, kwargs_copy


def configure_logging(level: Optional[Union[int, str]] = None,
                      format_str: Optional[str] = None,
                      use_json: Optional[bool] = None,
                      log_file: Optional[str] = None) -> None:
    """
    Configure logging for the CollectorConf package.

    Sets up handlers and formatting on the root logger. Called once on import
    of this module; calling it again with explicit arguments reconfigures.

    Args:
        level: Log level to use (default: INFO or value from COLLECTORCONF_LOG_LEVEL)
        format_str: Log format string for text format (default: predefined format)
        use_json: Whether to use JSON structured logging (default: from COLLECTORCONF_LOG_FORMAT, else text)
        log_file: Optional path to a log file (if not set, logs to stderr only)
    """
    global _logging_configured

    if _logging_configured and level is None and format_str is None and use_json is None and log_file is None:
        return

    if level is None:
        env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
        level = env_level.lower() if env_level else logging.INFO

    if isinstance(level, str):
        level = LOG_LEVELS.get(level.lower(), logging.INFO)

    if format_str is None:
        format_str = DEFAULT_LOG_FORMAT

    if use_json is None:
        env_format = os.environ.get(LOG_FORMAT_ENV_VAR, '').lower()
        use_json = env_format == 'json' if env_format else DEFAULT_JSON_FORMAT

    if log_file is None:
        log_file = os.environ.get(LOG_FILE_ENV_VAR)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicate logs
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        try:
            handlers.append(RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5
            ))
        except OSError as e:
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    for handler in handlers:
        if use_json:
            handler.setFormatter(JsonFormatter())
        else:
            handler.setFormatter(logging.Formatter(format_str))
        root_logger.addHandler(handler)

    _logging_configured = True

    try:
        from CollectorConf import __version__
        _service_info['service_version'] = __version__
    except ImportError:
        pass

    log_mode = 'JSON structured' if use_json else 'text'
    root_logger.debug(f"Logging configured with level: {logging.getLevelName(level)}, format: {log_mode}")


def set_log_level(level: Union[int, str]) -> None:
    """
    Set the log level for CollectorConf loggers.

    Args:
        level: Log level to set. Can be a string ('debug', 'info', 'warning', 'error', 'critical')
               or a logging module constant (logging.DEBUG, logging.INFO, etc.)

    Raises:
        ValueError: If a string level is not one of the known names.

    Example:
        >>> from CollectorConf.utils.logging import set_log_level
        >>> set_log_level('debug')
    """
    if isinstance(level, str):
        level_str = level.lower()
        if level_str not in LOG_LEVELS:
            valid_levels = ", ".join(LOG_LEVELS.keys())
            raise ValueError(f"Invalid log level: {level}. Valid levels are: {valid_levels}")
        level = LOG_LEVELS[level_str]

    logging.getLogger().setLevel(level)


def get_logger(name: str, extra: Optional[Dict[str, Any]] = None) -> Union[logging.Logger, StructuredLoggerAdapter]:
    """
    Get a logger for the specified name with the CollectorConf configuration.

    Returns a StructuredLoggerAdapter if JSON logging is enabled, otherwise a standard Logger.

    Args:
        name: Name for the logger, typically __name__ of the calling module
        extra: Optional dictionary with extra context fields for structured logging

    Example:
        >>> logger = get_logger(__name__, {'component': 'set_flag'})
        >>> logger.info("Applied overrides", extra={'count': 3})
    """
    configure_logging()

    logger = logging.getLogger(name)

    root_logger = logging.getLogger()
    if root_logger.handlers and isinstance(root_logger.handlers[0].formatter, JsonFormatter):
        return StructuredLoggerAdapter(logger, extra)

    return logger


configure_logging()

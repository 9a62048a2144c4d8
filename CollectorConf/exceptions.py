"""
Custom exceptions for the CollectorConf package.

This module defines a hierarchical exception system that provides:
1. Specific, technical error information for debugging and logging
2. User-friendly error messages for end-users
3. Error codes for consistent error identification
4. Optional context information for additional debugging
"""

from typing import Optional, Dict, Any
import traceback
import sys


class CollectorConfError(Exception):
    """Base exception for all CollectorConf errors."""

    # Default values
    exit_code = 1
    error_code = "CC-GENERIC-ERROR"
    user_message = "An unexpected error occurred."

    def __init__(
        self,
        message: Optional[str] = None,
        user_message: Optional[str] = None,
        error_code: Optional[str] = None,
        exit_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
        include_traceback: bool = True
    ):
        # Technical message for logs
        self.message = message or self.__class__.__doc__ or "An error occurred."
        super().__init__(self.message)

        self.user_message = user_message or self.__class__.user_message

        self.error_code = error_code or self.__class__.error_code
        self.exit_code = exit_code or self.__class__.exit_code

        self.context = context or {}
        self.cause = cause

        self.traceback = None
        if include_traceback:
            self.traceback = traceback.format_exc() if sys.exc_info()[0] else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the exception to a dictionary for structured output."""
        error_dict = {
            "error_code": self.error_code,
            "message": self.user_message,
            "exit_code": self.exit_code,
        }

        # Technical details only in debug mode
        if self.context.get('debug'):
            error_dict["technical_details"] = {
                "message": self.message,
                "context": self.context,
            }
            if self.traceback:
                error_dict["technical_details"]["traceback"] = self.traceback
            if self.cause:
                error_dict["technical_details"]["cause"] = str(self.cause)

        return error_dict


# Configuration Errors - 1000 range
class ConfigError(CollectorConfError):
    """Base exception for all configuration-related errors."""
    error_code = "CC-CFG-1000"
    user_message = "The collector configuration is invalid."


class ParseError(ConfigError):
    """Exception raised when override properties cannot be decoded."""
    error_code = "CC-CFG-1001"
    user_message = "Invalid --set value. Expected key=value in properties syntax."


class FlagReadError(ConfigError):
    """Exception raised when the --set flag cannot be read from the command."""
    error_code = "CC-CFG-1002"
    user_message = "Unable to read the --set flag from the command line."


class ConfigFileError(ConfigError):
    """Exception raised when a configuration file cannot be loaded."""
    error_code = "CC-CFG-1003"
    user_message = "Unable to load the configuration file. Please check the path and format."

"""
Custom exceptions for reporting-api-client
"""

from typing import Any


class ReportingApiError(Exception):
    """Base exception for all reporting API client errors"""

    pass


class InvalidArgumentError(ReportingApiError, ValueError):
    """
    Raised when a setter receives a value it cannot store.

    This includes:
    - Unsupported or malformed HTTP methods
    - Malformed URLs or non-string URL values

    The builder state is left untouched when this is raised.
    """

    def __init__(self, message: str, argument: str | None = None, value: Any = None):
        self.argument = argument
        self.value = value
        super().__init__(message)


class RequestNotConfiguredError(ReportingApiError, RuntimeError):
    """Raised when a request is sent before its URL has been set"""

    pass


class ConfigurationError(ReportingApiError):
    """
    Raised when configuration values are present but unusable.

    Missing sections fall back to defaults; a value with the wrong type
    (e.g. a non-numeric timeout) is reported instead of silently ignored.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")

"""
reporting-api-client - fluent request configuration over requests
"""

__version__ = "1.0.0"

from .exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    ReportingApiError,
    RequestNotConfiguredError,
)
from .http_client import (
    FORM,
    QUERY,
    DefaultRequestFactory,
    RequestFactory,
    RequestsTransport,
    Transport,
)
from .request_builder import SUPPORTED_METHODS, RequestBuilder, create_request_builder
from .url_validation import is_valid_url

__all__ = [
    "ConfigurationError",
    "DefaultRequestFactory",
    "FORM",
    "InvalidArgumentError",
    "QUERY",
    "ReportingApiError",
    "RequestBuilder",
    "RequestFactory",
    "RequestNotConfiguredError",
    "RequestsTransport",
    "SUPPORTED_METHODS",
    "Transport",
    "create_request_builder",
    "is_valid_url",
]

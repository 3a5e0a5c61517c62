"""
Fluent request configuration on top of an injected transport

Holds URL, HTTP method and request parameters, and hands them to a
RequestFactory and Transport when the request is sent.
"""

from typing import Any

import requests

from .config import Config
from .exceptions import InvalidArgumentError, RequestNotConfiguredError
from .http_client import (
    FORM,
    QUERY,
    DefaultRequestFactory,
    RequestFactory,
    RequestsTransport,
    Transport,
)
from .logging_config import get_module_logger
from .url_validation import is_valid_url

logger = get_module_logger("request_builder")

# Only GET and POST are supported; each maps to one parameter encoding
SUPPORTED_METHODS = ("GET", "POST")


class RequestBuilder:
    """
    Accumulates request configuration and sends one request per send_request() call.

    Setters return the builder itself so calls can be chained:

        response = (
            builder.set_url("https://demo.example.org/index.php")
            .set_method("POST")
            .set_request_params({"module": "API", "format": "json"})
            .send_request()
        )

    Instances are not synchronized: only one thread at a time may configure
    or send through a given builder.
    """

    def __init__(self, transport: Transport, request_factory: RequestFactory):
        """
        Args:
            transport: Sends the request (e.g. RequestsTransport)
            request_factory: Builds the request object (e.g. DefaultRequestFactory)
        """
        self.transport = transport
        self.request_factory = request_factory
        self._request_params: dict[str, Any] = {}
        self._method = "GET"
        self._url: str | None = None

    def set_request_params(self, request_params: dict[str, Any]) -> "RequestBuilder":
        """Replace the request parameters (no merge with previous ones)"""
        self._request_params = request_params
        return self

    def get_request_params(self) -> dict[str, Any]:
        return self._request_params

    def set_method(self, method: str) -> "RequestBuilder":
        """
        Set the HTTP method

        Raises:
            InvalidArgumentError: If method is not exactly "GET" or "POST"
        """
        if not isinstance(method, str) or method not in SUPPORTED_METHODS:
            raise InvalidArgumentError(
                "Only GET and POST requests are allowed.", argument="method", value=method
            )
        self._method = method
        return self

    def get_method(self) -> str:
        return self._method

    def set_url(self, url: str) -> "RequestBuilder":
        """
        Set the request URL, stored as given

        Raises:
            InvalidArgumentError: If url is not a well-formed absolute URL
        """
        if not is_valid_url(url):
            raise InvalidArgumentError("Invalid URL.", argument="url", value=url)
        self._url = url
        return self

    def get_url(self) -> str | None:
        return self._url

    def send_request(self) -> Any:
        """
        Send the configured request through the transport

        GET requests carry the parameters as query string, POST requests as
        a form-encoded body.

        Returns:
            Whatever the transport returns, unmodified

        Raises:
            RequestNotConfiguredError: If no URL has been set
        """
        if not self.get_url():
            raise RequestNotConfiguredError("Request url is not set.")

        request = self.request_factory.get_request(self.get_method(), self.get_url())
        param_type = QUERY if self._method == "GET" else FORM

        logger.debug(f"Sending {self._method} request to {self._url} ({param_type} parameters)")
        return self.transport.send(request, {param_type: self.get_request_params()})


def create_request_builder(
    config_obj: Config | None = None, session: requests.Session | None = None
) -> RequestBuilder:
    """
    Create a RequestBuilder wired to the requests-based transport

    Args:
        config_obj: Config object (optional, uses global config if None)
        session: Session for the transport (optional, a new one is created if None)

    Returns:
        RequestBuilder with a RequestsTransport and DefaultRequestFactory
    """
    transport = RequestsTransport(session=session, config_obj=config_obj)
    return RequestBuilder(transport, DefaultRequestFactory())

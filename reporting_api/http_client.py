"""HTTP transport abstraction for dependency injection and testability."""

import copy
from typing import Any, Protocol, runtime_checkable

import requests

from .config import Config, config
from .exceptions import ConfigurationError
from .logging_config import get_module_logger

logger = get_module_logger("http_client")

# Keys of the options mapping handed to Transport.send()
QUERY = "query"
FORM = "form"

DEFAULT_TIMEOUT = 30


@runtime_checkable
class Transport(Protocol):
    """Sends a request and returns the server's response"""

    def send(self, request: Any, options: dict[str, Any]) -> Any:
        """
        Send a request.

        Args:
            request: Request object built by a RequestFactory
            options: Parameter payload keyed by QUERY or FORM

        Returns:
            Response object of the underlying HTTP library

        Raises:
            Whatever the underlying library raises on network or HTTP errors
        """
        ...


@runtime_checkable
class RequestFactory(Protocol):
    """Builds protocol-level request objects"""

    def get_request(self, method: str, url: str) -> Any:
        """Create a request for the given method and URL"""
        ...


class DefaultRequestFactory:
    """Creates unprepared requests.Request objects"""

    def __init__(self, headers: dict[str, str] | None = None):
        """
        Args:
            headers: Headers copied onto every request this factory creates
        """
        self.headers = dict(headers or {})

    def get_request(self, method: str, url: str) -> requests.Request:
        return requests.Request(method=method, url=url, headers=dict(self.headers))


class RequestsTransport:
    """
    Transport backed by a requests.Session.

    Query parameters and form bodies are attached to a copy of the incoming
    request, which is then prepared through the session so that session-level
    headers and cookies apply.

    Example:
        with RequestsTransport() as transport:
            request = DefaultRequestFactory().get_request("GET", "https://example.com")
            response = transport.send(request, {"query": {"page": 1}})
    """

    def __init__(self, session: requests.Session | None = None, config_obj: Config | None = None):
        """
        Initialize the transport.

        Args:
            session: Session to send through (optional, a new one is created if None)
            config_obj: Config object (optional, uses global config if None)
        """
        if config_obj is None:
            config_obj = config

        self.session = session if session is not None else requests.Session()
        self.timeout = _read_timeout(config_obj)
        self.verify = _read_flag(config_obj, "transport.verify_ssl")
        self.raise_for_status = _read_flag(config_obj, "transport.raise_for_status")

        user_agent = config_obj.get("transport.headers.user_agent")
        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    def send(self, request: requests.Request, options: dict[str, Any]) -> requests.Response:
        """
        Send a request with its parameter payload.

        Args:
            request: Unprepared request, usually from DefaultRequestFactory
            options: {"query": {...}} for query string parameters or
                     {"form": {...}} for a form-encoded body

        Returns:
            requests.Response object

        Raises:
            requests.RequestException: On network failure, or requests.HTTPError
                for 4xx/5xx responses when raise_for_status is enabled
        """
        outgoing = copy.copy(request)
        outgoing.params = options.get(QUERY) or {}
        outgoing.data = options.get(FORM) or []

        prepared = self.session.prepare_request(outgoing)
        settings = self.session.merge_environment_settings(
            prepared.url, {}, None, self.verify, None
        )

        logger.debug(f"{prepared.method} {prepared.url}")
        response = self.session.send(prepared, timeout=self.timeout, **settings)
        logger.debug(f"{prepared.method} {prepared.url} -> {response.status_code}")

        if self.raise_for_status:
            response.raise_for_status()

        return response

    def close(self) -> None:
        """Close the underlying session"""
        self.session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _read_timeout(config_obj: Config) -> float:
    timeout = config_obj.get("transport.timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigurationError(
            f"expected a positive number of seconds, got {timeout!r}",
            config_key="transport.timeout",
        )
    return float(timeout)


def _read_flag(config_obj: Config, key: str, default: bool = True) -> bool:
    value = config_obj.get(key, default)
    if not isinstance(value, bool):
        raise ConfigurationError(f"expected true or false, got {value!r}", config_key=key)
    return value

"""
Shared test utilities and test doubles

This module provides recording fakes for the Transport and RequestFactory
collaborators plus mock factories for requests objects.
"""

from typing import Any
from unittest.mock import Mock

import requests


class RecordingRequestFactory:
    """RequestFactory double that remembers every (method, url) it was asked for"""

    def __init__(self):
        self.calls: list[tuple[str, str]] = []

    def get_request(self, method: str, url: str) -> dict[str, str]:
        self.calls.append((method, url))
        return {"method": method, "url": url}


class RecordingTransport:
    """Transport double that records sends and returns a canned response"""

    def __init__(self, response: Any = None, error: Exception | None = None):
        self.response = response if response is not None else create_mock_response()
        self.error = error
        self.calls: list[tuple[Any, dict[str, Any]]] = []

    def send(self, request: Any, options: dict[str, Any]) -> Any:
        self.calls.append((request, options))
        if self.error is not None:
            raise self.error
        return self.response


def create_mock_response(status_code=200, text="NA"):
    """
    Factory for creating mock requests.Response objects

    Args:
        status_code: HTTP status code to return (default: 200)
        text: Response body text (default: "NA")

    Returns:
        Mock constrained to the requests.Response interface
    """
    mock_response = Mock(spec=requests.Response)
    mock_response.status_code = status_code
    mock_response.text = text
    mock_response.content = text.encode()
    return mock_response


def create_mock_session(response=None):
    """
    Factory for creating a mock requests.Session

    prepare_request() delegates to a real Request.prepare() so tests can
    inspect the final URL and body; send() returns the given response.
    """
    mock_session = Mock(spec=requests.Session)
    mock_session.headers = {}
    mock_session.prepare_request.side_effect = lambda request: request.prepare()
    mock_session.merge_environment_settings.return_value = {
        "proxies": {},
        "stream": None,
        "verify": True,
        "cert": None,
    }
    mock_session.send.return_value = response if response is not None else create_mock_response()
    return mock_session

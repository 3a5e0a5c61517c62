"""
Pytest configuration and shared fixtures
"""

import pytest

from reporting_api.config import Config
from reporting_api.request_builder import RequestBuilder
from tests.test_helpers import RecordingRequestFactory, RecordingTransport


@pytest.fixture
def test_config():
    """Minimal transport configuration"""
    return Config(
        {
            "transport": {
                "timeout": 10,
                "verify_ssl": True,
                "raise_for_status": True,
                "headers": {"user_agent": "reporting-api-client-tests/1.0"},
            }
        }
    )


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def request_factory():
    return RecordingRequestFactory()


@pytest.fixture
def builder(transport, request_factory):
    """RequestBuilder wired to recording test doubles"""
    return RequestBuilder(transport, request_factory)

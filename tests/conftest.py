"""
Pytest configuration and shared fixtures for Stubbable tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Integration tests go in tests/integration/
- Log assertions use structlog.testing.capture_logs
"""

import pytest
import structlog

from stubbable.application.stubbing import StubFactory
from stubbable.infrastructure.stubs import MockCar, MockHttpClient, build_default_factory


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so log configuration never leaks between tests."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from stubbable import __version__

    return __version__


@pytest.fixture
def unstubbed_car() -> MockCar:
    """A MockCar built without a configuration function."""
    return MockCar()


@pytest.fixture
def noop_car() -> MockCar:
    """A MockCar with the no-op preset applied."""
    return MockCar(lambda stubs: stubs.apply_noop())


@pytest.fixture
def noop_http_client() -> MockHttpClient:
    """A MockHttpClient with the no-op preset applied."""
    return MockHttpClient(lambda stubs: stubs.apply_noop())


@pytest.fixture
def failed_http_client() -> MockHttpClient:
    """A MockHttpClient whose connections are refused."""
    return MockHttpClient(lambda stubs: stubs.apply_failed_connection())


@pytest.fixture
def factory() -> StubFactory:
    """A fresh factory with the shipped stubs registered."""
    return build_default_factory()

"""Stubs for the contracts shipped with Stubbable.

Available stubs:
- MockCar / CarStubs: DrivableProtocol (presets: noop, stalled_engine)
- MockHttpClient / HttpClientStubs: HttpClientProtocol (presets: noop,
  failed_connection, not_found)

WARNING: These stubs are for testing only.
"""

from stubbable.infrastructure.stubs.car_stub import CarStubs, MockCar
from stubbable.infrastructure.stubs.http_client_stub import (
    NOT_FOUND_RESPONSE,
    OK_RESPONSE,
    HttpClientStubs,
    MockHttpClient,
)
from stubbable.infrastructure.stubs.registry import (
    build_default_factory,
    create_stub,
    default_factory,
)

__all__: list[str] = [
    "CarStubs",
    "HttpClientStubs",
    "MockCar",
    "MockHttpClient",
    "NOT_FOUND_RESPONSE",
    "OK_RESPONSE",
    "build_default_factory",
    "create_stub",
    "default_factory",
]

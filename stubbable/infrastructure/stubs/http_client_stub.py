"""Stub HTTP client for testing code that depends on HttpClientProtocol.

No sockets are opened; every behavior comes from the configured slots.

Default state (no configuration):
- max_connections reads -1
- connect, disconnect and get raise UnstubbedInvocationError

Presets:
- apply_noop(): max_connections 0, connect returns True, disconnect does
  nothing, get returns an empty 200 response
- apply_failed_connection(): max_connections 1, connect returns False
- apply_not_found(): connect returns True, get returns an empty 404 response

Usage Examples:
    client = MockHttpClient(lambda s: s.apply_failed_connection())
    assert client.connect("https://example.test") is False
    assert client.max_connections == 1
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stubbable.application.ports.http_client import (
    HTTP_CLIENT_CONTRACT,
    HttpClientProtocol,
)
from stubbable.application.stubbing import StubInstance, StubSet, preset
from stubbable.domain.models import HttpResponse

OK_RESPONSE = HttpResponse(status_code=200)
NOT_FOUND_RESPONSE = HttpResponse(status_code=404)


def _accept_connection(url: str) -> bool:
    return True


def _refuse_connection(url: str) -> bool:
    return False


def _respond_ok(path: str) -> HttpResponse:
    return OK_RESPONSE


def _respond_not_found(path: str) -> HttpResponse:
    return NOT_FOUND_RESPONSE


class HttpClientStubs(StubSet, contract=HTTP_CLIENT_CONTRACT):
    """Slots for MockHttpClient."""

    @preset
    def apply_noop(self) -> Mapping[str, Any]:
        """Every call succeeds; get returns OK_RESPONSE."""
        return {**self.noop_slots(), "get": _respond_ok}

    @preset
    def apply_failed_connection(self) -> Mapping[str, Any]:
        """The server refuses connections.

        Sets max_connections to 1 and connect to always return False.
        disconnect and get are left as they were.
        """
        return {"max_connections": 1, "connect": _refuse_connection}

    @preset
    def apply_not_found(self) -> Mapping[str, Any]:
        """Connections succeed but every GET returns NOT_FOUND_RESPONSE."""
        return {"connect": _accept_connection, "get": _respond_not_found}


class MockHttpClient(StubInstance, HttpClientProtocol, stubs=HttpClientStubs):
    """HttpClientProtocol implementation backed by HttpClientStubs.

    For testing only.
    """

"""HTTP client port.

Defines the contract for a connection-oriented HTTP client. Connection
refusal is part of the contract's semantics and is reported through the
return value of ``connect``, not by raising.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from stubbable.domain.models import HttpResponse, InterfaceContract


@runtime_checkable
class HttpClientProtocol(Protocol):
    """Protocol for an HTTP client.

    Usage in consuming code:
        if not client.connect("https://example.test"):
            return fallback()
        response = client.get("/status")
    """

    @property
    def max_connections(self) -> int:
        """Maximum number of concurrent connections the client allows."""
        ...

    def connect(self, url: str) -> bool:
        """Open a connection.

        Args:
            url: Base URL to connect to.

        Returns:
            True if connected, False if the connection was refused.
        """
        ...

    def disconnect(self) -> None:
        """Close the current connection. Safe to call when not connected."""
        ...

    def get(self, path: str) -> HttpResponse:
        """Issue a GET request on the current connection.

        Args:
            path: Request path relative to the connected URL.

        Returns:
            The response.
        """
        ...


HTTP_CLIENT_CONTRACT = InterfaceContract.from_protocol(HttpClientProtocol)

"""HTTP response value object for the HttpClient contract.

No real networking happens anywhere in this package; the response is a
plain value a stubbed ``get`` slot can return.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class HttpResponse:
    """Minimal HTTP response.

    Attributes:
        status_code: HTTP status code.
        body: Raw response body.
        headers: Response headers (read-only view).
    """

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate the status code range."""
        if not 100 <= self.status_code <= 599:
            raise ValueError(f"status_code must be 100-599, got {self.status_code}")

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status_code < 300

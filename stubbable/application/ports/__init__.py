"""Application ports - contracts shipped with Stubbable.

Each port is a runtime-checkable typing.Protocol plus the
InterfaceContract derived from it.

Available ports:
- DrivableProtocol: A steerable vehicle
- HttpClientProtocol: A connection-oriented HTTP client
"""

from stubbable.application.ports.drivable import DRIVABLE_CONTRACT, DrivableProtocol
from stubbable.application.ports.http_client import (
    HTTP_CLIENT_CONTRACT,
    HttpClientProtocol,
)

__all__: list[str] = [
    "DRIVABLE_CONTRACT",
    "DrivableProtocol",
    "HTTP_CLIENT_CONTRACT",
    "HttpClientProtocol",
]

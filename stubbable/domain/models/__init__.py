"""Domain models for Stubbable."""

from stubbable.domain.models.http_response import HttpResponse
from stubbable.domain.models.interface_contract import (
    InterfaceContract,
    MethodSpec,
    PropertySpec,
    SlotKind,
    neutral_value,
)
from stubbable.domain.models.steering_direction import SteeringDirection

__all__: list[str] = [
    "HttpResponse",
    "InterfaceContract",
    "MethodSpec",
    "PropertySpec",
    "SlotKind",
    "SteeringDirection",
    "neutral_value",
]

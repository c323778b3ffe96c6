"""Default stub factory with the shipped stubs registered.

Usage:
    from stubbable.infrastructure.stubs import create_stub

    car = create_stub(DrivableProtocol, lambda s: s.apply_noop())  # a MockCar
    other = create_stub(SomeOtherProtocol)  # generated stub
"""

from __future__ import annotations

import functools

from stubbable.application.ports import DrivableProtocol, HttpClientProtocol
from stubbable.application.stubbing import (
    ConfigurationFunction,
    StubFactory,
    StubInstance,
)
from stubbable.config import StubConfig
from stubbable.infrastructure.stubs.car_stub import MockCar
from stubbable.infrastructure.stubs.http_client_stub import MockHttpClient


def build_default_factory(config: StubConfig | None = None) -> StubFactory:
    """Create a factory with MockCar and MockHttpClient registered.

    Args:
        config: Default stub configuration for the factory.

    Returns:
        A new StubFactory.
    """
    factory = StubFactory(config=config)
    factory.register(DrivableProtocol, MockCar)
    factory.register(HttpClientProtocol, MockHttpClient)
    return factory


@functools.lru_cache(maxsize=1)
def default_factory() -> StubFactory:
    """Process-wide factory built on first use with StubConfig.from_environment()."""
    return build_default_factory(config=StubConfig.from_environment())


def create_stub(
    protocol: type,
    configure: ConfigurationFunction | None = None,
    *,
    config: StubConfig | None = None,
) -> StubInstance:
    """Create a stub for a protocol using the default factory.

    Args:
        protocol: The Protocol class to stub.
        configure: Optional configuration function.
        config: Stub configuration overriding the factory's.

    Returns:
        A sealed StubInstance implementing the protocol.
    """
    return default_factory().create(protocol, configure, config=config)

"""Unit tests for StubFactory."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pytest

from stubbable.application.ports import DrivableProtocol, HttpClientProtocol
from stubbable.application.stubbing import StubFactory, StubInstance, build_stub_class
from stubbable.config import StubConfig
from stubbable.domain.errors import UnstubbedInvocationError
from stubbable.infrastructure.stubs import MockCar, MockHttpClient


@runtime_checkable
class ClockProtocol(Protocol):
    timezone: str

    def now(self) -> float: ...

    def sleep(self, seconds: float) -> None: ...


class TestBuildStubClass:
    """Test generated stub classes."""

    def test_generated_names(self) -> None:
        """Generated classes drop the Protocol suffix."""
        stub_class = build_stub_class(ClockProtocol)

        assert stub_class.__name__ == "ClockStub"
        assert stub_class.stubs_class is not None
        assert stub_class.stubs_class.__name__ == "ClockStubs"

    def test_generated_stub_is_unstubbed_by_default(self) -> None:
        """Generated stubs follow the same defaults as hand-written ones."""
        clock = build_stub_class(ClockProtocol)()

        assert clock.timezone is None
        with pytest.raises(UnstubbedInvocationError, match=r"ClockProtocol\.now"):
            clock.now()

    def test_generated_stub_supports_noop(self) -> None:
        """Generated stubs offer the generic no-op preset."""
        clock = build_stub_class(ClockProtocol)(lambda stubs: stubs.apply_noop())

        assert clock.now() == 0.0
        assert clock.sleep(1.5) is None
        assert clock.timezone == ""

    def test_generated_stub_satisfies_protocol(self) -> None:
        """Generated stubs pass isinstance checks for their protocol."""
        assert isinstance(build_stub_class(ClockProtocol)(), ClockProtocol)

    def test_rejects_non_protocol(self) -> None:
        """Only Protocol classes can be stubbed."""
        with pytest.raises(TypeError):
            build_stub_class(StubFactory)


class TestStubFactory:
    """Test factory registration, caching and creation."""

    def test_create_generated(self) -> None:
        """Unregistered protocols get a generated stub."""
        factory = StubFactory()

        def configure(stubs) -> None:
            stubs.apply_noop()
            stubs.timezone = "UTC"

        clock = factory.create(ClockProtocol, configure)

        assert clock.timezone == "UTC"
        assert clock.now() == 0.0

    def test_generated_class_is_cached(self) -> None:
        """The same protocol maps to the same generated class."""
        factory = StubFactory()

        assert factory.stub_class_for(ClockProtocol) is factory.stub_class_for(ClockProtocol)
        assert type(factory.create(ClockProtocol)) is type(factory.create(ClockProtocol))

    def test_register_hand_written(self) -> None:
        """Registered protocols use the hand-written stub."""
        factory = StubFactory()
        factory.register(DrivableProtocol, MockCar)

        car = factory.create(DrivableProtocol, lambda stubs: stubs.apply_stalled_engine())

        assert isinstance(car, MockCar)
        assert car.start(3) is False
        assert factory.registered == {DrivableProtocol: MockCar}

    def test_register_rejects_mismatched_contract(self) -> None:
        """A stub for a different contract cannot be registered."""
        factory = StubFactory()

        with pytest.raises(TypeError, match="does not implement"):
            factory.register(HttpClientProtocol, MockCar)

    def test_register_rejects_unbound_class(self) -> None:
        """StubInstance itself cannot be registered."""
        with pytest.raises(TypeError, match="not bound"):
            StubFactory().register(DrivableProtocol, StubInstance)

    def test_factory_config_applies(self) -> None:
        """Stubs inherit the factory's config."""
        factory = StubFactory(config=StubConfig(numeric_sentinel=-5))
        factory.register(HttpClientProtocol, MockHttpClient)

        client = factory.create(HttpClientProtocol)

        assert client.max_connections == -5

    def test_explicit_config_overrides_factory(self) -> None:
        """A config passed to create() wins over the factory's."""
        factory = StubFactory(config=StubConfig(numeric_sentinel=-5))

        car = factory.create(DrivableProtocol, config=StubConfig(numeric_sentinel=-2))

        assert car.max_speed == -2.0

"""Stub factory: stubs for any Protocol class.

The factory turns a Protocol into a StubInstance. Protocols with a
hand-written stub (one that adds scenario presets) are registered up
front; any other protocol gets a generated StubSet/StubInstance pair the
first time it is requested, cached for later calls.

Usage:
    factory = StubFactory()
    factory.register(DrivableProtocol, MockCar)

    car = factory.create(DrivableProtocol, lambda s: s.apply_noop())
    clock = factory.create(ClockProtocol)  # generated, fully unstubbed
"""

from __future__ import annotations

import types

import structlog

from stubbable.application.stubbing.stub_instance import ConfigurationFunction, StubInstance
from stubbable.application.stubbing.stub_set import StubSet
from stubbable.config import StubConfig
from stubbable.domain.models import InterfaceContract

logger = structlog.get_logger()

_PROTOCOL_SUFFIX = "Protocol"


def build_stub_class(protocol: type) -> type[StubInstance]:
    """Generate a StubInstance subclass for a Protocol.

    The generated stub set offers only the generic ``apply_noop`` preset.
    The generated instance class also subclasses the protocol, so
    isinstance checks against it succeed.

    Args:
        protocol: A typing.Protocol class.

    Returns:
        A StubInstance subclass named ``<Name>Stub``.

    Raises:
        TypeError: If ``protocol`` is not a Protocol class.
    """
    contract = InterfaceContract.from_protocol(protocol)
    base_name = protocol.__name__.removesuffix(_PROTOCOL_SUFFIX) or protocol.__name__
    stubs_class = types.new_class(f"{base_name}Stubs", (StubSet,), {"contract": contract})
    return types.new_class(f"{base_name}Stub", (StubInstance, protocol), {"stubs": stubs_class})


class StubFactory:
    """Creates stub instances for Protocol classes.

    Attributes:
        config: Default StubConfig for stubs created by this factory.
    """

    def __init__(self, config: StubConfig | None = None) -> None:
        """Initialize an empty factory.

        Args:
            config: Default stub configuration; None uses DEFAULT_STUB_CONFIG.
        """
        self.config = config
        self._classes: dict[type, type[StubInstance]] = {}

    def register(self, protocol: type, instance_class: type[StubInstance]) -> None:
        """Use a hand-written stub class for a protocol.

        Args:
            protocol: The Protocol class the stub implements.
            instance_class: StubInstance subclass bound to a matching stub set.

        Raises:
            TypeError: If the class is unbound or its contract differs from
                       the protocol's.
        """
        stubs_class = instance_class.stubs_class
        if stubs_class is None:
            raise TypeError(f"{instance_class.__name__} is not bound to a stub set")
        if stubs_class.contract != InterfaceContract.from_protocol(protocol):
            raise TypeError(
                f"{instance_class.__name__} does not implement {protocol.__name__}"
            )
        self._classes[protocol] = instance_class
        logger.debug(
            "stub_class_registered",
            protocol=protocol.__name__,
            stub=instance_class.__name__,
        )

    def stub_class_for(self, protocol: type) -> type[StubInstance]:
        """Return the registered or generated stub class for a protocol."""
        instance_class = self._classes.get(protocol)
        if instance_class is None:
            instance_class = build_stub_class(protocol)
            self._classes[protocol] = instance_class
            logger.debug(
                "stub_class_generated",
                protocol=protocol.__name__,
                stub=instance_class.__name__,
            )
        return instance_class

    def create(
        self,
        protocol: type,
        configure: ConfigurationFunction | None = None,
        *,
        config: StubConfig | None = None,
    ) -> StubInstance:
        """Create a configured stub for a protocol.

        Args:
            protocol: The Protocol class to stub.
            configure: Optional configuration function run once on the
                       in-progress stub set.
            config: Stub configuration; defaults to the factory's.

        Returns:
            A sealed StubInstance implementing the protocol.
        """
        instance_class = self.stub_class_for(protocol)
        return instance_class(configure, config=config or self.config)

    @property
    def registered(self) -> dict[type, type[StubInstance]]:
        """Copy of the protocol to stub class mapping built so far."""
        return dict(self._classes)

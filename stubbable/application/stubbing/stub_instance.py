"""Stub instances: objects that satisfy a contract by forwarding to slots.

A StubInstance subclass is bound to a StubSet subclass at class creation.
For every contract member it gets a generated forwarding member:

- property getter: returns the slot value
- property setter (mutable properties only): writes the slot, unvalidated
- method: binds the call's arguments against the contract signature,
  invokes the slot callable and returns its result

Construction:
    1. Create the stub set with defaults
    2. Run the configuration function, if any, exactly once
    3. Seal the stub set and keep it as the permanent backing store

Usage:
    class MockCar(StubInstance, DrivableProtocol, stubs=CarStubs):
        pass

    car = MockCar(lambda s: s.apply_noop())
    assert car.start(retries=3) is True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

import structlog

from stubbable.application.stubbing.stub_set import StubSet
from stubbable.config import StubConfig
from stubbable.domain.models import MethodSpec, PropertySpec

logger = structlog.get_logger()

# Receives the in-progress stub set; return value is ignored
ConfigurationFunction = Callable[[Any], None]


class StubInstance:
    """Base class for objects backed by a sealed StubSet.

    Attributes:
        stubs_class: The StubSet subclass backing instances of this class.
    """

    stubs_class: ClassVar[type[StubSet] | None] = None

    def __init_subclass__(cls, stubs: type[StubSet] | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if stubs is None:
            return
        contract = stubs.contract
        if contract is None:
            raise TypeError(f"{stubs.__name__} is not bound to a contract")

        clashes = sorted(name for name in contract.member_names if hasattr(StubInstance, name))
        if clashes:
            raise TypeError(
                f"{contract.name} members clash with StubInstance attributes: {clashes}"
            )

        cls.stubs_class = stubs
        for prop in contract.properties:
            setattr(cls, prop.name, _forwarding_property(prop))
        for method in contract.methods:
            setattr(cls, method.name, _forwarding_method(cls, method))

    def __init__(
        self,
        configure: ConfigurationFunction | None = None,
        *,
        config: StubConfig | None = None,
    ) -> None:
        """Build the backing stub set, configure it once and seal it.

        Args:
            configure: Optional function receiving the in-progress stub set.
                       Without one, every method call raises
                       UnstubbedInvocationError and every property reads
                       its sentinel.
            config: Stub configuration passed to the stub set.

        Raises:
            TypeError: If this class is not bound to a stub set.
        """
        stubs_class = type(self).stubs_class
        if stubs_class is None:
            raise TypeError(f"{type(self).__name__} is not bound to a stub set")

        stubs = stubs_class(config=config)
        if configure is not None:
            configure(stubs)
        stubs.seal()
        self._stubs = stubs

        logger.debug(
            "stub_constructed",
            stub=type(self).__name__,
            contract=stubs.contract.name,
            overridden=sorted(stubs.overridden),
        )

    @property
    def stubs(self) -> StubSet:
        """The sealed stub set backing this instance."""
        return self._stubs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._stubs!r})"


def _forwarding_property(spec: PropertySpec) -> property:
    name = spec.name

    def getter(self: StubInstance) -> Any:
        return self._stubs._read_slot(name)

    if not spec.mutable:
        return property(getter, doc=f"Read the {name} slot.")

    def setter(self: StubInstance, value: Any) -> None:
        self._stubs._write_slot(name, value)

    return property(getter, setter, doc=f"Read or write the {name} slot.")


def _forwarding_method(owner: type, spec: MethodSpec) -> Callable[..., Any]:
    name = spec.name
    signature = spec.signature

    def method(self: StubInstance, *args: Any, **kwargs: Any) -> Any:
        # Normalise to the contract's parameter layout so slots see
        # positional-or-keyword arguments positionally, defaults included
        bound = signature.bind(self, *args, **kwargs)
        bound.apply_defaults()
        return self._stubs._invoke_slot(name, *bound.args[1:], **bound.kwargs)

    method.__name__ = name
    method.__qualname__ = f"{owner.__qualname__}.{name}"
    method.__signature__ = signature  # type: ignore[attr-defined]
    method.__doc__ = f"Invoke the {name} slot."
    return method

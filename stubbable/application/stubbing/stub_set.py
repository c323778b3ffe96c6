"""Stub sets: one overridable slot per contract member.

A StubSet is the mutable bundle a configuration function works on. Each
member of the bound InterfaceContract gets a slot:

- Property slots hold a plain value, initially the contract's sentinel
  (-1 for numeric properties, None otherwise).
- Method slots hold a callable, initially an UnstubbedBehavior that raises
  UnstubbedInvocationError naming the member.

Slots are read and written as attributes (``stubs.max_speed = 10.0``,
``stubs.start = lambda retries: True``). Names that are not contract
members are rejected.

Presets:
    A preset is a method named ``apply_<scenario>`` decorated with
    ``@preset`` that returns a mapping of slot name to value. The whole
    mapping is validated before any slot is written, then written in one
    update, so a preset is never partially applied. Every stub set offers
    ``apply_noop()``; contract-specific stub sets add their own scenarios.

    Slot assignments made after a preset in the same configuration pass
    win over the preset for those slots only.

Sealing:
    StubInstance seals its stub set once the configuration function has
    returned. After that, method slots, read-only property slots and
    presets are frozen; mutable property slots stay writable so instance
    setters keep working.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, NoReturn, TypeVar

import structlog

from stubbable.config import DEFAULT_STUB_CONFIG, StubConfig
from stubbable.domain.errors import (
    InvalidSlotValueError,
    PresetError,
    StubSealedError,
    UnknownSlotError,
    UnstubbedInvocationError,
)
from stubbable.domain.models import InterfaceContract, SlotKind, neutral_value

logger = structlog.get_logger()

PRESET_PREFIX = "apply_"

S = TypeVar("S", bound="StubSet")


class UnstubbedBehavior:
    """Construction-time default of every method slot.

    Calling it logs ``unstubbed_invocation`` and raises
    UnstubbedInvocationError. It never returns.
    """

    __slots__ = ("contract", "member")

    def __init__(self, contract: str, member: str) -> None:
        self.contract = contract
        self.member = member

    def __call__(self, *args: Any, **kwargs: Any) -> NoReturn:
        logger.error(
            "unstubbed_invocation",
            contract=self.contract,
            member=self.member,
        )
        raise UnstubbedInvocationError(contract=self.contract, member=self.member)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnstubbedBehavior):
            return NotImplemented
        return (self.contract, self.member) == (other.contract, other.member)

    def __hash__(self) -> int:
        return hash((self.contract, self.member))

    def __repr__(self) -> str:
        return f"<unstubbed {self.contract}.{self.member}>"


def _success_value(return_type: Any) -> Any:
    # A no-op reports success: True for predicates, the neutral value otherwise
    if return_type is bool:
        return True
    return neutral_value(return_type)


@functools.lru_cache(maxsize=None)
def _cached_noop(return_type: Any) -> Callable[..., Any]:
    result = _success_value(return_type)

    def noop(*args: Any, **kwargs: Any) -> Any:
        return result

    noop.__qualname__ = f"noop[{getattr(return_type, '__name__', return_type)}]"
    return noop


def noop_behavior(return_type: Any) -> Callable[..., Any]:
    """Return the shared no-op callable for a method return type.

    The same callable object is returned for the same return type, which
    keeps repeated preset applications identical.

    Args:
        return_type: Annotated return type of the method.

    Returns:
        A callable accepting any arguments and returning True for bool,
        0/0.0/"" for int/float/str, and None for everything else.
    """
    try:
        hash(return_type)
    except TypeError:
        return_type = Any
    return _cached_noop(return_type)


def preset(func: Callable[[S], Mapping[str, Any]]) -> Callable[[S], None]:
    """Turn an ``apply_<scenario>`` method into an atomic preset.

    The decorated method returns the slot assignments for its scenario.
    The wrapper validates them against the contract and writes them all
    at once.

    Args:
        func: Method named ``apply_<scenario>`` returning slot assignments.

    Returns:
        The preset method. It takes no arguments and returns None.

    Raises:
        TypeError: If the method name does not start with ``apply_``.
    """
    if not func.__name__.startswith(PRESET_PREFIX):
        raise TypeError(f"preset method {func.__name__!r} must start with {PRESET_PREFIX!r}")
    name = func.__name__[len(PRESET_PREFIX):]

    @functools.wraps(func)
    def apply(self: S) -> None:
        self._apply_slots(name, func(self))

    apply.__preset_name__ = name  # type: ignore[attr-defined]
    return apply


class StubSet:
    """Mutable bundle of slots for one contract.

    Subclasses bind their contract at class creation:

        class CarStubs(StubSet, contract=DRIVABLE_CONTRACT):
            @preset
            def apply_stalled_engine(self) -> Mapping[str, Any]:
                return {"max_speed": 0.0, "start": _engine_stalls}

    A StubSet may also be built directly for an ad hoc contract with
    ``StubSet(contract=...)``.

    Attributes:
        contract: The InterfaceContract this stub set implements.
        config: StubConfig controlling sentinels and tracing.
    """

    contract: ClassVar[InterfaceContract | None] = None
    config: StubConfig = DEFAULT_STUB_CONFIG

    def __init_subclass__(cls, contract: InterfaceContract | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if contract is not None:
            cls.contract = contract
        if cls.contract is not None:
            _check_reserved_names(cls.contract)

    def __init__(
        self,
        contract: InterfaceContract | None = None,
        config: StubConfig | None = None,
    ) -> None:
        """Create a stub set with every slot at its default.

        Args:
            contract: Contract to stub. Defaults to the class-bound contract.
            config: Stub configuration. Defaults to DEFAULT_STUB_CONFIG.

        Raises:
            TypeError: If no contract is given and none is bound to the class.
        """
        if contract is None:
            contract = type(self).contract
        if contract is None:
            raise TypeError(f"{type(self).__name__} is not bound to a contract")
        _check_reserved_names(contract)

        config = config or DEFAULT_STUB_CONFIG
        object.__setattr__(self, "contract", contract)
        object.__setattr__(self, "config", config)
        self._sealed = False
        self._overridden: set[str] = set()
        self._slots: dict[str, Any] = {}

        for prop in contract.properties:
            self._slots[prop.name] = prop.sentinel(config.numeric_sentinel)
        for method in contract.methods:
            self._slots[method.name] = UnstubbedBehavior(contract.name, method.name)

    # --- Slot access ---

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        slots = self.__dict__.get("_slots", {})
        if name not in slots:
            raise UnknownSlotError(self._contract_name(), name)
        return slots[name]

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self._write_slot(name, value)

    def _contract_name(self) -> str:
        contract = self.__dict__.get("contract") or type(self).contract
        return contract.name if contract is not None else type(self).__name__

    def _read_slot(self, name: str) -> Any:
        try:
            return self._slots[name]
        except KeyError:
            raise UnknownSlotError(self.contract.name, name) from None

    def _write_slot(self, name: str, value: Any) -> None:
        kind = self.contract.kind_of(name)
        if kind is None:
            raise UnknownSlotError(self.contract.name, name)
        if kind is SlotKind.METHOD:
            if self._sealed:
                raise StubSealedError(self.contract.name, name)
            if not callable(value):
                raise InvalidSlotValueError(self.contract.name, name, value)
        elif self._sealed and not self.contract.property_spec(name).mutable:
            raise StubSealedError(self.contract.name, name)
        self._slots[name] = value
        self._overridden.add(name)

    def _invoke_slot(self, name: str, *args: Any, **kwargs: Any) -> Any:
        behavior = self._read_slot(name)
        if self.config.trace_invocations:
            logger.debug(
                "stub_invoked",
                contract=self.contract.name,
                member=name,
                call_args=args,
                call_kwargs=kwargs,
            )
        return behavior(*args, **kwargs)

    # --- Presets ---

    def _apply_slots(self, preset_name: str, assignments: Mapping[str, Any]) -> None:
        if self._sealed:
            raise StubSealedError(self.contract.name, preset_name)

        unknown = sorted(name for name in assignments if name not in self.contract)
        if unknown:
            raise PresetError(self.contract.name, preset_name, f"unknown slots {unknown}")
        not_callable = sorted(
            name
            for name, value in assignments.items()
            if self.contract.kind_of(name) is SlotKind.METHOD and not callable(value)
        )
        if not_callable:
            raise PresetError(
                self.contract.name, preset_name, f"method slots need callables {not_callable}"
            )

        self._slots.update(assignments)
        self._overridden.update(assignments)
        logger.debug(
            "preset_applied",
            contract=self.contract.name,
            preset=preset_name,
            slots=sorted(assignments),
        )

    def noop_slots(self) -> dict[str, Any]:
        """Slot assignments that make every member harmless.

        Properties get their neutral value (0, 0.0, False, "" or None).
        Methods get a shared no-op returning True for bool, the neutral
        value for int/float/str, and None otherwise.

        Contract-specific stub sets can build on this mapping when they
        redefine ``apply_noop``.
        """
        slots: dict[str, Any] = {prop.name: prop.neutral for prop in self.contract.properties}
        for method in self.contract.methods:
            slots[method.name] = noop_behavior(method.return_type)
        return slots

    @preset
    def apply_noop(self) -> Mapping[str, Any]:
        """Make every member harmless. See noop_slots()."""
        return self.noop_slots()

    def apply_preset(self, name: str) -> None:
        """Apply a preset by scenario name (e.g. ``"noop"``).

        Raises:
            PresetError: If this stub set offers no such preset.
        """
        method = getattr(type(self), PRESET_PREFIX + name, None)
        if method is None or not hasattr(method, "__preset_name__"):
            raise PresetError(self.contract.name, name, "no such preset")
        method(self)

    @classmethod
    def presets(cls) -> tuple[str, ...]:
        """Names of the presets this stub set offers, sorted."""
        names = []
        for attr in dir(cls):
            if not attr.startswith(PRESET_PREFIX):
                continue
            preset_name = getattr(getattr(cls, attr), "__preset_name__", None)
            if preset_name is not None:
                names.append(preset_name)
        return tuple(sorted(names))

    # --- Inspection ---

    def snapshot(self) -> dict[str, Any]:
        """Copy of the current slot values keyed by member name."""
        return dict(self._slots)

    @property
    def overridden(self) -> frozenset[str]:
        """Names of slots written since construction, by preset or directly."""
        return frozenset(self._overridden)

    def is_overridden(self, name: str) -> bool:
        """Whether a slot no longer holds its construction-time default.

        Raises:
            UnknownSlotError: If the contract declares no such member.
        """
        if name not in self.contract:
            raise UnknownSlotError(self.contract.name, name)
        return name in self._overridden

    def seal(self) -> None:
        """Freeze method slots, read-only property slots and presets."""
        self._sealed = True

    @property
    def sealed(self) -> bool:
        """Whether seal() has been called."""
        return self._sealed

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(contract={self._contract_name()!r}, "
            f"overridden={sorted(self.__dict__.get('_overridden', ()))})"
        )


def _check_reserved_names(contract: InterfaceContract) -> None:
    clashes = sorted(name for name in contract.member_names if hasattr(StubSet, name))
    if clashes:
        raise TypeError(
            f"{contract.name} members clash with StubSet attributes: {clashes}"
        )

"""Interface contract value objects.

An InterfaceContract describes the members a stub must provide:
properties (name, value type, mutability) and methods (name, signature,
return type). Contracts are derived from typing.Protocol classes and are
fixed once built.

Member classification when reading a Protocol:
- A plain annotation (``max_speed: float``) is a mutable property.
- A ``@property`` is a property; it is mutable only if it has a setter.
- Any other public function is a method.
- Private and dunder names are ignored.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

_NUMERIC_TYPES: tuple[type, ...] = (int, float)


class SlotKind(Enum):
    """Kind of contract member a slot backs."""

    PROPERTY = "property"
    METHOD = "method"


def _is_numeric(value_type: Any) -> bool:
    # bool is an int subclass but has no meaningful negative sentinel
    return value_type in _NUMERIC_TYPES and value_type is not bool


def neutral_value(value_type: Any) -> Any:
    """Return the harmless "zero" value for a type.

    Args:
        value_type: The annotated type of a property or method return.

    Returns:
        0 or 0.0 for numbers, False for bool, "" for str, None otherwise.
    """
    if value_type is bool:
        return False
    if value_type is int:
        return 0
    if value_type is float:
        return 0.0
    if value_type is str:
        return ""
    return None


@dataclass(frozen=True)
class PropertySpec:
    """A property declared by a contract.

    Attributes:
        name: Property name.
        value_type: Annotated value type (typing.Any if unannotated).
        mutable: Whether the contract allows assignment.
    """

    name: str
    value_type: Any = Any
    mutable: bool = True

    def sentinel(self, numeric_sentinel: float = -1) -> Any:
        """Return the conventionally invalid value used before configuration.

        Args:
            numeric_sentinel: Sentinel for numeric properties (default -1).

        Returns:
            The sentinel converted to the property's numeric type, or None
            for non-numeric properties.
        """
        if _is_numeric(self.value_type):
            return self.value_type(numeric_sentinel)
        return None

    @property
    def neutral(self) -> Any:
        """Value the no-op preset assigns to this property."""
        return neutral_value(self.value_type)


@dataclass(frozen=True)
class MethodSpec:
    """A method declared by a contract.

    Attributes:
        name: Method name.
        signature: Signature as declared on the protocol, including self.
        return_type: Annotated return type (type(None) for ``-> None``).
    """

    name: str
    signature: inspect.Signature
    return_type: Any = Any


@dataclass(frozen=True)
class InterfaceContract:
    """Immutable description of an interface's members.

    Attributes:
        name: Contract name, used in error messages and logs.
        properties: Property specs in declaration order.
        methods: Method specs in declaration order.
    """

    name: str
    properties: tuple[PropertySpec, ...] = ()
    methods: tuple[MethodSpec, ...] = ()

    def __post_init__(self) -> None:
        """Reject contracts that declare the same member twice."""
        names = self.member_names
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"{self.name} declares members more than once: {duplicates}")

    @property
    def member_names(self) -> list[str]:
        """All member names, properties first."""
        return [p.name for p in self.properties] + [m.name for m in self.methods]

    def __contains__(self, name: object) -> bool:
        return name in self.member_names

    def kind_of(self, name: str) -> SlotKind | None:
        """Return the slot kind for a member, or None if not declared."""
        if any(p.name == name for p in self.properties):
            return SlotKind.PROPERTY
        if any(m.name == name for m in self.methods):
            return SlotKind.METHOD
        return None

    def property_spec(self, name: str) -> PropertySpec:
        """Look up a property spec by name.

        Raises:
            KeyError: If the contract declares no such property.
        """
        for spec in self.properties:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def method_spec(self, name: str) -> MethodSpec:
        """Look up a method spec by name.

        Raises:
            KeyError: If the contract declares no such method.
        """
        for spec in self.methods:
            if spec.name == name:
                return spec
        raise KeyError(name)

    @classmethod
    def from_protocol(cls, protocol: type) -> InterfaceContract:
        """Build a contract from a typing.Protocol class.

        Members inherited from parent protocols are included; a redefinition
        in a subprotocol replaces the parent's declaration.

        Args:
            protocol: A class deriving from typing.Protocol.

        Returns:
            The contract describing the protocol's public members.

        Raises:
            TypeError: If ``protocol`` is not a Protocol class.
        """
        if not getattr(protocol, "_is_protocol", False) or protocol is Protocol:
            raise TypeError(f"{protocol!r} is not a Protocol class")

        properties: dict[str, PropertySpec] = {}
        methods: dict[str, MethodSpec] = {}

        for base in reversed(protocol.__mro__):
            if base in (object, Protocol) or not getattr(base, "_is_protocol", False):
                continue

            annotations = inspect.get_annotations(base, eval_str=True)
            for name, value_type in annotations.items():
                if name.startswith("_"):
                    continue
                methods.pop(name, None)
                properties[name] = PropertySpec(name=name, value_type=value_type)

            for name, member in vars(base).items():
                if name.startswith("_"):
                    continue
                if isinstance(member, property):
                    methods.pop(name, None)
                    properties[name] = _property_spec(name, member)
                elif inspect.isfunction(member):
                    properties.pop(name, None)
                    methods[name] = _method_spec(name, member)

        return cls(
            name=protocol.__name__,
            properties=tuple(properties.values()),
            methods=tuple(methods.values()),
        )


def _return_type(annotation: Any) -> Any:
    if annotation is inspect.Signature.empty:
        return Any
    if annotation is None:
        return type(None)
    return annotation


def _property_spec(name: str, member: property) -> PropertySpec:
    value_type: Any = Any
    if member.fget is not None:
        value_type = _return_type(
            inspect.signature(member.fget, eval_str=True).return_annotation
        )
    return PropertySpec(name=name, value_type=value_type, mutable=member.fset is not None)


def _method_spec(name: str, member: Any) -> MethodSpec:
    signature = inspect.signature(member, eval_str=True)
    return MethodSpec(
        name=name,
        signature=signature,
        return_type=_return_type(signature.return_annotation),
    )

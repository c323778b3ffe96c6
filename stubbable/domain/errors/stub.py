"""Stub setup errors for Stubbable.

These exceptions signal mistakes in test or setup code, not runtime
conditions of the system under test. They are raised loudly and are
never caught or retried inside the library.

Failures that belong to a contract's own semantics (a connect call
returning False, for example) are NOT modelled here; they are ordinary
return values of a configured slot.
"""

from stubbable.domain.exceptions import StubbableError


class UnstubbedInvocationError(StubbableError):
    """Raised when a method slot is invoked while still holding its default.

    Every method slot starts out with a behavior that raises this error.
    Seeing it means the test forgot to configure the member, either
    directly or through a preset.

    This error should NEVER be caught by the code under test.

    Usage:
        raise UnstubbedInvocationError(contract="DrivableProtocol", member="stop")
    """

    def __init__(self, contract: str, member: str) -> None:
        """Initialize with the contract and member that were not stubbed.

        Args:
            contract: Name of the contract being stubbed.
            member: Name of the member that was invoked.
        """
        super().__init__(f"{contract}.{member} is not stubbed")
        self.contract = contract
        self.member = member


class UnknownSlotError(StubbableError, AttributeError):
    """Raised when reading or writing a slot the contract does not declare.

    Subclasses AttributeError so that attribute probing (hasattr, getattr
    with a default) keeps working on stub sets.
    """

    def __init__(self, contract: str, name: str) -> None:
        """Initialize with the contract and the unknown slot name.

        Args:
            contract: Name of the contract being stubbed.
            name: Slot name that is not a member of the contract.
        """
        super().__init__(f"{contract} has no member named {name!r}")
        self.contract = contract
        self.name = name


class InvalidSlotValueError(StubbableError, TypeError):
    """Raised when a non-callable value is assigned to a method slot."""

    def __init__(self, contract: str, name: str, value: object) -> None:
        """Initialize with the offending slot and value.

        Args:
            contract: Name of the contract being stubbed.
            name: Method slot name.
            value: The non-callable value that was assigned.
        """
        super().__init__(
            f"{contract}.{name} is a method slot and needs a callable, "
            f"got {type(value).__name__}"
        )
        self.contract = contract
        self.name = name


class StubSealedError(StubbableError):
    """Raised when reconfiguring methods of an already constructed stub.

    Construction seals the stub set. Afterwards only the property slots
    of mutable properties may change, through the instance's setters.
    """

    def __init__(self, contract: str, name: str) -> None:
        """Initialize with the contract and the rejected slot or preset.

        Args:
            contract: Name of the contract being stubbed.
            name: Slot or preset name that was rejected.
        """
        super().__init__(
            f"{contract} stub is sealed; {name!r} cannot be reconfigured after construction"
        )
        self.contract = contract
        self.name = name


class PresetError(StubbableError):
    """Raised for unknown preset names or presets naming unknown slots."""

    def __init__(self, contract: str, preset: str, reason: str) -> None:
        """Initialize with preset details.

        Args:
            contract: Name of the contract being stubbed.
            preset: Preset name.
            reason: Why the preset could not be applied.
        """
        super().__init__(f"{contract} preset {preset!r}: {reason}")
        self.contract = contract
        self.preset = preset

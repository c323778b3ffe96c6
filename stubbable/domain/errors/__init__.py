"""Domain errors for Stubbable.

Provides specific exception classes for stub setup mistakes.
All exceptions inherit from StubbableError.
"""

from stubbable.domain.errors.stub import (
    InvalidSlotValueError,
    PresetError,
    StubSealedError,
    UnknownSlotError,
    UnstubbedInvocationError,
)

__all__: list[str] = [
    "InvalidSlotValueError",
    "PresetError",
    "StubSealedError",
    "UnknownSlotError",
    "UnstubbedInvocationError",
]

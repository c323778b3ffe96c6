"""Base exception classes for the Stubbable domain layer."""


class StubbableError(Exception):
    """Base exception for all stubbing errors.

    All library-specific exceptions MUST inherit from this class so that
    callers can distinguish stub configuration mistakes from failures
    raised by the code under test.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)

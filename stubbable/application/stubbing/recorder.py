"""Call recorder for method slots.

A CallRecorder is a callable slot value that remembers every call and
then delegates to an optional behavior. It is opt-in: stub sets never
install one by default.

Usage:
    steer = CallRecorder()
    car = MockCar(lambda s: (s.apply_noop(), setattr(s, "steer", steer)))
    car.steer(SteeringDirection.LEFT, 100.0)
    assert steer.last_call.args == (SteeringDirection.LEFT, 100.0)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RecordedCall:
    """Arguments of one recorded call."""

    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)


class CallRecorder:
    """Slot callable that records calls and delegates to a behavior.

    Attributes:
        behavior: Callable invoked with each call's arguments. None means
                  the recorder returns None.
    """

    def __init__(self, behavior: Callable[..., Any] | None = None) -> None:
        self.behavior = behavior
        self._calls: list[RecordedCall] = []

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self._calls.append(RecordedCall(args=args, kwargs=dict(kwargs)))
        if self.behavior is None:
            return None
        return self.behavior(*args, **kwargs)

    @property
    def calls(self) -> list[RecordedCall]:
        """Recorded calls, oldest first (copy)."""
        return list(self._calls)

    @property
    def call_count(self) -> int:
        """Number of recorded calls."""
        return len(self._calls)

    @property
    def called(self) -> bool:
        """Whether the recorder has been called at least once."""
        return bool(self._calls)

    @property
    def last_call(self) -> RecordedCall | None:
        """Most recent call, or None if never called."""
        return self._calls[-1] if self._calls else None

    def reset(self) -> None:
        """Forget all recorded calls."""
        self._calls.clear()

"""Stub vehicle for testing code that depends on DrivableProtocol.

Default state (no configuration):
- max_speed reads -1.0
- start, stop and steer raise UnstubbedInvocationError

Presets:
- apply_noop(): max_speed 0.0, start returns True, stop and steer do nothing
- apply_stalled_engine(): max_speed 0.0, start returns False

Usage Examples:
    # All members harmless
    car = MockCar(lambda s: s.apply_noop())

    # Harmless, with a custom top speed
    def fast(stubs: CarStubs) -> None:
        stubs.apply_noop()
        stubs.max_speed = 1000.0

    car = MockCar(fast)

    # Only steering configured; start/stop still fail loudly
    car = MockCar(lambda s: setattr(s, "steer", lambda direction, velocity: None))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stubbable.application.ports.drivable import DRIVABLE_CONTRACT, DrivableProtocol
from stubbable.application.stubbing import StubInstance, StubSet, preset


def _engine_stalls(retries: int) -> bool:
    return False


class CarStubs(StubSet, contract=DRIVABLE_CONTRACT):
    """Slots for MockCar."""

    @preset
    def apply_stalled_engine(self) -> Mapping[str, Any]:
        """Engine never starts; the car cannot move.

        Sets max_speed to 0.0 and start to always return False. stop and
        steer are left as they were.
        """
        return {"max_speed": 0.0, "start": _engine_stalls}


class MockCar(StubInstance, DrivableProtocol, stubs=CarStubs):
    """DrivableProtocol implementation backed by CarStubs.

    For testing only.
    """

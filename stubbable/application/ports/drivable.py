"""Drivable port.

Defines the contract for a steerable vehicle. No vehicle control logic
lives in this package; the port exists so that code depending on a
vehicle can be exercised with a stub.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from stubbable.domain.models import InterfaceContract, SteeringDirection


@runtime_checkable
class DrivableProtocol(Protocol):
    """Protocol for a steerable vehicle.

    Members:
        max_speed: Top speed; assignable.
        start: Start the engine, retrying up to ``retries`` times.
               Returns True if the engine is running.
        stop: Stop the engine.
        steer: Steer in a direction at a velocity.
    """

    max_speed: float

    def start(self, retries: int) -> bool:
        """Start the engine.

        Args:
            retries: Number of additional attempts after the first.

        Returns:
            True if the engine started, False otherwise.
        """
        ...

    def stop(self) -> None:
        """Stop the engine."""
        ...

    def steer(self, direction: SteeringDirection, velocity: float) -> None:
        """Steer the vehicle.

        Args:
            direction: Where to steer.
            velocity: Velocity to steer at.
        """
        ...


DRIVABLE_CONTRACT = InterfaceContract.from_protocol(DrivableProtocol)

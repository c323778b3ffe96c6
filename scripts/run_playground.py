#!/usr/bin/env python3
"""Stubbable Playground - walk through the stub configuration pattern.

Builds four MockCar stubs and prints what each one does:

1. A no-op car (every member harmless)
2. A no-op car with max_speed overridden
3. A car with only steering configured
4. An unconfigured car whose stop() fails loudly

Usage:
    python scripts/run_playground.py [options]

Options:
    --environment ENV    Log output format: production (JSON) or
                         development (console). Default: development
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from stubbable.domain.errors import UnstubbedInvocationError
from stubbable.domain.models import SteeringDirection
from stubbable.infrastructure.observability import configure_structlog
from stubbable.infrastructure.stubs import CarStubs, MockCar

# Load environment variables (LOG_LEVEL, STUBBABLE_*)
load_dotenv()


def noop_with_max_speed(stubs: CarStubs) -> None:
    """Harmless car with a custom top speed."""
    stubs.apply_noop()
    stubs.max_speed = 1000.0


def run_playground() -> list[str]:
    """Run the walk-through and return the lines it printed."""
    lines: list[str] = []

    def emit(line: str) -> None:
        lines.append(line)
        print(line)

    noop_car = MockCar(lambda stubs: stubs.apply_noop())
    emit(f"noop max_speed: {noop_car.max_speed}")

    fast_car = MockCar(noop_with_max_speed)
    emit(f"noop_with_max_speed: {fast_car.max_speed}")

    def print_steering(direction: SteeringDirection, velocity: float) -> None:
        emit(f"direction: {direction.value}, velocity: {velocity}")

    def custom_steering(stubs: CarStubs) -> None:
        stubs.steer = print_steering

    steering_car = MockCar(custom_steering)
    steering_car.steer(SteeringDirection.LEFT, 100.0)

    unstubbed_car = MockCar()
    try:
        unstubbed_car.stop()
    except UnstubbedInvocationError as exc:
        emit(f"unstubbed: {exc}")

    return lines


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run the walk-through."""
    parser = argparse.ArgumentParser(description="Stubbable playground")
    parser.add_argument(
        "--environment",
        choices=["production", "development"],
        default="development",
        help="Log output format (default: development)",
    )
    args = parser.parse_args(argv)

    configure_structlog(environment=args.environment)
    run_playground()
    return 0


if __name__ == "__main__":
    sys.exit(main())

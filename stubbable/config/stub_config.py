"""Stub set configuration.

This module defines configuration shared by every stub set, with
environment variable overrides so a whole test run can be switched to
tracing mode without touching test code.

Environment Variables:
- STUBBABLE_NUMERIC_SENTINEL: Value numeric properties hold before
  configuration (default: -1, must be negative)
- STUBBABLE_TRACE_INVOCATIONS: Log every slot invocation at debug level
  (default: false; accepts 1/true/yes/on)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set.

    Returns:
        True if the value is one of 1/true/yes/on (case-insensitive),
        False for any other set value, default if unset.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class StubConfig:
    """Configuration for stub set defaults and diagnostics.

    Attributes:
        numeric_sentinel: Value numeric property slots hold until configured.
                          Default: -1. Must be negative so it can never be
                          mistaken for a configured capacity or speed.
        trace_invocations: Log each slot invocation (member, arguments) at
                           debug level. Default: False.
    """

    numeric_sentinel: float = -1
    trace_invocations: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.numeric_sentinel >= 0:
            raise ValueError(
                f"numeric_sentinel must be negative, got {self.numeric_sentinel}"
            )

    @classmethod
    def from_environment(cls) -> "StubConfig":
        """Create config from environment variables with defaults.

        Environment Variables:
            STUBBABLE_NUMERIC_SENTINEL: Numeric sentinel (default: -1)
            STUBBABLE_TRACE_INVOCATIONS: Trace slot calls (default: false)

        Returns:
            StubConfig with values from environment or defaults.
        """
        return cls(
            numeric_sentinel=_get_float_env("STUBBABLE_NUMERIC_SENTINEL", -1),
            trace_invocations=_get_bool_env("STUBBABLE_TRACE_INVOCATIONS", False),
        )


# Pre-defined configurations

# Default config used when a stub is built without one
DEFAULT_STUB_CONFIG = StubConfig()

# Debugging config that logs every slot invocation
TRACING_STUB_CONFIG = StubConfig(trace_invocations=True)

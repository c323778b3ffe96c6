"""Configuration module for Stubbable.

Available Configurations:
- StubConfig: Sentinel values and invocation tracing for stub sets
"""

from stubbable.config.stub_config import (
    DEFAULT_STUB_CONFIG,
    TRACING_STUB_CONFIG,
    StubConfig,
)

__all__ = [
    "StubConfig",
    "DEFAULT_STUB_CONFIG",
    "TRACING_STUB_CONFIG",
]

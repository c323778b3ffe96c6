"""Stubbing mechanism.

- StubSet: one overridable slot per contract member, with presets
- preset: decorator for atomic ``apply_<scenario>`` presets
- StubInstance: contract implementation forwarding to a sealed StubSet
- StubFactory: stubs for any Protocol, hand-written or generated
- CallRecorder: opt-in call recording for method slots
"""

from stubbable.application.stubbing.factory import StubFactory, build_stub_class
from stubbable.application.stubbing.recorder import CallRecorder, RecordedCall
from stubbable.application.stubbing.stub_instance import (
    ConfigurationFunction,
    StubInstance,
)
from stubbable.application.stubbing.stub_set import (
    StubSet,
    UnstubbedBehavior,
    noop_behavior,
    preset,
)

__all__: list[str] = [
    "CallRecorder",
    "ConfigurationFunction",
    "RecordedCall",
    "StubFactory",
    "StubInstance",
    "StubSet",
    "UnstubbedBehavior",
    "build_stub_class",
    "noop_behavior",
    "preset",
]

"""Unit tests for CallRecorder."""

from stubbable.application.stubbing import CallRecorder, RecordedCall
from stubbable.domain.models import SteeringDirection
from stubbable.infrastructure.stubs import CarStubs, MockCar


class TestCallRecorder:
    """Test recording and delegation."""

    def test_initial_state(self) -> None:
        """A new recorder has no calls."""
        recorder = CallRecorder()

        assert recorder.called is False
        assert recorder.call_count == 0
        assert recorder.last_call is None
        assert recorder.calls == []

    def test_records_arguments(self) -> None:
        """Positional and keyword arguments are recorded in order."""
        recorder = CallRecorder()

        recorder(1, 2)
        recorder("x", flag=True)

        assert recorder.call_count == 2
        assert recorder.calls == [
            RecordedCall(args=(1, 2), kwargs={}),
            RecordedCall(args=("x",), kwargs={"flag": True}),
        ]
        assert recorder.last_call == RecordedCall(args=("x",), kwargs={"flag": True})

    def test_delegates_to_behavior(self) -> None:
        """The behavior's return value is returned."""
        recorder = CallRecorder(lambda retries: retries > 0)

        assert recorder(2) is True
        assert recorder(0) is False

    def test_returns_none_without_behavior(self) -> None:
        """Without a behavior the recorder returns None."""
        assert CallRecorder()("anything") is None

    def test_reset(self) -> None:
        """reset() forgets all calls."""
        recorder = CallRecorder()
        recorder()
        recorder.reset()

        assert recorder.called is False

    def test_calls_is_a_copy(self) -> None:
        """Mutating the returned list does not affect the recorder."""
        recorder = CallRecorder()
        recorder()
        recorder.calls.clear()

        assert recorder.call_count == 1


class TestRecorderAsSlot:
    """A recorder can back a method slot."""

    def test_records_stub_invocations(self) -> None:
        """Calls through the stub instance are recorded."""
        steer = CallRecorder()

        def configure(stubs: CarStubs) -> None:
            stubs.apply_noop()
            stubs.steer = steer

        car = MockCar(configure)
        car.steer(SteeringDirection.LEFT, 100.0)
        car.steer(direction=SteeringDirection.RIGHT, velocity=5.0)

        assert steer.call_count == 2
        assert steer.calls[0].args == (SteeringDirection.LEFT, 100.0)
        # keyword calls are normalised to the contract's positional layout
        assert steer.calls[1].args == (SteeringDirection.RIGHT, 5.0)

"""Unit tests for MockHttpClient and HttpClientStubs."""

import pytest

from stubbable.application.ports import HttpClientProtocol
from stubbable.domain.errors import StubSealedError, UnstubbedInvocationError
from stubbable.infrastructure.stubs import (
    NOT_FOUND_RESPONSE,
    OK_RESPONSE,
    HttpClientStubs,
    MockHttpClient,
)

ANY_URL = "https://example.test"


class TestMockHttpClientDefaults:
    """Test MockHttpClient without configuration."""

    def test_max_connections_sentinel(self) -> None:
        """max_connections reads -1 until configured."""
        assert MockHttpClient().max_connections == -1

    @pytest.mark.parametrize(
        ("member", "args"),
        [("connect", (ANY_URL,)), ("disconnect", ()), ("get", ("/",))],
    )
    def test_methods_not_stubbed(self, member: str, args: tuple) -> None:
        """Every method raises until configured."""
        with pytest.raises(UnstubbedInvocationError):
            getattr(MockHttpClient(), member)(*args)

    def test_is_http_client(self) -> None:
        """MockHttpClient implements HttpClientProtocol."""
        assert isinstance(MockHttpClient(), HttpClientProtocol)

    def test_sealed_max_connections_not_writable(self) -> None:
        """The read-only slot cannot be rewritten through the stub set."""
        client = MockHttpClient(lambda stubs: stubs.apply_failed_connection())

        with pytest.raises(StubSealedError):
            client.stubs.max_connections = 99
        assert client.max_connections == 1

    def test_fresh_stub_sets_compare_equal(self) -> None:
        """Unconfigured stub sets have equal snapshots."""
        assert HttpClientStubs().snapshot() == HttpClientStubs().snapshot()

    def test_max_connections_read_only(self) -> None:
        """max_connections has no setter on the instance."""
        client = MockHttpClient()

        with pytest.raises(AttributeError):
            client.max_connections = 5


class TestNoopPreset:
    """Test the no-op preset."""

    def test_connect_succeeds(self, noop_http_client: MockHttpClient) -> None:
        """connect returns True and max_connections reads 0."""
        assert noop_http_client.connect(ANY_URL) is True
        assert noop_http_client.max_connections == 0

    def test_get_returns_ok(self, noop_http_client: MockHttpClient) -> None:
        """get returns an empty 200 response."""
        response = noop_http_client.get("/status")

        assert response is OK_RESPONSE
        assert response.ok is True

    def test_disconnect_does_nothing(self, noop_http_client: MockHttpClient) -> None:
        """disconnect has no observable effect."""
        assert noop_http_client.disconnect() is None

    def test_idempotent(self) -> None:
        """Applying no-op twice equals applying it once."""
        once = HttpClientStubs()
        once.apply_noop()
        twice = HttpClientStubs()
        twice.apply_noop()
        twice.apply_noop()

        assert once.snapshot() == twice.snapshot()


class TestFailedConnectionPreset:
    """Test the failed-connection preset."""

    def test_connect_refused(self, failed_http_client: MockHttpClient) -> None:
        """connect returns False and max_connections reads 1."""
        assert failed_http_client.connect(ANY_URL) is False
        assert failed_http_client.max_connections == 1

    def test_failure_is_a_return_value(self, failed_http_client: MockHttpClient) -> None:
        """Refusal travels in the return channel; other slots stay unstubbed."""
        failed_http_client.connect(ANY_URL)

        with pytest.raises(UnstubbedInvocationError):
            failed_http_client.get("/")

    def test_after_noop_keeps_other_noops(self) -> None:
        """Failed connection layered on no-op keeps disconnect/get harmless."""

        def configure(stubs: HttpClientStubs) -> None:
            stubs.apply_noop()
            stubs.apply_failed_connection()

        client = MockHttpClient(configure)

        assert client.connect(ANY_URL) is False
        assert client.max_connections == 1
        assert client.get("/") is OK_RESPONSE

    def test_idempotent(self) -> None:
        """Applying the preset twice equals applying it once."""
        once = HttpClientStubs()
        once.apply_failed_connection()
        twice = HttpClientStubs()
        twice.apply_failed_connection()
        twice.apply_failed_connection()

        assert once.snapshot() == twice.snapshot()


class TestNotFoundPreset:
    """Test the not-found preset."""

    def test_get_returns_404(self) -> None:
        """Connections succeed; GET returns 404."""
        client = MockHttpClient(lambda stubs: stubs.apply_not_found())

        assert client.connect(ANY_URL) is True
        response = client.get("/missing")
        assert response is NOT_FOUND_RESPONSE
        assert response.ok is False

    def test_presets_listed(self) -> None:
        """HttpClientStubs lists its presets."""
        assert HttpClientStubs.presets() == ("failed_connection", "noop", "not_found")

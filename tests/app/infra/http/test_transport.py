"""Testes do seletor de transporte HTTP."""

from __future__ import annotations

import asyncio
import json
import ssl
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from functools import partial
from unittest.mock import MagicMock, patch

import httpx
import pytest
import trustme

from api.connectors.home_assistant import HomeAssistantHttpClient
from app.infra.http import (
    DirectTransport,
    HttpClientConfig,
    OverlayTransport,
    create_transport,
)
from config.settings import HomeAssistantSettings
from utils.errors import InternalError

SMART_HOME_URL = "https://ha.example.com/api/alexa/smart_home"
BACKEND_DOCUMENT = {"event": {"header": {"name": "Response"}}}


class FakeOverlaySession:
    """Sessão overlay que entrega clientes com timeout próprio."""

    def __init__(self) -> None:
        self.calls = 0

    def http_client(self) -> httpx.AsyncClient:
        self.calls += 1
        return httpx.AsyncClient(timeout=httpx.Timeout(120.0))


class TestHttpClientConfig:
    """Testes de HttpClientConfig."""

    def test_defaults(self) -> None:
        config = HttpClientConfig()
        assert config.timeout_seconds == 10.0
        assert config.verify_ssl is True
        assert config.timeout == httpx.Timeout(10.0)


class TestDirectTransport:
    """Testes de DirectTransport."""

    @pytest.mark.asyncio
    async def test_client_has_fixed_timeout(self) -> None:
        transport = DirectTransport(HttpClientConfig(timeout_seconds=10.0))
        async with transport.client() as client:
            assert client.timeout == httpx.Timeout(10.0)

    def test_verify_flag_is_forwarded_to_httpx(self) -> None:
        """NOT_VERIFY_SSL=true → verify=False (aceita certificado autoassinado)."""
        with patch("app.infra.http.transport.httpx.AsyncClient") as async_client:
            DirectTransport(HttpClientConfig(verify_ssl=False)).client()

        kwargs = async_client.call_args.kwargs
        assert kwargs["verify"] is False
        assert kwargs["timeout"] == httpx.Timeout(10.0)
        assert kwargs["follow_redirects"] is True

    def test_verification_enabled_by_default(self) -> None:
        with patch("app.infra.http.transport.httpx.AsyncClient") as async_client:
            DirectTransport().client()

        assert async_client.call_args.kwargs["verify"] is True

    @pytest.mark.asyncio
    async def test_each_call_returns_new_client(self) -> None:
        transport = DirectTransport()
        first, second = transport.client(), transport.client()
        try:
            assert first is not second
        finally:
            await first.aclose()
            await second.aclose()


class TestOverlayTransport:
    """Testes de OverlayTransport."""

    @pytest.mark.asyncio
    async def test_uses_session_client(self) -> None:
        session = FakeOverlaySession()
        transport = OverlayTransport(session, HttpClientConfig())

        async with transport.client():
            pass

        assert session.calls == 1

    @pytest.mark.asyncio
    async def test_enforces_configured_timeout(self) -> None:
        """O timeout da sessão é substituído pelo configurado."""
        transport = OverlayTransport(FakeOverlaySession(), HttpClientConfig(timeout_seconds=10.0))

        async with transport.client() as client:
            assert client.timeout == httpx.Timeout(10.0)

    @pytest.mark.asyncio
    async def test_enforces_redirect_following(self) -> None:
        transport = OverlayTransport(FakeOverlaySession(), HttpClientConfig())

        async with transport.client() as client:
            assert client.follow_redirects is True


class TestCreateTransport:
    """Testes de create_transport."""

    def test_direct_without_session(self) -> None:
        settings = HomeAssistantSettings(base_url="https://ha", verify_ssl=False)

        transport = create_transport(settings)

        assert isinstance(transport, DirectTransport)
        assert transport.config == HttpClientConfig(timeout_seconds=10.0, verify_ssl=False)

    def test_overlay_with_session(self) -> None:
        settings = HomeAssistantSettings(base_url="https://ha")

        transport = create_transport(settings, FakeOverlaySession())

        assert isinstance(transport, OverlayTransport)
        assert transport.config.timeout_seconds == 10.0

    def test_logs_disabled_tls_verification(self) -> None:
        settings = HomeAssistantSettings(base_url="https://ha", verify_ssl=False)
        with patch("app.infra.http.transport.logger", MagicMock()) as logger:
            create_transport(settings)

        logger.warning.assert_called_once_with("http_transport_tls_verification_disabled")


class TestRedirects:
    """Redirects do backend (ex: proxy reverso respondendo 308)."""

    @pytest.mark.asyncio
    async def test_permanent_redirect_resends_post(self, discover_event: dict) -> None:
        requests: list[httpx.Request] = []

        def _backend(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            if request.url.path == "/api/alexa/smart_home":
                return httpx.Response(
                    308,
                    headers={"Location": "https://ha.example.com/new/api/alexa/smart_home"},
                )
            return httpx.Response(200, json=BACKEND_DOCUMENT)

        mocked_client = partial(httpx.AsyncClient, transport=httpx.MockTransport(_backend))
        with patch("app.infra.http.transport.httpx.AsyncClient", mocked_client):
            client = HomeAssistantHttpClient(DirectTransport(), SMART_HOME_URL)
            result = await client.forward_directive(discover_event, "discover-token")

        assert result == BACKEND_DOCUMENT
        assert [request.url.path for request in requests] == [
            "/api/alexa/smart_home",
            "/new/api/alexa/smart_home",
        ]
        redirected = requests[1]
        assert redirected.method == "POST"
        assert json.loads(redirected.content) == discover_event
        assert redirected.headers["Authorization"] == "Bearer discover-token"


@asynccontextmanager
async def _self_signed_backend() -> AsyncIterator[str]:
    """Servidor HTTPS local com certificado de uma CA não confiável."""
    ca = trustme.CA()
    server_context = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
    ca.issue_cert("127.0.0.1").configure_cert(server_context)
    body = json.dumps(BACKEND_DOCUMENT).encode("utf-8")

    async def _respond(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        head = await reader.readuntil(b"\r\n\r\n")
        length = 0
        for line in head.split(b"\r\n"):
            name, _, value = line.partition(b":")
            if name.strip().lower() == b"content-length":
                length = int(value.strip())
        if length:
            await reader.readexactly(length)
        writer.write(
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: application/json\r\n"
            b"Content-Length: %d\r\n"
            b"Connection: close\r\n\r\n" % len(body)
            + body
        )
        await writer.drain()
        writer.close()

    server = await asyncio.start_server(_respond, "127.0.0.1", 0, ssl=server_context)
    port = server.sockets[0].getsockname()[1]
    try:
        yield f"https://127.0.0.1:{port}/api/alexa/smart_home"
    finally:
        server.close()


class TestSelfSignedBackend:
    """Backend com certificado autoassinado, via TLS real."""

    @pytest.fixture(autouse=True)
    def no_proxy_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("HTTPS_PROXY", "HTTP_PROXY", "ALL_PROXY"):
            monkeypatch.delenv(name, raising=False)
            monkeypatch.delenv(name.lower(), raising=False)

    @pytest.mark.asyncio
    async def test_accepted_when_verification_disabled(self, discover_event: dict) -> None:
        async with _self_signed_backend() as endpoint:
            transport = DirectTransport(HttpClientConfig(verify_ssl=False))
            result = await HomeAssistantHttpClient(transport, endpoint).forward_directive(
                discover_event, "discover-token"
            )

        assert result == BACKEND_DOCUMENT

    @pytest.mark.asyncio
    async def test_rejected_when_verification_enabled(self, discover_event: dict) -> None:
        async with _self_signed_backend() as endpoint:
            transport = DirectTransport(HttpClientConfig(verify_ssl=True))
            with pytest.raises(InternalError, match="internal server error"):
                await HomeAssistantHttpClient(transport, endpoint).forward_directive(
                    discover_event, "discover-token"
                )

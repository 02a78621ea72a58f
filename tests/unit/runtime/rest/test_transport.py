"""Precise unit tests for RESTTransport.

Tests focus on header attachment and error translation.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from cloudkit.business.auth import BearerCredential
from cloudkit.business.core import TransportError
from cloudkit.business.runtime.rest import HTTPClient, HTTPResponse, RESTTransport


@pytest.fixture
def http():
    client = MagicMock(spec=HTTPClient)
    client.request = AsyncMock(
        return_value=HTTPResponse(status=200, url="https://api.example.com/x", body=b"{}")
    )
    client.close = AsyncMock()
    return client


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init_builds_http_client_with_timeout(self):
        """Test RESTTransport creates its own HTTPClient."""
        transport = RESTTransport(BearerCredential("t"), timeout=12.0)
        assert transport._http.timeout.total == 12.0

    @pytest.mark.asyncio
    async def test_send_attaches_bearer_and_content_type(self, http):
        """Test every request carries the credential and JSON content type."""
        transport = RESTTransport(BearerCredential("token-1"), http=http)

        await transport.send("get", "https://api.example.com/x")

        http.request.assert_called_once_with(
            "GET",
            "https://api.example.com/x",
            json_body=None,
            headers={"Authorization": "Bearer token-1", "Content-Type": "application/json"},
        )

    @pytest.mark.asyncio
    async def test_send_passes_body(self, http):
        """Test PATCH payload is forwarded."""
        transport = RESTTransport(BearerCredential("t"), http=http)

        await transport.send("PATCH", "https://api.example.com/x", {"title": "A"})

        _, kwargs = http.request.call_args
        assert kwargs["json_body"] == {"title": "A"}

    @pytest.mark.asyncio
    async def test_non_2xx_is_not_an_error(self, http):
        """Test status codes are surfaced, not raised."""
        http.request.return_value = HTTPResponse(status=500, url="u", body=b"oops")
        transport = RESTTransport(BearerCredential("t"), http=http)

        response = await transport.send("GET", "u")

        assert response.status == 500

    @pytest.mark.asyncio
    async def test_invalid_header_value(self, http):
        """Test a credential that cannot form a header fails before sending."""
        transport = RESTTransport(BearerCredential("bad\ntoken"), http=http)

        with pytest.raises(TransportError) as exc_info:
            await transport.send("GET", "https://api.example.com/x")

        assert exc_info.value.url == "https://api.example.com/x"
        http.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_network_failure(self, http):
        """Test aiohttp errors become TransportError."""
        http.request.side_effect = aiohttp.ClientConnectionError("refused")
        transport = RESTTransport(BearerCredential("t"), http=http)

        with pytest.raises(TransportError) as exc_info:
            await transport.send("GET", "https://api.example.com/x")

        assert exc_info.value.method == "GET"
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout(self, http):
        """Test timeouts become TransportError."""
        http.request.side_effect = asyncio.TimeoutError()
        transport = RESTTransport(BearerCredential("t"), http=http)

        with pytest.raises(TransportError, match="timed out"):
            await transport.send("GET", "https://api.example.com/x")

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self, http):
        """Test close() delegates to HTTPClient."""
        transport = RESTTransport(BearerCredential("t"), http=http)

        await transport.close()

        http.close.assert_called_once()

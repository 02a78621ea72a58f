"""Shared fixtures for unit tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from cloudkit.business.runtime.rest import HTTPResponse, RESTTransport


@pytest.fixture
def make_response():
    """Factory building HTTPResponse objects from JSON payloads."""

    def _make(
        payload: Any = None,
        *,
        status: int = 200,
        url: str = "https://api.example.com/test",
        raw: bytes | None = None,
    ) -> HTTPResponse:
        body = raw if raw is not None else json.dumps(payload).encode()
        return HTTPResponse(status=status, url=url, body=body)

    return _make


@pytest.fixture
def mock_transport():
    """Create mock REST transport; set ``send.side_effect`` per test."""
    transport = MagicMock(spec=RESTTransport)
    transport.send = AsyncMock()
    transport.close = AsyncMock()
    return transport

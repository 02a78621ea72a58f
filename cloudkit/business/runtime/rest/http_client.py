"""HTTP client helper."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import aiohttp


@dataclass(frozen=True)
class HTTPResponse:
    """Fully read HTTP response, detached from the aiohttp connection."""

    status: int
    url: str
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON. Raises ValueError on malformed input."""
        return json.loads(self.body or b"null")


class HTTPClient:
    """Async HTTP client wrapper.

    One aiohttp session (and its connection pool) is shared by every request
    issued through the client, including concurrent ones.
    """

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        *,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> HTTPResponse:
        """Send a request and read the whole body. Status is not checked."""
        async with self.session.request(
            method, url, json=json_body, headers=headers
        ) as response:
            body = await response.read()
            return HTTPResponse(
                status=response.status,
                url=str(response.url),
                body=body,
                headers=dict(response.headers),
            )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

"""Authenticated REST transport.

Sends exactly one request per call with the bearer credential and a JSON
content type attached. Non-2xx responses are returned, not raised; callers
decide what a status means.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...auth import BearerCredential
from ...core.exceptions import TransportError
from .http_client import HTTPClient, HTTPResponse

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json"


class RESTTransport:
    """Single-request transport bound to a read-only credential."""

    def __init__(
        self,
        credential: BearerCredential,
        *,
        timeout: float = 30.0,
        http: HTTPClient | None = None,
    ) -> None:
        self._credential = credential
        self._http = http or HTTPClient(timeout=timeout)

    def _headers(self, method: str, url: str) -> dict[str, str]:
        authorization = self._credential.authorization
        if any(ch in authorization for ch in "\r\n\x00"):
            raise TransportError("Invalid character in authorization header", method, url)
        return {"Authorization": authorization, "Content-Type": CONTENT_TYPE}

    async def send(self, method: str, url: str, body: Any = None) -> HTTPResponse:
        """Send one request.

        Args:
            method: HTTP method ("GET" or "PATCH")
            url: Fully built URL, query string included
            body: Optional JSON-serializable payload

        Returns:
            HTTPResponse whose status the caller must check

        Raises:
            TransportError: If the request cannot be built or sent
        """
        method = method.upper()
        headers = self._headers(method, url)
        try:
            response = await self._http.request(method, url, json_body=body, headers=headers)
        except asyncio.TimeoutError as e:
            logger.warning("request_timeout", extra={"method": method, "url": url})
            raise TransportError(f"{method} {url} timed out", method, url) from e
        except (aiohttp.ClientError, ValueError, TypeError) as e:
            logger.warning(
                "request_failed",
                extra={"method": method, "url": url, "error_type": type(e).__name__},
            )
            raise TransportError(f"{method} {url} failed: {e}", method, url) from e

        logger.debug(
            "request_sent", extra={"method": method, "url": url, "status": response.status}
        )
        return response

    async def close(self) -> None:
        await self._http.close()

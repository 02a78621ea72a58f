"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from ...config import PAGE_TOKEN_PARAM
from ...core.exceptions import APIError, SchemaViolationError
from .http_client import HTTPResponse
from .transport import RESTTransport

# Keep error messages readable when the API returns an HTML error page
_MAX_ERROR_BODY = 500


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "PATCH"
    build_url: Callable[[dict[str, Any]], str]
    build_body: Callable[[dict[str, Any]], Any] | None = None
    # Response field holding the item array for paginated listings
    items_key: str | None = None


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


def with_page_token(url: str, token: str | None) -> str:
    """Append the continuation token to a built URL."""
    if token is None:
        return url
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{PAGE_TOKEN_PARAM}={quote(token, safe='')}"


def decode_json(response: HTTPResponse, endpoint_id: str) -> Any:
    """Check status and decode a response body.

    Raises:
        APIError: Non-2xx status
        SchemaViolationError: Body is not valid JSON
    """
    if not response.ok:
        body = response.text[:_MAX_ERROR_BODY]
        raise APIError(
            f"{endpoint_id}: HTTP {response.status}: {body}",
            status_code=response.status,
            body=body,
        )
    try:
        return response.json()
    except ValueError as e:
        raise SchemaViolationError(f"{endpoint_id}: response body is not valid JSON") from e


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def fetch_json(
        self,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        *,
        page_token: str | None = None,
    ) -> Any:
        url = with_page_token(spec.build_url(params), page_token)
        body = spec.build_body(params) if spec.build_body else None
        response = await self._t.send(spec.method, url, body)
        return decode_json(response, spec.id)

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        data = await self.fetch_json(spec, params)
        try:
            return adapter.parse(data, params)
        except ValidationError as e:
            raise SchemaViolationError(f"{spec.id}: {e}") from e

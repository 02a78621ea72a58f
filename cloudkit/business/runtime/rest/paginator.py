"""Token-chained page walk over a listing endpoint.

This module provides the Paginator class that follows ``nextPageToken``
continuation tokens until the server stops returning one, appending each
page's items in the order they were received.
"""

from __future__ import annotations

from dataclasses import dataclass
from time import perf_counter
from typing import Any

from pydantic import ValidationError

from ...config import NEXT_PAGE_TOKEN_FIELD
from ...core.exceptions import PaginationLimitError, SchemaViolationError
from ..telemetry import log_page_fetched, log_pagination_complete, log_pagination_error
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner


@dataclass(frozen=True)
class ResultPage:
    """Items and continuation token extracted from one response body."""

    items: list[Any]
    next_page_token: str | None = None

    @classmethod
    def from_body(cls, body: Any, items_key: str) -> ResultPage:
        """Extract a page from a decoded response body.

        Args:
            body: Decoded JSON body
            items_key: Field holding the item array (e.g. "locations")

        Returns:
            ResultPage; ``next_page_token`` is None on the last page

        Raises:
            SchemaViolationError: Body is not an object, the items field is
                missing or not a list, or the token is not a string
        """
        if not isinstance(body, dict):
            raise SchemaViolationError(
                f"Expected a JSON object, got {type(body).__name__}", field=items_key
            )
        if items_key not in body:
            raise SchemaViolationError(f"Response is missing '{items_key}'", field=items_key)
        items = body[items_key]
        if not isinstance(items, list):
            raise SchemaViolationError(
                f"'{items_key}' must be a list, got {type(items).__name__}", field=items_key
            )

        token = body.get(NEXT_PAGE_TOKEN_FIELD)
        if token is not None and not isinstance(token, str):
            raise SchemaViolationError(
                f"'{NEXT_PAGE_TOKEN_FIELD}' must be a string", field=NEXT_PAGE_TOKEN_FIELD
            )
        # An empty token would restart the walk from the first page
        return cls(items=items, next_page_token=token or None)


class Paginator:
    """Walks a token chain sequentially and aggregates all pages.

    Each request depends on the token returned by the previous response, so
    pages are never fetched in parallel. The result is all-or-nothing: any
    failure on any page discards everything fetched so far.
    """

    def __init__(self, runner: RestRunner, *, max_pages: int | None = None) -> None:
        """Initialize paginator.

        Args:
            runner: Runner used to issue each page request
            max_pages: Optional cap on pages per walk; None follows the server
        """
        if max_pages is not None and max_pages <= 0:
            raise ValueError("max_pages must be None or a positive integer")
        self._runner = runner
        self._max_pages = max_pages

    async def list_all(
        self,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        adapter: ResponseAdapter | None = None,
    ) -> list[Any]:
        """Fetch every page of a listing.

        Args:
            spec: Listing endpoint; ``spec.items_key`` names the item array
            params: Parameters passed to the endpoint builder and adapter
            adapter: Optional adapter applied to each page's raw item list

        Returns:
            Items of all pages, concatenated in page order

        Raises:
            TransportError: A request could not be sent
            APIError: A page came back with a non-2xx status
            SchemaViolationError: A page body had the wrong shape
            PaginationLimitError: ``max_pages`` reached with a token pending
        """
        if not spec.items_key:
            raise ValueError(f"Endpoint {spec.id} is not a paginated listing")

        items: list[Any] = []
        token: str | None = None
        page_index = 0
        start = perf_counter()

        while True:
            try:
                body = await self._runner.fetch_json(spec, params, page_token=token)
                page = ResultPage.from_body(body, spec.items_key)
                parsed = adapter.parse(page.items, params) if adapter else page.items
            except ValidationError as e:
                log_pagination_error(
                    endpoint_id=spec.id,
                    page_index=page_index,
                    error_type="SchemaViolationError",
                    error_message=str(e),
                )
                raise SchemaViolationError(f"{spec.id}: {e}", field=spec.items_key) from e
            except Exception as e:
                log_pagination_error(
                    endpoint_id=spec.id,
                    page_index=page_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            items.extend(parsed)
            log_page_fetched(
                endpoint_id=spec.id,
                page_index=page_index,
                items=len(parsed),
                has_next=page.next_page_token is not None,
            )

            token = page.next_page_token
            page_index += 1
            if token is None:
                break

            if self._max_pages is not None and page_index >= self._max_pages:
                log_pagination_error(
                    endpoint_id=spec.id,
                    page_index=page_index,
                    error_type="PaginationLimitError",
                    error_message=f"more than {self._max_pages} pages",
                )
                raise PaginationLimitError(
                    f"{spec.id}: still paginating after {self._max_pages} pages",
                    max_pages=self._max_pages,
                )

        log_pagination_complete(
            endpoint_id=spec.id,
            pages=page_index,
            total_items=len(items),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return items

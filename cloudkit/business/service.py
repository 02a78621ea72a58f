"""Business directory service.

Architecture:
    BusinessService is the caller-facing facade. It owns one RESTTransport
    (and with it one aiohttp connection pool), a RestRunner for single
    requests, a Paginator for token-chained listings and a FanOutAggregator
    for per-location detail queries.

Design Decisions:
    - Listings are sequential page walks; each page needs the previous token
    - Per-location queries run concurrently and are all-or-nothing
    - The credential is an immutable value shared by every concurrent request,
      so no locking is needed
    - Every operation either returns a complete result or raises; there is no
      partial-success channel
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .auth import BearerCredential
from .config import ALL_ACCOUNTS, DEFAULT_READ_MASK, DEFAULT_UPDATE_MASK, ServiceConfig, join_mask
from .endpoints import accounts as accounts_ep
from .endpoints import admins as admins_ep
from .endpoints import location as location_ep
from .endpoints import locations as locations_ep
from .endpoints import reviews as reviews_ep
from .models import Accounts, Location, PageAdmins, ReviewSummary
from .runtime.fanout import FanOutAggregator, SubQueryRequest
from .runtime.rest import Paginator, RESTTransport, RestRunner

logger = logging.getLogger(__name__)


class BusinessService:
    """Async client for the business directory API."""

    def __init__(
        self,
        credential: BearerCredential | str,
        *,
        config: ServiceConfig | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize service.

        Args:
            credential: Access token or BearerCredential
            config: Runtime settings (defaults to ServiceConfig())
            transport: Optional pre-built transport, mostly for tests
        """
        if isinstance(credential, str):
            credential = BearerCredential(access_token=credential)
        self.config = config or ServiceConfig()
        self._transport = transport or RESTTransport(credential, timeout=self.config.timeout)
        self._rest = RestRunner(self._transport)
        self._paginator = Paginator(self._rest, max_pages=self.config.max_pages)
        self._fanout = FanOutAggregator(max_concurrency=self.config.max_concurrency)

    async def accounts(self) -> Accounts:
        """Fetch the accounts visible to the credential.

        Raises:
            EmptyResultError: The listing is empty
        """
        return await self._rest.run(
            spec=accounts_ep.SPEC, adapter=accounts_ep.Adapter(), params={}
        )

    async def get_locations(self, account_id: str = ALL_ACCOUNTS) -> list[Location]:
        """Fetch every location of an account with the default read mask.

        Args:
            account_id: Account managing the locations; "-" for service accounts
        """
        return await self._list_locations(account_id, join_mask(DEFAULT_READ_MASK))

    async def get_locations_details(
        self, account_id: str, read_mask: Sequence[str]
    ) -> list[Location]:
        """Fetch every location of an account with a custom read mask.

        Example:
            >>> mask = ["storeCode", "title", "name", "phoneNumbers"]
            >>> locations = await service.get_locations_details("-", mask)

        Args:
            account_id: Account managing the locations; "-" for service accounts
            read_mask: Ordered field names to read, joined with commas
        """
        return await self._list_locations(account_id, join_mask(read_mask))

    async def _list_locations(self, account_id: str, read_mask: str) -> list[Location]:
        params: dict[str, Any] = {
            "account_id": account_id,
            "read_mask": read_mask,
            "page_size": self.config.page_size,
        }
        result = await self._paginator.list_all(locations_ep.SPEC, params, locations_ep.Adapter())
        logger.info("Retrieved %d locations", len(result))
        return result

    async def admin(self, location: Location) -> PageAdmins:
        """Fetch the admins of one location."""
        return await self._rest.run(
            spec=admins_ep.SPEC, adapter=admins_ep.Adapter(), params={"location": location}
        )

    async def admins(self, locations: Sequence[Location]) -> list[PageAdmins]:
        """Fetch the admins of every location concurrently.

        Results come back in completion order; each carries ``page_name``.

        Raises:
            SubQueryError: Any single location failed; nothing else is returned
        """
        requests = [
            SubQueryRequest(key=loc.name, run=lambda loc=loc: self.admin(loc)) for loc in locations
        ]
        results = await self._fanout.run(requests, operation="admins")
        return [r.value for r in results]

    async def reviews_by_location(
        self, location: Location, account_id: str = ALL_ACCOUNTS
    ) -> dict[str, Any]:
        """Fetch the raw review listing of one location."""
        return await self._rest.run(
            spec=reviews_ep.SPEC,
            adapter=reviews_ep.Adapter(),
            params={"location": location, "account_id": account_id},
        )

    async def review_summary(
        self, location: Location, account_id: str = ALL_ACCOUNTS
    ) -> ReviewSummary:
        """Fetch review count and average rating of one location."""
        summary = await self._rest.run(
            spec=reviews_ep.SPEC,
            adapter=reviews_ep.SummaryAdapter(),
            params={"location": location, "account_id": account_id},
        )
        logger.debug(
            "review_summary",
            extra={
                "location": location.name,
                "total_review_count": summary.total_review_count,
                "average_rating": summary.average_rating,
            },
        )
        return summary

    async def review_summaries(
        self, locations: Sequence[Location], account_id: str = ALL_ACCOUNTS
    ) -> list[ReviewSummary]:
        """Fetch review summaries of every location concurrently, in input order."""
        requests = [
            SubQueryRequest(key=loc.name, run=lambda loc=loc: self.review_summary(loc, account_id))
            for loc in locations
        ]
        results = await self._fanout.run(requests, operation="review_summaries", ordered=True)
        return [r.value for r in results]

    async def update_location(
        self,
        location: Location,
        update_mask: Sequence[str] = DEFAULT_UPDATE_MASK,
    ) -> Location:
        """Patch one location and return the server's view of it.

        Args:
            location: Location carrying the new values
            update_mask: Fields the server should apply (defaults to title)
        """
        params = {"location": location, "update_mask": join_mask(update_mask)}
        updated = await self._rest.run(
            spec=location_ep.SPEC, adapter=location_ep.Adapter(), params=params
        )
        logger.info("Updated location %s", updated.name)
        return updated

    async def close(self) -> None:
        """Close underlying resources."""
        await self._transport.close()

    async def __aenter__(self) -> BusinessService:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

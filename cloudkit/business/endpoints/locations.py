"""Locations listing endpoint definition and adapter.

Paginated: the response holds ``locations`` and, while more pages remain,
``nextPageToken``.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlencode

from ..config import (
    ALL_ACCOUNTS,
    BUSINESS_INFORMATION_URL,
    DEFAULT_PAGE_SIZE,
    DEFAULT_READ_MASK,
    PAGE_SIZE_PARAM,
    READ_MASK_PARAM,
    join_mask,
)
from ..core import ResourceKind
from ..models import Location
from ..runtime.rest import ResponseAdapter, RestEndpointSpec


def build_url(params: dict[str, Any]) -> str:
    """Build the locations URL.

    Params:
        account_id: Account id, or "-" for every reachable account
        read_mask: Comma-joined field mask (defaults to name,title,storeCode)
        page_size: Optional page size
    """
    account_id = params.get("account_id") or ALL_ACCOUNTS
    read_mask = params.get("read_mask") or join_mask(DEFAULT_READ_MASK)
    query = {
        READ_MASK_PARAM: read_mask,
        PAGE_SIZE_PARAM: int(params.get("page_size") or DEFAULT_PAGE_SIZE),
    }
    path = f"accounts/{quote(str(account_id), safe='-')}/locations"
    return f"{BUSINESS_INFORMATION_URL}/{path}?{urlencode(query, safe=',')}"


SPEC = RestEndpointSpec(
    id=ResourceKind.LOCATIONS.value,
    method="GET",
    build_url=build_url,
    items_key=ResourceKind.LOCATIONS.items_key,
)


class Adapter(ResponseAdapter):
    """Adapter for one page of raw location items."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[Location]:
        return [Location.model_validate(item) for item in response]

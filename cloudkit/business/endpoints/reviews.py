"""Location reviews endpoint definition and adapters."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..config import ALL_ACCOUNTS, REVIEWS_URL
from ..core import SchemaViolationError
from ..models import Location, ReviewSummary
from ..runtime.rest import ResponseAdapter, RestEndpointSpec


def build_url(params: dict[str, Any]) -> str:
    location: Location = params["location"]
    account_id = params.get("account_id") or ALL_ACCOUNTS
    path = f"accounts/{quote(str(account_id), safe='-')}/{location.name}/reviews"
    return f"{REVIEWS_URL}/{path}"


SPEC = RestEndpointSpec(
    id="reviews",
    method="GET",
    build_url=build_url,
)


class Adapter(ResponseAdapter):
    """Raw review listing payload."""

    def parse(self, response: Any, params: dict[str, Any]) -> dict[str, Any]:
        if not isinstance(response, dict):
            raise SchemaViolationError("Expected a JSON object for reviews")
        return response


class SummaryAdapter(ResponseAdapter):
    """Review totals; both fields are absent for locations without reviews."""

    def parse(self, response: Any, params: dict[str, Any]) -> ReviewSummary:
        if not isinstance(response, dict):
            raise SchemaViolationError("Expected a JSON object for reviews")
        location: Location = params["location"]
        return ReviewSummary(
            location_name=location.name,
            location_title=location.title,
            total_review_count=response.get("totalReviewCount"),
            average_rating=response.get("averageRating"),
        )

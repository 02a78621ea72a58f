"""Location admins endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from ..config import ACCOUNT_MANAGEMENT_URL
from ..core import ResourceKind, SchemaViolationError
from ..models import Admins, Location, PageAdmins
from ..runtime.rest import ResponseAdapter, RestEndpointSpec

ITEMS_KEY = ResourceKind.ADMINS.items_key


def build_url(params: dict[str, Any]) -> str:
    location: Location = params["location"]
    return f"{ACCOUNT_MANAGEMENT_URL}/{location.name}/admins"


SPEC = RestEndpointSpec(
    id=ResourceKind.ADMINS.value,
    method="GET",
    build_url=build_url,
)


class Adapter(ResponseAdapter):
    """Adapter merging a location's identity with its admin list."""

    def parse(self, response: Any, params: dict[str, Any]) -> PageAdmins:
        location: Location = params["location"]
        if not isinstance(response, dict) or ITEMS_KEY not in response:
            raise SchemaViolationError(f"Response is missing '{ITEMS_KEY}'", field=ITEMS_KEY)
        admins = Admins.model_validate(response).admins
        return PageAdmins(
            page_name=location.name,
            page_title=location.title,
            store_code=location.store_code,
            admin_count=len(admins),
            admins=admins,
        )

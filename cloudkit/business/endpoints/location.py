"""Single location update endpoint definition and adapter."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from ..config import BUSINESS_INFORMATION_URL, DEFAULT_UPDATE_MASK, UPDATE_MASK_PARAM, join_mask
from ..models import Location
from ..runtime.rest import ResponseAdapter, RestEndpointSpec


def build_url(params: dict[str, Any]) -> str:
    location: Location = params["location"]
    update_mask = params.get("update_mask") or join_mask(DEFAULT_UPDATE_MASK)
    query = urlencode({UPDATE_MASK_PARAM: update_mask}, safe=",")
    return f"{BUSINESS_INFORMATION_URL}/{location.name}?{query}"


def build_body(params: dict[str, Any]) -> dict[str, Any]:
    location: Location = params["location"]
    return location.to_payload()


SPEC = RestEndpointSpec(
    id="update_location",
    method="PATCH",
    build_url=build_url,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    """Adapter re-parsing the updated location."""

    def parse(self, response: Any, params: dict[str, Any]) -> Location:
        return Location.model_validate(response)

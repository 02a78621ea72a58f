"""Accounts listing endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from ..config import ACCOUNT_MANAGEMENT_URL
from ..core import EmptyResultError, ResourceKind, SchemaViolationError
from ..models import Accounts
from ..runtime.rest import ResponseAdapter, RestEndpointSpec

ITEMS_KEY = ResourceKind.ACCOUNTS.items_key


def build_url(params: dict[str, Any]) -> str:
    return f"{ACCOUNT_MANAGEMENT_URL}/accounts"


SPEC = RestEndpointSpec(
    id=ResourceKind.ACCOUNTS.value,
    method="GET",
    build_url=build_url,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing the accounts listing.

    An empty listing means the credential cannot see any account, which is
    reported as an error rather than an empty success.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> Accounts:
        if not isinstance(response, dict) or ITEMS_KEY not in response:
            raise SchemaViolationError(f"Response is missing '{ITEMS_KEY}'", field=ITEMS_KEY)
        raw = response[ITEMS_KEY]
        if not isinstance(raw, list):
            raise SchemaViolationError(f"'{ITEMS_KEY}' must be a list", field=ITEMS_KEY)
        if not raw:
            raise EmptyResultError("no accounts, something went wrong!", resource=ITEMS_KEY)
        return Accounts.model_validate(response)

"""Core enumerations."""

from enum import Enum


class ResourceKind(str, Enum):
    """Listing resources exposed by the business directory API."""

    ACCOUNTS = "accounts"
    LOCATIONS = "locations"
    ADMINS = "admins"

    @property
    def items_key(self) -> str:
        """Response field holding the item array."""
        return _ITEMS_KEYS[self]


_ITEMS_KEYS = {
    ResourceKind.ACCOUNTS: "accounts",
    ResourceKind.LOCATIONS: "locations",
    ResourceKind.ADMINS: "admins",
}

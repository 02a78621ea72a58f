"""Location data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A business location.

    Only the identifying fields are typed. Anything else requested through a
    read mask (phone numbers, addresses, ...) is kept as an extra field so the
    location can be sent back unchanged in an update.
    """

    name: str = Field(..., min_length=1)
    title: str | None = None
    store_code: str | None = Field(default=None, alias="storeCode")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    def to_payload(self) -> dict[str, Any]:
        """Serialize with API field names, dropping unset values."""
        return self.model_dump(by_alias=True, exclude_none=True)

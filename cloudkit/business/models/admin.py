"""Admin data models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Admin(BaseModel):
    """A user or group with access to a location."""

    name: str = Field(..., min_length=1)
    admin: str | None = None
    account: str | None = None
    role: str | None = None
    pending_invitation: bool | None = Field(default=None, alias="pendingInvitation")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Admins(BaseModel):
    """Admin listing for one location."""

    admins: list[Admin]

    model_config = ConfigDict(frozen=True)


class PageAdmins(BaseModel):
    """Admins of one location merged with the location's identifying fields."""

    page_name: str = Field(..., min_length=1)
    page_title: str | None = None
    store_code: str | None = None
    admin_count: int = Field(..., ge=0)
    admins: list[Admin] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_count(self) -> "PageAdmins":
        """Validate admin_count matches the admin list."""
        if self.admin_count != len(self.admins):
            raise ValueError("admin_count must equal the number of admins")
        return self

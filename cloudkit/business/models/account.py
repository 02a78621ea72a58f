"""Account data models."""

from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """Business account visible to the credential."""

    name: str = Field(..., min_length=1)
    account_name: str | None = Field(default=None, alias="accountName")
    account_type: str | None = Field(default=None, alias="type")
    verification_state: str | None = Field(default=None, alias="verificationState")
    vetted_state: str | None = Field(default=None, alias="vettedState")
    account_number: str | None = Field(default=None, alias="accountNumber")
    permission_level: str | None = Field(default=None, alias="permissionLevel")
    role: str | None = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Accounts(BaseModel):
    """Accounts listing."""

    accounts: list[Account]

    model_config = ConfigDict(frozen=True)

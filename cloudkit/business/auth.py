"""Bearer credential shared by every request.

Token acquisition and refresh (service account, API key) happen outside
this package; the service only ever receives an access token string.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .config import ENV_PREFIX


@dataclass(frozen=True)
class BearerCredential:
    """Immutable access token, safe to share across concurrent requests."""

    access_token: str

    def __post_init__(self) -> None:
        if not self.access_token or not isinstance(self.access_token, str):
            raise ValueError("access_token must be a non-empty string")

    @property
    def authorization(self) -> str:
        """Value for the ``Authorization`` header."""
        return f"Bearer {self.access_token}"

    @classmethod
    def from_env(cls) -> BearerCredential:
        token = os.environ.get(f"{ENV_PREFIX}ACCESS_TOKEN")
        if not token:
            raise ValueError(f"Missing {ENV_PREFIX}ACCESS_TOKEN")
        return cls(access_token=token)

    def __repr__(self) -> str:
        # Never leak the token through logs or tracebacks
        return "BearerCredential(access_token='***')"

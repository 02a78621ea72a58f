"""Shared business directory constants and runtime settings.

This module centralizes API base URLs, query-parameter names and the
environment-driven ServiceConfig so endpoint modules stay small.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

# The directory API is split across several Google services, each with its
# own host and version.
ACCOUNT_MANAGEMENT_URL = "https://mybusinessaccountmanagement.googleapis.com/v1"
BUSINESS_INFORMATION_URL = "https://mybusinessbusinessinformation.googleapis.com/v1"
REVIEWS_URL = "https://mybusiness.googleapis.com/v4"

PAGE_TOKEN_PARAM = "pageToken"
NEXT_PAGE_TOKEN_FIELD = "nextPageToken"
READ_MASK_PARAM = "readMask"
UPDATE_MASK_PARAM = "updateMask"
PAGE_SIZE_PARAM = "pageSize"

# "-" lists locations across every account the credential can reach
ALL_ACCOUNTS = "-"

DEFAULT_READ_MASK: tuple[str, ...] = ("name", "title", "storeCode")
DEFAULT_UPDATE_MASK: tuple[str, ...] = ("title",)
DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0

ENV_PREFIX = "CLOUDKIT_BUSINESS_"


def join_mask(fields: Sequence[str]) -> str:
    """Join an ordered field mask into a single comma-separated value.

    Examples:
        >>> join_mask(["storeCode", "title", "name"])
        'storeCode,title,name'
        >>> join_mask("title")
        'title'
    """
    if isinstance(fields, str):
        fields = [fields]
    parts = [str(f).strip() for f in fields]
    if not parts or any(not p for p in parts):
        raise ValueError("Field mask must contain at least one non-empty field name")
    return ",".join(parts)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive")
    return value


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive")
    return value


@dataclass(frozen=True)
class ServiceConfig:
    """Runtime settings for BusinessService.

    Attributes:
        timeout: Total timeout per request in seconds
        max_pages: Optional cap on pages per page walk (None trusts the server)
        max_concurrency: Optional bound on in-flight fan-out sub-queries
        page_size: Requested page size for listing endpoints
    """

    timeout: float = DEFAULT_TIMEOUT
    max_pages: int | None = None
    max_concurrency: int | None = None
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_pages is not None and self.max_pages <= 0:
            raise ValueError("max_pages must be None or a positive integer")
        if self.max_concurrency is not None and self.max_concurrency <= 0:
            raise ValueError("max_concurrency must be None or a positive integer")
        if self.page_size <= 0:
            raise ValueError("page_size must be a positive integer")

    @classmethod
    def from_env(cls) -> ServiceConfig:
        return cls(
            timeout=_env_float("TIMEOUT", DEFAULT_TIMEOUT),
            max_pages=_env_int("MAX_PAGES", None),
            max_concurrency=_env_int("MAX_CONCURRENCY", None),
            page_size=_env_int("PAGE_SIZE", DEFAULT_PAGE_SIZE) or DEFAULT_PAGE_SIZE,
        )

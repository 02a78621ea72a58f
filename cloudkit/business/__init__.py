"""Cloudkit Business - async client for the business directory API."""

from .auth import BearerCredential
from .config import ALL_ACCOUNTS, ServiceConfig
from .core import (
    APIError,
    BusinessError,
    EmptyResultError,
    PaginationLimitError,
    ResourceKind,
    SchemaViolationError,
    SubQueryError,
    TransportError,
)
from .models import Account, Accounts, Admin, Admins, Location, PageAdmins, ReviewSummary
from .runtime import (
    FanOutAggregator,
    Paginator,
    RESTTransport,
    SubQueryRequest,
    SubQueryResult,
    fan_out,
)
from .service import BusinessService

__version__ = "0.1.0"

__all__ = [
    "ALL_ACCOUNTS",
    "BusinessService",
    "BearerCredential",
    "ServiceConfig",
    "ResourceKind",
    "Account",
    "Accounts",
    "Admin",
    "Admins",
    "Location",
    "PageAdmins",
    "ReviewSummary",
    "RESTTransport",
    "Paginator",
    "FanOutAggregator",
    "SubQueryRequest",
    "SubQueryResult",
    "fan_out",
    "BusinessError",
    "TransportError",
    "APIError",
    "SchemaViolationError",
    "EmptyResultError",
    "PaginationLimitError",
    "SubQueryError",
]

"""Core components."""

from .enums import ResourceKind
from .exceptions import (
    APIError,
    BusinessError,
    EmptyResultError,
    PaginationLimitError,
    SchemaViolationError,
    SubQueryError,
    TransportError,
)

__all__ = [
    "ResourceKind",
    "BusinessError",
    "TransportError",
    "APIError",
    "SchemaViolationError",
    "EmptyResultError",
    "PaginationLimitError",
    "SubQueryError",
]

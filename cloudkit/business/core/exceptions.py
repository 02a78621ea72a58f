"""Custom exception hierarchy."""

from __future__ import annotations


class BusinessError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(BusinessError):
    """Request could not be built or sent.

    Raised for invalid header values, connection failures and timeouts of
    the underlying HTTP client. Status codes are never a transport error.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class APIError(BusinessError):
    """Upstream API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SchemaViolationError(BusinessError):
    """Response body is missing an expected field or has the wrong shape.

    Distinct from an empty result: ``{"locations": []}`` is a valid empty
    page, ``{}`` is a schema violation.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class EmptyResultError(BusinessError):
    """A listing returned no entries where at least one is required."""

    def __init__(self, message: str, resource: str | None = None) -> None:
        super().__init__(message)
        self.resource = resource


class PaginationLimitError(BusinessError):
    """Page walk still had a continuation token after ``max_pages`` pages."""

    def __init__(self, message: str, max_pages: int) -> None:
        super().__init__(message)
        self.max_pages = max_pages


class SubQueryError(BusinessError):
    """One fan-out sub-query failed; the whole batch is discarded.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key

"""Structured logging for page walks and fan-outs.

Events are short snake_case messages with their context in ``extra`` so
they can be picked up by any structured log handler.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    items: int,
    has_next: bool,
) -> None:
    """Log one page of a page walk.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page
        items: Number of items appended from this page
        has_next: Whether the server returned a continuation token
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "items": items,
            "has_next": has_next,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    pages: int,
    total_items: int,
    latency_ms: float | None = None,
) -> None:
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages": pages,
            "total_items": total_items,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page walk.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "pagination_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_fanout_complete(
    *,
    operation: str,
    sub_queries: int,
    latency_ms: float | None = None,
) -> None:
    logger.info(
        "fanout_complete",
        extra={
            "operation": operation,
            "sub_queries": sub_queries,
            "latency_ms": latency_ms,
        },
    )


def log_subquery_error(
    *,
    operation: str,
    key: str,
    error_type: str,
    error_message: str,
) -> None:
    logger.error(
        "subquery_error",
        extra={
            "operation": operation,
            "key": key,
            "error_type": error_type,
            "error_message": error_message,
        },
    )

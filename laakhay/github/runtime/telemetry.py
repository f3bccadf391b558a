"""Structured logging for request execution and pagination.

This module provides telemetry hooks for the executor and the pagination
accumulator, emitting event-style log records with structured fields.
Credentials are never passed to these hooks.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_completed(
    *,
    endpoint_id: str,
    method: str,
    path: str,
    status: int,
    latency_ms: float | None = None,
) -> None:
    """Log one completed HTTP call.

    Args:
        endpoint_id: Endpoint identifier
        method: HTTP method
        path: Rendered request path
        status: Response status code
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "request_completed",
        extra={
            "endpoint_id": endpoint_id,
            "method": method,
            "path": path,
            "status": status,
            "latency_ms": latency_ms,
        },
    )


def log_page_fetched(
    *,
    endpoint_id: str,
    page: int,
    per_page: int,
    items: int,
    has_next: bool,
) -> None:
    """Log a single page appended by the accumulator.

    Args:
        endpoint_id: Endpoint identifier
        page: Page number that was fetched
        per_page: Page size requested
        items: Number of items in the page
        has_next: Whether the response announced a next page
    """
    logger.info(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "per_page": per_page,
            "items": items,
            "has_next": has_next,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    pages_used: int,
    total_items: int,
    recurse: bool,
) -> None:
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_used": pages_used,
            "total_items": total_items,
            "recurse": recurse,
        },
    )


def log_pagination_error(
    *,
    endpoint_id: str,
    page: int,
    pages_completed: int,
    items_discarded: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page; the partial accumulation is discarded.

    Args:
        endpoint_id: Endpoint identifier
        page: Page number whose fetch failed
        pages_completed: Pages fetched successfully before the failure
        items_discarded: Items accumulated so far and dropped
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "pagination_error",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "pages_completed": pages_completed,
            "items_discarded": items_discarded,
            "error_type": error_type,
            "error_message": error_message,
        },
    )

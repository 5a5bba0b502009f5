"""Shared controller types and error mapping."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from lokalise_mcp.errors import (
    ErrorType,
    LokaliseMcpError,
    handle_controller_error,
    not_found_error,
    validation_error,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ControllerResponse:
    """Formatted Markdown produced by a controller operation."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@contextmanager
def controller_errors(operation: str, **context: Any) -> Iterator[None]:
    """Map anything raised inside the block through ``handle_controller_error``."""
    try:
        yield
    except Exception as exc:
        error = handle_controller_error(exc, operation, **context)
        if error is exc:
            raise
        raise error from exc


def check_paging(
    limit: int | None, page: int | None, max_limit: int = 500
) -> None:
    """Reject out-of-range paging arguments before calling the API."""
    if limit is not None and not 1 <= limit <= max_limit:
        raise validation_error(
            f"Invalid limit parameter. Must be between 1 and {max_limit}."
        )
    if page is not None and page < 1:
        raise validation_error("Invalid page parameter. Must be 1 or greater.")


@contextmanager
def not_found_message(message: str) -> Iterator[None]:
    """Replace the generic NOT_FOUND message of errors raised in the block."""
    try:
        yield
    except LokaliseMcpError as exc:
        if exc.error_type is not ErrorType.NOT_FOUND:
            raise
        raise not_found_error(message, exc) from exc

"""Process-wide Lokalise client and helpers for SDK result objects.

``get_lokalise_client`` lazily builds the client on first use so that
configuration can be loaded (and API keys supplied) before any API call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import lokalise

from lokalise_mcp.lokalise_client.auth import build_lokalise_client

logger = logging.getLogger(__name__)

_client: lokalise.Client | None = None


def get_lokalise_client() -> lokalise.Client:
    """Return the shared client, building it on first use."""
    global _client
    if _client is None:
        _client = build_lokalise_client()
    return _client


def reset_lokalise_client() -> None:
    """Drop the shared client so the next call rebuilds it from settings."""
    global _client
    if _client is not None:
        logger.info("Resetting Lokalise API client")
    _client = None


# ------------------------------------------------------------------
# SDK object conversion
# ------------------------------------------------------------------


def to_plain(value: Any) -> Any:
    """Recursively convert SDK model objects, lists and dicts to plain types."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if hasattr(value, "__dict__"):
        return {
            key: to_plain(item)
            for key, item in vars(value).items()
            if not key.startswith("_")
        }
    return value


@dataclass(frozen=True)
class PagedResult:
    """One page of a Lokalise collection, with plain-dict items."""

    items: list[dict[str, Any]] = field(default_factory=list)
    total_count: int | None = None
    page_count: int | None = None
    limit: int | None = None
    current_page: int | None = None
    next_cursor: str | None = None

    @property
    def has_more(self) -> bool:
        if self.next_cursor:
            return True
        if self.current_page and self.page_count:
            return self.current_page < self.page_count
        return False

    @property
    def next_page(self) -> int | None:
        if self.next_cursor or not self.has_more or not self.current_page:
            return None
        return self.current_page + 1


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def paged_result(collection: Any) -> PagedResult:
    """Build a ``PagedResult`` from an SDK collection object."""
    items = getattr(collection, "items", None)
    if items is None and isinstance(collection, (list, tuple)):
        items = collection
    return PagedResult(
        items=[to_plain(item) for item in items or []],
        total_count=_int_or_none(getattr(collection, "total_count", None)),
        page_count=_int_or_none(getattr(collection, "page_count", None)),
        limit=_int_or_none(getattr(collection, "limit", None)),
        current_page=_int_or_none(getattr(collection, "current_page", None)),
        next_cursor=getattr(collection, "next_cursor", None) or None,
    )


@dataclass(frozen=True)
class BulkResult:
    """Outcome of a bulk endpoint: created/updated items plus per-item errors."""

    items: list[dict[str, Any]] = field(default_factory=list)
    errors: list[dict[str, Any]] = field(default_factory=list)


def bulk_result(collection: Any) -> BulkResult:
    """Build a ``BulkResult`` from an SDK collection that may carry ``errors``."""
    items = getattr(collection, "items", None)
    if items is None and isinstance(collection, (list, tuple)):
        items = collection
    errors = getattr(collection, "errors", None) or []
    return BulkResult(
        items=[to_plain(item) for item in items or []],
        errors=[to_plain(err) for err in errors],
    )

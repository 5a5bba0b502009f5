"""Common plumbing for the per-domain Lokalise services."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import lokalise

from lokalise_mcp.errors import (
    LokaliseMcpError,
    classify_api_error,
    status_code_of,
)
from lokalise_mcp.lokalise_client.client import get_lokalise_client

logger = logging.getLogger(__name__)


@contextmanager
def api_errors(operation: str) -> Iterator[None]:
    """Re-raise any SDK failure inside the block as a ``LokaliseMcpError``.

    Args:
        operation: Short description used in logs, e.g. ``"list projects"``.
    """
    try:
        yield
    except LokaliseMcpError:
        raise
    except Exception as exc:
        logger.error("Lokalise API error during '%s': %s", operation, exc)
        raise classify_api_error(exc, status_code_of(exc)) from exc


def build_params(**params: Any) -> dict[str, Any]:
    """Drop ``None`` values and join list filters into comma separated strings."""
    result: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)) and key.startswith("filter_"):
            value = ",".join(str(v) for v in value)
        elif isinstance(value, bool) and key.startswith(("include_", "filter_", "disable_")):
            value = 1 if value else 0
        result[key] = value
    return result


class BaseService:
    """Holds an optional injected client; otherwise uses the shared one.

    Args:
        client: A configured ``lokalise.Client``. When omitted the
            process-wide client is resolved lazily on every call.
    """

    def __init__(self, client: lokalise.Client | None = None) -> None:
        self._client = client

    @property
    def client(self) -> lokalise.Client:
        return self._client if self._client is not None else get_lokalise_client()

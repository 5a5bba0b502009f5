from lokalise_mcp.lokalise_client.auth import build_lokalise_client
from lokalise_mcp.lokalise_client.base import BaseService, api_errors, build_params
from lokalise_mcp.lokalise_client.client import (
    BulkResult,
    PagedResult,
    bulk_result,
    get_lokalise_client,
    paged_result,
    reset_lokalise_client,
    to_plain,
)

__all__ = [
    "BaseService",
    "BulkResult",
    "PagedResult",
    "api_errors",
    "build_lokalise_client",
    "bulk_result",
    "build_params",
    "get_lokalise_client",
    "paged_result",
    "reset_lokalise_client",
    "to_plain",
]

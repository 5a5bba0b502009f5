"""Construction of the ``lokalise.Client`` from application settings.

The python-lokalise-api SDK handles authentication by sending the API
token on every request; this module only resolves the token, host and
timeouts and builds the client.
"""

from __future__ import annotations

import logging

import lokalise

from lokalise_mcp.config import settings
from lokalise_mcp.errors import auth_missing_error

logger = logging.getLogger(__name__)


def build_lokalise_client(
    *,
    api_key: str | None = None,
    api_host: str | None = None,
    connect_timeout: float | None = None,
    read_timeout: float | None = None,
) -> lokalise.Client:
    """Build a configured ``lokalise.Client``.

    Parameters default to the values in ``settings`` so callers can
    simply call ``build_lokalise_client()`` during normal operation.
    Explicit overrides are accepted for testing.

    Args:
        api_key: Lokalise API token. Falls back to ``settings.api_key``.
        api_host: API base URL. Falls back to ``settings.api_hostname``.
        connect_timeout: Connect timeout in seconds.
        read_timeout: Read timeout in seconds.

    Returns:
        A ``lokalise.Client`` ready for API calls.

    Raises:
        LokaliseMcpError: If no API token is configured (AUTH_MISSING).
    """
    resolved_key = api_key or settings.api_key
    resolved_host = api_host or settings.api_hostname

    if not resolved_key:
        logger.error("LOKALISE_API_KEY is required but not found in configuration")
        raise auth_missing_error(
            "LOKALISE_API_KEY is required but not found in configuration"
        )

    options: dict[str, float] = {}
    if (connect_timeout or settings.connect_timeout) is not None:
        options["connect_timeout"] = connect_timeout or settings.connect_timeout
    if (read_timeout or settings.read_timeout) is not None:
        options["read_timeout"] = read_timeout or settings.read_timeout

    client = lokalise.Client(resolved_key, api_host=resolved_host, **options)
    logger.info("Lokalise API client initialized (host: %s)", resolved_host)
    return client

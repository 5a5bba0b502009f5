"""Logging configuration.

All output goes to stderr: with the stdio transport, stdout carries the
MCP protocol stream.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_QUIET_LOGGERS = ("lokalise", "httpx", "httpcore", "urllib3")


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the ``lokalise_mcp`` logger tree and return its root."""
    root = logging.getLogger("lokalise_mcp")
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    if not any(getattr(h, "_lokalise_mcp", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._lokalise_mcp = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.propagate = False

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root

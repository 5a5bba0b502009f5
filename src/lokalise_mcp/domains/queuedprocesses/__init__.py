"""Queued processes domain: background uploads, exports and imports."""

from lokalise_mcp.domains.queuedprocesses import (
    queuedprocesses_cli,
    queuedprocesses_resource,
    queuedprocesses_tool,
)
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="queuedprocesses",
        description="Background process monitoring",
        version="1.0.0",
        tools_count=2,
        cli_commands_count=2,
        resources_count=1,
    )


__all__ = [
    "get_meta",
    "queuedprocesses_cli",
    "queuedprocesses_resource",
    "queuedprocesses_tool",
]

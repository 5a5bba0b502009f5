"""Contributors domain: project members, their languages and rights."""

from lokalise_mcp.domains.contributors import (
    contributors_cli,
    contributors_resource,
    contributors_tool,
)
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="contributors",
        description="Project contributor management",
        version="1.0.0",
        tools_count=6,
        cli_commands_count=6,
        resources_count=2,
    )


__all__ = ["contributors_cli", "contributors_resource", "contributors_tool", "get_meta"]

"""Comments domain: discussion threads attached to translation keys."""

from lokalise_mcp.domains.comments import comments_cli, comments_resource, comments_tool
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="comments",
        description="Key comment management",
        version="1.0.0",
        tools_count=5,
        cli_commands_count=5,
        resources_count=2,
    )


__all__ = ["comments_cli", "comments_resource", "comments_tool", "get_meta"]

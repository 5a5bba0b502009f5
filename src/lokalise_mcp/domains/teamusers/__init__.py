"""Team users domain: members of a Lokalise team and their roles."""

from lokalise_mcp.domains.teamusers import (
    teamusers_cli,
    teamusers_resource,
    teamusers_tool,
)
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="teamusers",
        description="Team user management",
        version="1.0.0",
        tools_count=4,
        cli_commands_count=4,
        resources_count=2,
    )


__all__ = ["teamusers_cli", "teamusers_resource", "teamusers_tool", "get_meta"]

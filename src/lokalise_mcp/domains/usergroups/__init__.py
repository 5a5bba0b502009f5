"""User groups domain: team groups carrying shared project permissions."""

from lokalise_mcp.domains.types import DomainMeta
from lokalise_mcp.domains.usergroups import (
    usergroups_cli,
    usergroups_resource,
    usergroups_tool,
)


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="usergroups",
        description="Team user group management",
        version="1.0.0",
        tools_count=9,
        cli_commands_count=9,
        resources_count=2,
    )


__all__ = ["usergroups_cli", "usergroups_resource", "usergroups_tool", "get_meta"]

"""Keys domain: translation keys, including bulk create, update and delete."""

from lokalise_mcp.domains.keys import keys_cli, keys_resource, keys_tool
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="keys",
        description="Translation key management",
        version="1.0.0",
        tools_count=7,
        cli_commands_count=7,
        resources_count=2,
    )


__all__ = ["get_meta", "keys_cli", "keys_resource", "keys_tool"]

"""Glossary domain: project glossary terms and their translations."""

from lokalise_mcp.domains.glossary import glossary_cli, glossary_resource, glossary_tool
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="glossary",
        description="Glossary term management",
        version="1.0.0",
        tools_count=5,
        cli_commands_count=5,
        resources_count=2,
    )


__all__ = ["get_meta", "glossary_cli", "glossary_resource", "glossary_tool"]

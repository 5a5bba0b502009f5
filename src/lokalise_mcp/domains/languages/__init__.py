"""Languages domain: system languages and the languages of a project."""

from lokalise_mcp.domains.languages import languages_cli, languages_resource, languages_tool
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="languages",
        description="System and project language management",
        version="1.0.0",
        tools_count=6,
        cli_commands_count=6,
        resources_count=2,
    )


__all__ = ["get_meta", "languages_cli", "languages_resource", "languages_tool"]

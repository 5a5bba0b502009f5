"""Projects domain: list, inspect, create, update, delete and empty projects."""

from lokalise_mcp.domains.projects import projects_cli, projects_resource, projects_tool
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="projects",
        description="Lokalise project management",
        version="1.0.0",
        tools_count=6,
        cli_commands_count=6,
        resources_count=2,
    )


__all__ = ["get_meta", "projects_cli", "projects_resource", "projects_tool"]

"""Tasks domain: translation and review tasks."""

from lokalise_mcp.domains.tasks import tasks_cli, tasks_resource, tasks_tool
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="tasks",
        description="Translation task management",
        version="1.0.0",
        tools_count=5,
        cli_commands_count=5,
        resources_count=2,
    )


__all__ = ["get_meta", "tasks_cli", "tasks_resource", "tasks_tool"]

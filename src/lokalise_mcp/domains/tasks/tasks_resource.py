"""MCP resources for Lokalise tasks."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.tasks import tasks_controller as controller
from lokalise_mcp.domains.tasks.tasks_types import GetTaskArgs, ListTasksArgs
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register task resources with the MCP server."""

    @mcp.resource(
        "lokalise://tasks/{project_id}",
        name="lokalise-project-tasks",
        description="Tasks of a project",
        mime_type="text/markdown",
    )
    def project_tasks(project_id: str) -> str:
        return read_resource(
            f"lokalise://tasks/{project_id}",
            controller.list_tasks,
            ListTasksArgs,
            project_id=project_id,
            limit=100,
        )

    @mcp.resource(
        "lokalise://tasks/{project_id}/{task_id}",
        name="lokalise-task-details",
        description="One task with per-language progress",
        mime_type="text/markdown",
    )
    def task_details(project_id: str, task_id: str) -> str:
        return read_resource(
            f"lokalise://tasks/{project_id}/{task_id}",
            controller.get_task,
            GetTaskArgs,
            project_id=project_id,
            task_id=task_id,
        )

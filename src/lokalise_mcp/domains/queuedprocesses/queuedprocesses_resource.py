"""MCP resources for Lokalise queued processes."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.queuedprocesses import queuedprocesses_controller as controller
from lokalise_mcp.domains.queuedprocesses.queuedprocesses_types import ListQueuedProcessesArgs
from lokalise_mcp.handlers import read_resource


def register_resources(mcp: FastMCP) -> None:
    """Register queued process resources with the MCP server."""

    @mcp.resource(
        "lokalise://queuedprocesses/{project_id}",
        name="lokalise-queued-processes",
        description="Background processes of a project",
        mime_type="text/markdown",
    )
    def queued_processes(project_id: str) -> str:
        return read_resource(
            f"lokalise://queuedprocesses/{project_id}",
            controller.list_queued_processes,
            ListQueuedProcessesArgs,
            project_id=project_id,
            limit=100,
        )

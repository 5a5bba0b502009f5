"""MCP tools for Lokalise queued processes."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.queuedprocesses import queuedprocesses_controller as controller
from lokalise_mcp.domains.queuedprocesses.queuedprocesses_types import (
    GetQueuedProcessArgs,
    ListQueuedProcessesArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register queued process tools with the MCP server."""

    @mcp.tool(name="lokalise_list_queued_processes")
    def list_queued_processes(
        project_id: str, limit: int | None = None, page: int | None = None
    ) -> str:
        """List background processes (uploads, exports) of a project with their status.

        Args:
            project_id: Project ID.
            limit: Processes per page (1-100).
            page: Page number.
        """
        return run_tool(
            controller.list_queued_processes,
            ListQueuedProcessesArgs,
            project_id=project_id,
            limit=limit,
            page=page,
        )

    @mcp.tool(name="lokalise_get_queued_process")
    def get_queued_process(project_id: str, process_id: str) -> str:
        """Get the status and results of one background process.

        Args:
            project_id: Project ID.
            process_id: Process ID returned by an upload or export.
        """
        return run_tool(
            controller.get_queued_process,
            GetQueuedProcessArgs,
            project_id=project_id,
            process_id=process_id,
        )

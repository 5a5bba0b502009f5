"""CLI commands for Lokalise queued processes."""

from __future__ import annotations

import click

from lokalise_mcp.domains.queuedprocesses import queuedprocesses_controller as controller
from lokalise_mcp.domains.queuedprocesses.queuedprocesses_types import (
    GetQueuedProcessArgs,
    ListQueuedProcessesArgs,
)
from lokalise_mcp.handlers import run_command


def register(cli: click.Group) -> None:
    """Add the queued process commands to *cli*."""

    @cli.command("list-queued-processes")
    @click.argument("project_id")
    @click.option("--limit", type=int, default=None, help="Processes per page (1-100).")
    @click.option("--page", type=int, default=None, help="Page number.")
    def list_queued_processes(project_id: str, limit: int | None, page: int | None) -> None:
        """List background processes of a project."""
        run_command(
            controller.list_queued_processes,
            ListQueuedProcessesArgs,
            project_id=project_id,
            limit=limit,
            page=page,
        )

    @cli.command("get-queued-process")
    @click.argument("project_id")
    @click.argument("process_id")
    def get_queued_process(project_id: str, process_id: str) -> None:
        """Show one background process."""
        run_command(
            controller.get_queued_process,
            GetQueuedProcessArgs,
            project_id=project_id,
            process_id=process_id,
        )

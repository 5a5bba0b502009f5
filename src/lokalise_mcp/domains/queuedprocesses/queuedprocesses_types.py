"""Argument models for queued process operations."""

from __future__ import annotations

from pydantic import Field

from lokalise_mcp.schemas import ProjectArgs, ProjectPagingArgs

MAX_PROCESSES_PAGE = 100


class ListQueuedProcessesArgs(ProjectPagingArgs):
    pass


class GetQueuedProcessArgs(ProjectArgs):
    process_id: str = Field(min_length=1, description="Queued process ID")

"""Queued process operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.queuedprocesses.queuedprocesses_formatter import (
    format_process_details,
    format_processes_list,
)
from lokalise_mcp.domains.queuedprocesses.queuedprocesses_service import (
    QueuedProcessesService,
)
from lokalise_mcp.domains.queuedprocesses.queuedprocesses_types import (
    MAX_PROCESSES_PAGE,
    GetQueuedProcessArgs,
    ListQueuedProcessesArgs,
)

service = QueuedProcessesService()


def list_queued_processes(args: ListQueuedProcessesArgs) -> ControllerResponse:
    with controller_errors("listing queued processes", project_id=args.project_id):
        check_paging(args.limit, args.page, MAX_PROCESSES_PAGE)
        result = service.list_processes(args.project_id, limit=args.limit, page=args.page)

    return ControllerResponse(
        content=format_processes_list(result, args.project_id),
        metadata={"count": len(result.items)},
    )


def get_queued_process(args: GetQueuedProcessArgs) -> ControllerResponse:
    with controller_errors("getting queued process", project_id=args.project_id):
        with not_found_message(
            f"Process '{args.process_id}' not found in project '{args.project_id}'."
        ):
            process = service.get_process(args.project_id, args.process_id)

    return ControllerResponse(
        content=format_process_details(process, args.project_id),
        metadata={"status": process.get("status")},
    )

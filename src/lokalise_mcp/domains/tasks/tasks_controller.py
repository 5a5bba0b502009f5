"""Task operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging
from typing import Any

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.tasks.tasks_formatter import (
    format_create_task_result,
    format_delete_task_result,
    format_task_details,
    format_tasks_list,
    format_update_task_result,
)
from lokalise_mcp.domains.tasks.tasks_service import TasksService
from lokalise_mcp.domains.tasks.tasks_types import (
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTaskArgs,
    ListTasksArgs,
    TaskLanguage,
    UpdateTaskArgs,
)
from lokalise_mcp.errors import validation_error

logger = logging.getLogger(__name__)

service = TasksService()


def _missing(project_id: str, task_id: int) -> str:
    return f"Task {task_id} not found in project '{project_id}'."


def resolve_task_languages(
    languages: list[TaskLanguage] | None, assignees: list[int] | None
) -> list[dict[str, Any]]:
    """Build the ``languages`` payload of a new task.

    Languages without explicit users or groups receive ``assignees``.

    Raises:
        LokaliseMcpError: VALIDATION_ERROR when no languages are given, or a
            language ends up with nobody assigned.
    """
    if not languages:
        raise validation_error("At least one language is required to create a task.")

    resolved = []
    for language in languages:
        entry = language.model_dump(exclude_none=True)
        if not entry.get("users") and not entry.get("groups"):
            if not assignees:
                raise validation_error(
                    f"Language '{language.language_iso}' must have users or groups "
                    "assigned, or pass top-level assignees."
                )
            entry["users"] = list(assignees)
        resolved.append(entry)
    return resolved


def list_tasks(args: ListTasksArgs) -> ControllerResponse:
    with controller_errors("listing tasks", project_id=args.project_id):
        check_paging(args.limit, args.page)
        result = service.list_tasks(
            args.project_id,
            limit=args.limit,
            page=args.page,
            filter_title=args.filter_title,
            filter_statuses=args.filter_statuses,
        )

    return ControllerResponse(
        content=format_tasks_list(result, args.project_id),
        metadata={"count": len(result.items), "has_more": result.has_more},
    )


def get_task(args: GetTaskArgs) -> ControllerResponse:
    with controller_errors("getting task", project_id=args.project_id, task_id=args.task_id):
        with not_found_message(_missing(args.project_id, args.task_id)):
            task = service.get_task(args.project_id, args.task_id)

    return ControllerResponse(content=format_task_details(task, args.project_id))


def create_task(args: CreateTaskArgs) -> ControllerResponse:
    with controller_errors("creating task", project_id=args.project_id):
        data = args.model_dump(
            exclude_none=True, exclude={"project_id", "languages", "assignees"}
        )
        data["title"] = args.title.strip()
        if not data["title"]:
            raise validation_error("Task title cannot be empty.")
        data["languages"] = resolve_task_languages(args.languages, args.assignees)
        for field in ("keys", "closing_tags", "custom_translation_status_ids"):
            if not data.get(field):
                data.pop(field, None)
        task = service.create_task(args.project_id, data)

    logger.info("Created task %s in %s", task.get("task_id"), args.project_id)
    return ControllerResponse(content=format_create_task_result(task, args.project_id))


def update_task(args: UpdateTaskArgs) -> ControllerResponse:
    data = args.task_data.model_dump(exclude_none=True)
    with controller_errors("updating task", project_id=args.project_id, task_id=args.task_id):
        if not data:
            raise validation_error("At least one field must be provided to update the task.")
        with not_found_message(_missing(args.project_id, args.task_id)):
            task = service.update_task(args.project_id, args.task_id, data)

    return ControllerResponse(content=format_update_task_result(task, data, args.project_id))


def delete_task(args: DeleteTaskArgs) -> ControllerResponse:
    with controller_errors("deleting task", project_id=args.project_id, task_id=args.task_id):
        with not_found_message(_missing(args.project_id, args.task_id)):
            result = service.delete_task(args.project_id, args.task_id)

    return ControllerResponse(
        content=format_delete_task_result(args.task_id, result, args.project_id)
    )

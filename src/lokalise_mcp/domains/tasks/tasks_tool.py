"""MCP tools for Lokalise tasks."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from lokalise_mcp.domains.tasks import tasks_controller as controller
from lokalise_mcp.domains.tasks.tasks_types import (
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTaskArgs,
    ListTasksArgs,
    TaskChanges,
    TaskLanguage,
    TaskStatus,
    TaskType,
    UpdateTaskArgs,
)
from lokalise_mcp.handlers import run_tool


def register_tools(mcp: FastMCP) -> None:
    """Register task tools with the MCP server."""

    @mcp.tool(name="lokalise_list_tasks")
    def list_tasks(
        project_id: str,
        limit: int | None = None,
        page: int | None = None,
        filter_title: str | None = None,
        filter_statuses: list[TaskStatus] | None = None,
    ) -> str:
        """List translation and review tasks in a project.

        Args:
            project_id: Project ID.
            limit: Tasks per page (1-500).
            page: Page number.
            filter_title: Only tasks with this title.
            filter_statuses: Only tasks in these statuses.
        """
        return run_tool(
            controller.list_tasks,
            ListTasksArgs,
            project_id=project_id,
            limit=limit,
            page=page,
            filter_title=filter_title,
            filter_statuses=filter_statuses,
        )

    @mcp.tool(name="lokalise_get_task")
    def get_task(project_id: str, task_id: int) -> str:
        """Get one task with its per-language status, progress and assignees.

        Args:
            project_id: Project ID.
            task_id: Task ID.
        """
        return run_tool(controller.get_task, GetTaskArgs, project_id=project_id, task_id=task_id)

    @mcp.tool(name="lokalise_create_task")
    def create_task(
        project_id: str,
        title: str,
        languages: list[TaskLanguage] | None = None,
        assignees: list[int] | None = None,
        description: str | None = None,
        keys: list[int] | None = None,
        due_date: str | None = None,
        source_language_iso: str | None = None,
        task_type: TaskType = "translation",
        auto_close_languages: bool | None = None,
        auto_close_task: bool | None = None,
        auto_close_items: bool | None = None,
        parent_task_id: int | None = None,
        closing_tags: list[str] | None = None,
        do_lock_translations: bool | None = None,
        custom_translation_status_ids: list[int] | None = None,
    ) -> str:
        """Create a translation or review task.

        Every language needs users or groups. Pass ``assignees`` to assign the
        same users to all languages that have none of their own.

        Args:
            project_id: Project ID.
            title: Task title.
            languages: Target languages with optional users/groups.
            assignees: User IDs for languages without explicit users/groups.
            description: Task description.
            keys: Restrict the task to these key IDs.
            due_date: Due date, 'YYYY-MM-DD HH:MM:SS'.
            source_language_iso: Source language ISO code.
            task_type: 'translation' or 'review'.
            auto_close_languages: Close languages when they are done.
            auto_close_task: Close the task when all languages are done.
            auto_close_items: Close items when they are done.
            parent_task_id: Parent task for review subtasks.
            closing_tags: Tags applied to keys when the task closes.
            do_lock_translations: Lock translations during the task.
            custom_translation_status_ids: Custom status IDs to apply.
        """
        return run_tool(
            controller.create_task,
            CreateTaskArgs,
            project_id=project_id,
            title=title,
            languages=languages,
            assignees=assignees,
            description=description,
            keys=keys,
            due_date=due_date,
            source_language_iso=source_language_iso,
            task_type=task_type,
            auto_close_languages=auto_close_languages,
            auto_close_task=auto_close_task,
            auto_close_items=auto_close_items,
            parent_task_id=parent_task_id,
            closing_tags=closing_tags,
            do_lock_translations=do_lock_translations,
            custom_translation_status_ids=custom_translation_status_ids,
        )

    @mcp.tool(name="lokalise_update_task")
    def update_task(project_id: str, task_id: int, task_data: TaskChanges) -> str:
        """Update a task's title, due date, languages or closing behaviour.

        Args:
            project_id: Project ID.
            task_id: Task ID.
            task_data: Fields to change.
        """
        return run_tool(
            controller.update_task,
            UpdateTaskArgs,
            project_id=project_id,
            task_id=task_id,
            task_data=task_data,
        )

    @mcp.tool(name="lokalise_delete_task")
    def delete_task(project_id: str, task_id: int) -> str:
        """Delete a task.

        Args:
            project_id: Project ID.
            task_id: Task ID.
        """
        return run_tool(
            controller.delete_task, DeleteTaskArgs, project_id=project_id, task_id=task_id
        )

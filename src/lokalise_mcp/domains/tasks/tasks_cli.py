"""CLI commands for Lokalise tasks."""

from __future__ import annotations

import click

from lokalise_mcp.domains.tasks import tasks_controller as controller
from lokalise_mcp.domains.tasks.tasks_types import (
    CreateTaskArgs,
    DeleteTaskArgs,
    GetTaskArgs,
    ListTasksArgs,
    UpdateTaskArgs,
)
from lokalise_mcp.handlers import parse_json_option, run_command

STATUSES = click.Choice(["new", "in_progress", "completed", "closed"])


def register(cli: click.Group) -> None:
    """Add the task commands to *cli*."""

    @cli.command("list-tasks")
    @click.argument("project_id")
    @click.option("--limit", type=int, default=None, help="Tasks per page (1-500).")
    @click.option("--page", type=int, default=None, help="Page number.")
    @click.option("--filter-title", default=None, help="Only tasks with this title.")
    @click.option("--filter-status", "filter_statuses", type=STATUSES, multiple=True)
    def list_tasks(
        project_id: str,
        limit: int | None,
        page: int | None,
        filter_title: str | None,
        filter_statuses: tuple[str, ...],
    ) -> None:
        """List tasks in a project."""
        run_command(
            controller.list_tasks,
            ListTasksArgs,
            project_id=project_id,
            limit=limit,
            page=page,
            filter_title=filter_title,
            filter_statuses=list(filter_statuses) or None,
        )

    @cli.command("get-task")
    @click.argument("project_id")
    @click.argument("task_id", type=int)
    def get_task(project_id: str, task_id: int) -> None:
        """Show one task."""
        run_command(controller.get_task, GetTaskArgs, project_id=project_id, task_id=task_id)

    @cli.command("create-task")
    @click.argument("project_id")
    @click.option("--title", required=True, help="Task title.")
    @click.option("--language", "languages", multiple=True, help="Target language ISO (repeatable).")
    @click.option("--assignee", "assignees", type=int, multiple=True, help="User ID (repeatable).")
    @click.option("--languages-json", default=None, help="JSON array of language assignments.")
    @click.option("--description", default=None)
    @click.option("--key", "keys", type=int, multiple=True, help="Key ID (repeatable).")
    @click.option("--due-date", default=None, help="Due date, 'YYYY-MM-DD HH:MM:SS'.")
    @click.option("--task-type", type=click.Choice(["translation", "review"]), default="translation")
    def create_task(
        project_id: str,
        title: str,
        languages: tuple[str, ...],
        assignees: tuple[int, ...],
        languages_json: str | None,
        description: str | None,
        keys: tuple[int, ...],
        due_date: str | None,
        task_type: str,
    ) -> None:
        """Create a task; assignees are copied to every --language."""
        language_payload = parse_json_option(languages_json)
        if language_payload is None and languages:
            language_payload = [{"language_iso": iso} for iso in languages]
        run_command(
            controller.create_task,
            CreateTaskArgs,
            project_id=project_id,
            title=title,
            languages=language_payload,
            assignees=list(assignees) or None,
            description=description,
            keys=list(keys) or None,
            due_date=due_date,
            task_type=task_type,
        )

    @cli.command("update-task")
    @click.argument("project_id")
    @click.argument("task_id", type=int)
    @click.option("--title", default=None)
    @click.option("--description", default=None)
    @click.option("--due-date", default=None)
    @click.option("--close-task", is_flag=True, help="Close the task.")
    def update_task(
        project_id: str,
        task_id: int,
        title: str | None,
        description: str | None,
        due_date: str | None,
        close_task: bool,
    ) -> None:
        """Update a task."""
        run_command(
            controller.update_task,
            UpdateTaskArgs,
            project_id=project_id,
            task_id=task_id,
            task_data={
                "title": title,
                "description": description,
                "due_date": due_date,
                "close_task": close_task or None,
            },
        )

    @cli.command("delete-task")
    @click.argument("project_id")
    @click.argument("task_id", type=int)
    def delete_task(project_id: str, task_id: int) -> None:
        """Delete a task."""
        run_command(controller.delete_task, DeleteTaskArgs, project_id=project_id, task_id=task_id)

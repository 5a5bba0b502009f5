"""Argument models for task operations."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from lokalise_mcp.schemas import ProjectArgs, ProjectPagingArgs, ToolArgs

TaskStatus = Literal["new", "in_progress", "completed", "closed"]
TaskType = Literal["translation", "review"]


class TaskLanguage(ToolArgs):
    language_iso: str = Field(min_length=2, description="Language ISO code")
    users: list[int] | None = Field(default=None, description="User IDs assigned to the language")
    groups: list[int] | None = Field(default=None, description="Group IDs assigned to the language")


class TaskLanguageUpdate(TaskLanguage):
    close_language: bool | None = None


class ListTasksArgs(ProjectPagingArgs):
    filter_title: str | None = None
    filter_statuses: list[TaskStatus] | None = None


class TaskArgs(ProjectArgs):
    task_id: int = Field(description="Task ID")


class GetTaskArgs(TaskArgs):
    pass


class DeleteTaskArgs(TaskArgs):
    pass


class CreateTaskArgs(ProjectArgs):
    title: str = Field(min_length=1, description="Task title")
    description: str | None = None
    keys: list[int] | None = Field(
        default=None, description="Limit the task to these key IDs; all keys when omitted"
    )
    languages: list[TaskLanguage] | None = None
    assignees: list[int] | None = Field(
        default=None,
        description="User IDs assigned to every language without its own users or groups",
    )
    due_date: str | None = Field(default=None, description="Due date, 'YYYY-MM-DD HH:MM:SS'")
    source_language_iso: str | None = None
    auto_close_languages: bool | None = None
    auto_close_task: bool | None = None
    auto_close_items: bool | None = None
    task_type: TaskType = "translation"
    parent_task_id: int | None = None
    closing_tags: list[str] | None = None
    do_lock_translations: bool | None = None
    custom_translation_status_ids: list[int] | None = None


class TaskChanges(ToolArgs):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    languages: list[TaskLanguageUpdate] | None = None
    auto_close_languages: bool | None = None
    auto_close_task: bool | None = None
    auto_close_items: bool | None = None
    closing_tags: list[str] | None = None
    do_lock_translations: bool | None = None
    close_task: bool | None = None


class UpdateTaskArgs(TaskArgs):
    task_data: TaskChanges

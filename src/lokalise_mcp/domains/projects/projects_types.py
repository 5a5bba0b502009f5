"""Argument models for project operations."""

from __future__ import annotations

from pydantic import Field

from lokalise_mcp.schemas import PagingArgs, ProjectArgs, ToolArgs


class ListProjectsArgs(PagingArgs):
    include_stats: bool = Field(
        default=False, description="Include detailed project statistics"
    )


class GetProjectArgs(ProjectArgs):
    include_languages: bool = Field(
        default=False,
        description="Include detailed language information and completion rates",
    )
    include_keys_summary: bool = Field(
        default=False, description="Include summary of keys (total, translated, missing)"
    )


class CreateProjectArgs(ToolArgs):
    name: str = Field(min_length=1, max_length=100, description="Name of the project")
    description: str | None = Field(default=None, description="Project description")
    base_lang_iso: str = Field(default="en", description="Base language ISO code")


class ProjectUpdate(ToolArgs):
    name: str | None = Field(default=None, description="Updated project name")
    description: str | None = Field(default=None, description="Updated description")


class UpdateProjectArgs(ProjectArgs):
    project_data: ProjectUpdate


class DeleteProjectArgs(ProjectArgs):
    pass


class EmptyProjectArgs(ProjectArgs):
    pass

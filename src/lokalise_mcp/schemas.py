"""Pydantic base models for tool, resource and CLI arguments."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ToolArgs(BaseModel):
    """Arguments accepted by a controller operation.

    Unknown fields are rejected so that typos in tool calls surface as
    validation errors instead of being silently ignored.
    """

    model_config = ConfigDict(extra="forbid")


class PagingArgs(ToolArgs):
    """Page-based paging shared by list operations."""

    limit: int | None = Field(default=None, description="Number of items per page")
    page: int | None = Field(default=None, description="Page number (1-based)")


class ProjectArgs(ToolArgs):
    project_id: str = Field(min_length=1, description="Lokalise project ID")


class ProjectPagingArgs(PagingArgs):
    project_id: str = Field(min_length=1, description="Lokalise project ID")


class TeamArgs(ToolArgs):
    team_id: int | str = Field(description="Lokalise team ID")


class TeamPagingArgs(PagingArgs):
    team_id: int | str = Field(description="Lokalise team ID")

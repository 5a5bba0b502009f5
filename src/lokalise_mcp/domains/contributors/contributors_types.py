"""Argument models for contributor operations."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from lokalise_mcp.schemas import ProjectArgs, ProjectPagingArgs, ToolArgs

ContributorRight = Literal[
    "upload",
    "activity",
    "download",
    "settings",
    "create_branches",
    "statistics",
    "keys",
    "screenshots",
    "glossary",
    "contributors",
    "languages",
    "tasks",
]

MAX_CONTRIBUTORS_PAGE = 100


class ContributorLanguage(ToolArgs):
    lang_iso: str = Field(min_length=2, description="Language ISO code")
    is_writable: bool | None = None


class NewContributor(ToolArgs):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", description="Contributor email")
    fullname: str | None = None
    is_admin: bool | None = Field(default=None, description="Deprecated, use admin_rights")
    is_reviewer: bool | None = Field(default=None, description="Deprecated, use admin_rights")
    languages: list[ContributorLanguage] = Field(min_length=1)
    admin_rights: list[ContributorRight] | None = None


class ListContributorsArgs(ProjectPagingArgs):
    pass


class ContributorArgs(ProjectArgs):
    contributor_id: int = Field(description="Contributor (user) ID")


class GetContributorArgs(ContributorArgs):
    pass


class RemoveContributorArgs(ContributorArgs):
    pass


class AddContributorsArgs(ProjectArgs):
    contributors: list[NewContributor] = Field(min_length=1)


class GetCurrentUserArgs(ProjectArgs):
    pass


class UpdateContributorArgs(ContributorArgs):
    is_admin: bool | None = None
    is_reviewer: bool | None = None
    languages: list[ContributorLanguage] | None = None
    admin_rights: list[ContributorRight] | None = None

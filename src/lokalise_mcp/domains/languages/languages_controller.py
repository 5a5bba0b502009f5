"""Language operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.languages.languages_formatter import (
    format_add_languages_result,
    format_language_details,
    format_project_languages,
    format_remove_language_result,
    format_system_languages,
    format_update_language_result,
)
from lokalise_mcp.domains.languages.languages_service import LanguagesService
from lokalise_mcp.domains.languages.languages_types import (
    AddProjectLanguagesArgs,
    GetLanguageArgs,
    ListProjectLanguagesArgs,
    ListSystemLanguagesArgs,
    RemoveLanguageArgs,
    UpdateLanguageArgs,
)
from lokalise_mcp.errors import validation_error

logger = logging.getLogger(__name__)

service = LanguagesService()


def _missing(project_id: str, language_id: int) -> str:
    return f"Language {language_id} not found in project '{project_id}'."


def list_system_languages(args: ListSystemLanguagesArgs) -> ControllerResponse:
    with controller_errors("listing system languages", limit=args.limit, page=args.page):
        check_paging(args.limit, args.page)
        result = service.list_system_languages(limit=args.limit, page=args.page)

    return ControllerResponse(
        content=format_system_languages(result),
        metadata={"count": len(result.items)},
    )


def list_project_languages(args: ListProjectLanguagesArgs) -> ControllerResponse:
    with controller_errors("listing project languages", project_id=args.project_id):
        result = service.list_project_languages(args.project_id)
        progress = service.language_progress(args.project_id) if args.include_progress else {}

    return ControllerResponse(
        content=format_project_languages(result, args.project_id, progress),
        metadata={"count": len(result.items)},
    )


def add_project_languages(args: AddProjectLanguagesArgs) -> ControllerResponse:
    languages = [lang.model_dump(exclude_none=True) for lang in args.languages]
    with controller_errors("adding project languages", project_id=args.project_id):
        result = service.add_languages(args.project_id, languages)

    logger.info("Added %d languages to %s", len(result.items), args.project_id)
    return ControllerResponse(
        content=format_add_languages_result(result, args.project_id),
        metadata={"added": len(result.items), "errors": len(result.errors)},
    )


def get_language(args: GetLanguageArgs) -> ControllerResponse:
    with controller_errors("getting language", project_id=args.project_id):
        with not_found_message(_missing(args.project_id, args.language_id)):
            language = service.get_language(args.project_id, args.language_id)

    return ControllerResponse(content=format_language_details(language, args.project_id))


def update_language(args: UpdateLanguageArgs) -> ControllerResponse:
    data = args.language_data.model_dump(exclude_none=True)
    with controller_errors("updating language", project_id=args.project_id):
        if not data:
            raise validation_error("At least one field must be provided to update the language.")
        with not_found_message(_missing(args.project_id, args.language_id)):
            language = service.update_language(args.project_id, args.language_id, data)

    return ControllerResponse(
        content=format_update_language_result(language, data, args.project_id)
    )


def remove_language(args: RemoveLanguageArgs) -> ControllerResponse:
    with controller_errors("removing language", project_id=args.project_id):
        with not_found_message(_missing(args.project_id, args.language_id)):
            result = service.remove_language(args.project_id, args.language_id)

    return ControllerResponse(
        content=format_remove_language_result(args.language_id, result, args.project_id)
    )

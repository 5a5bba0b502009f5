"""Glossary operations shared by the MCP tools, resources and CLI."""

from __future__ import annotations

import logging

from lokalise_mcp.controllers import (
    ControllerResponse,
    check_paging,
    controller_errors,
    not_found_message,
)
from lokalise_mcp.domains.glossary.glossary_formatter import (
    format_create_terms_result,
    format_delete_terms_result,
    format_glossary_term,
    format_glossary_terms_list,
    format_update_terms_result,
)
from lokalise_mcp.domains.glossary.glossary_service import GlossaryService
from lokalise_mcp.domains.glossary.glossary_types import (
    MAX_TERMS_PAGE,
    CreateGlossaryTermsArgs,
    DeleteGlossaryTermsArgs,
    GetGlossaryTermArgs,
    ListGlossaryTermsArgs,
    UpdateGlossaryTermsArgs,
)

logger = logging.getLogger(__name__)

service = GlossaryService()


def list_glossary_terms(args: ListGlossaryTermsArgs) -> ControllerResponse:
    with controller_errors("listing glossary terms", project_id=args.project_id):
        check_paging(args.limit, None, MAX_TERMS_PAGE)
        result = service.list_terms(args.project_id, limit=args.limit, cursor=args.cursor)

    return ControllerResponse(
        content=format_glossary_terms_list(result, args.project_id),
        metadata={"count": len(result.items), "next_cursor": result.next_cursor},
    )


def get_glossary_term(args: GetGlossaryTermArgs) -> ControllerResponse:
    with controller_errors("getting glossary term", project_id=args.project_id):
        with not_found_message(
            f"Glossary term {args.term_id} not found in project '{args.project_id}'."
        ):
            term = service.get_term(args.project_id, args.term_id)

    return ControllerResponse(content=format_glossary_term(term, args.project_id))


def create_glossary_terms(args: CreateGlossaryTermsArgs) -> ControllerResponse:
    terms = [t.model_dump(exclude_none=True, by_alias=True) for t in args.terms]
    with controller_errors("creating glossary terms", project_id=args.project_id):
        result = service.create_terms(args.project_id, terms)

    return ControllerResponse(
        content=format_create_terms_result(result, args.project_id),
        metadata={"created": len(result.items), "errors": len(result.errors)},
    )


def update_glossary_terms(args: UpdateGlossaryTermsArgs) -> ControllerResponse:
    terms = [t.model_dump(exclude_none=True, by_alias=True) for t in args.terms]
    with controller_errors("updating glossary terms", project_id=args.project_id):
        result = service.update_terms(args.project_id, terms)

    return ControllerResponse(
        content=format_update_terms_result(result, args.project_id),
        metadata={"updated": len(result.items), "errors": len(result.errors)},
    )


def delete_glossary_terms(args: DeleteGlossaryTermsArgs) -> ControllerResponse:
    with controller_errors("deleting glossary terms", project_id=args.project_id):
        result = service.delete_terms(args.project_id, args.term_ids)

    return ControllerResponse(
        content=format_delete_terms_result(result, args.term_ids, args.project_id)
    )

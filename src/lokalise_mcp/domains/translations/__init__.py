"""Translations domain: per-language translation entries of keys."""

from lokalise_mcp.domains.translations import (
    translations_cli,
    translations_resource,
    translations_tool,
)
from lokalise_mcp.domains.types import DomainMeta


def get_meta() -> DomainMeta:
    return DomainMeta(
        name="translations",
        description="Translation management",
        version="1.0.0",
        tools_count=4,
        cli_commands_count=4,
        resources_count=2,
    )


__all__ = ["get_meta", "translations_cli", "translations_resource", "translations_tool"]

"""Command-line interface to the Lokalise API.

Every domain contributes its commands to one click group; they print the
same Markdown that the MCP tools return.
"""

from __future__ import annotations

import logging

import click

from lokalise_mcp import __version__
from lokalise_mcp.config import settings
from lokalise_mcp.domains import DomainRegistry, register_all_cli
from lokalise_mcp.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_cli(registry: DomainRegistry | None = None) -> click.Group:
    """Create the top-level group and register every domain's commands."""

    @click.group(invoke_without_command=True)
    @click.version_option(__version__, prog_name="lokalise-mcp")
    @click.pass_context
    def cli(ctx: click.Context) -> None:
        """lokalise-mcp CLI: work with Lokalise projects from the terminal."""
        if ctx.invoked_subcommand is None:
            click.echo(ctx.get_help())

    if registry is None:
        register_all_cli(cli)
    else:
        registry.register_all_cli(cli)
    return cli


def main(args: list[str] | None = None) -> None:
    """Run the CLI with *args* (defaults to ``sys.argv[1:]``)."""
    settings.load()
    setup_logging(settings.debug)
    cli = build_cli()
    cli.main(args=args, prog_name="lokalise-mcp", standalone_mode=True)

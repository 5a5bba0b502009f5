"""Structural types shared by the domain registry and domain packages."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    import click
    from mcp.server.fastmcp import FastMCP


@dataclass(frozen=True)
class DomainMeta:
    """Descriptive metadata for a domain or one of its surfaces."""

    name: str
    description: str
    version: str = "1.0.0"
    tools_count: int | None = None
    cli_commands_count: int | None = None
    resources_count: int | None = None


class DomainTool(Protocol):
    def register_tools(self, mcp: FastMCP) -> None: ...


class DomainCli(Protocol):
    def register(self, cli: click.Group) -> None: ...


class DomainResource(Protocol):
    def register_resources(self, mcp: FastMCP) -> None: ...


@dataclass(frozen=True)
class DomainDescriptor:
    """Result of inspecting one directory under the domains root."""

    name: str
    path: Path
    has_tools: bool = False
    has_cli: bool = False
    has_resources: bool = False
    is_valid: bool = False
    error: str | None = None


@dataclass
class DomainModule:
    """Capabilities extracted from a domain's entry module.

    Any of ``tool``, ``cli`` and ``resource`` may be ``None`` when the
    domain does not provide that surface.
    """

    meta: DomainMeta
    tool: DomainTool | Any | None = None
    cli: DomainCli | Any | None = None
    resource: DomainResource | Any | None = None


@dataclass
class RegistryEntry:
    """Outcome of the most recent load attempt for a domain."""

    name: str
    path: Path
    module: DomainModule | None
    loaded: bool
    error: str | None = None


@dataclass
class RegistryStatus:
    discovered: int
    loaded: int
    failed: int
    entries: list[RegistryEntry] = field(default_factory=list)

"""Lokalise API domains.

Each subpackage wraps one Lokalise entity (projects, keys, tasks, ...) and
is discovered and registered by ``DomainRegistry``. The module-level
functions below operate on the registry for the built-in domains.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from lokalise_mcp.domains.registry import DomainRegistry
from lokalise_mcp.domains.types import (
    DomainCli,
    DomainDescriptor,
    DomainMeta,
    DomainModule,
    DomainResource,
    DomainTool,
    RegistryEntry,
    RegistryStatus,
)

logger = logging.getLogger(__name__)

domain_registry = DomainRegistry(Path(__file__).parent, package=__name__)


def register_all_tools(mcp: Any) -> int:
    logger.info("Starting domain tools registration")
    try:
        count = domain_registry.register_all_tools(mcp)
    except Exception:
        logger.exception("Failed to register domain tools")
        raise
    logger.info("Domain tools registration completed")
    return count


def register_all_cli(cli: Any) -> int:
    logger.info("Starting domain CLI registration")
    try:
        count = domain_registry.register_all_cli(cli)
    except Exception:
        logger.exception("Failed to register domain CLI")
        raise
    logger.info("Domain CLI registration completed")
    return count


def register_all_resources(mcp: Any) -> int:
    logger.info("Starting domain resources registration")
    try:
        count = domain_registry.register_all_resources(mcp)
    except Exception:
        logger.exception("Failed to register domain resources")
        raise
    logger.info("Domain resources registration completed")
    return count


def discover_domains() -> list[DomainDescriptor]:
    return domain_registry.discover_domains()


def load_domain(name: str) -> DomainModule | None:
    return domain_registry.load_domain(name)


def get_domain_registry_status() -> RegistryStatus:
    return domain_registry.get_registry_status()


__all__ = [
    "DomainCli",
    "DomainDescriptor",
    "DomainMeta",
    "DomainModule",
    "DomainRegistry",
    "DomainResource",
    "DomainTool",
    "RegistryEntry",
    "RegistryStatus",
    "discover_domains",
    "domain_registry",
    "get_domain_registry_status",
    "load_domain",
    "register_all_cli",
    "register_all_resources",
    "register_all_tools",
]

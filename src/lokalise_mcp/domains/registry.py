"""Domain discovery, loading and registration fan-out.

A domains root holds one directory per domain. A directory is a valid
domain when it contains an ``__init__.py`` entry module and at least one
capability file, recognised by suffix:

* ``*_tool.py``      MCP tools
* ``*_cli.py``       CLI commands
* ``*_resource.py``  MCP resources

The entry module of domain ``<name>`` exposes its capabilities as the
attributes ``<name>_tool``, ``<name>_cli`` and ``<name>_resource``; each
provides ``register_tools(mcp)``, ``register(cli)`` or
``register_resources(mcp)`` respectively. A failure in one domain, whether
while inspecting its directory, importing it or registering it, is logged
and recorded, and never prevents the other domains from registering.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
import os
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

from lokalise_mcp.domains.types import (
    DomainDescriptor,
    DomainMeta,
    DomainModule,
    RegistryEntry,
    RegistryStatus,
)

logger = logging.getLogger(__name__)

INDEX_FILE = "__init__.py"
TOOL_SUFFIX = "_tool.py"
CLI_SUFFIX = "_cli.py"
RESOURCE_SUFFIX = "_resource.py"
SKIPPED_DIRS = frozenset({"__pycache__"})


class DomainRegistry:
    """Discovers domain packages under a root directory and registers them.

    Args:
        domains_path: Directory holding one subdirectory per domain.
        package: Dotted package name of ``domains_path`` when it is an
            importable package. Domains are then imported by name; without
            it they are loaded straight from their ``__init__.py`` file.
    """

    def __init__(self, domains_path: str | Path, package: str | None = None) -> None:
        self.domains_path = Path(domains_path)
        self.package = package
        self._entries: dict[str, RegistryEntry] = {}
        self._descriptors: list[DomainDescriptor] = []
        self._discovered = False

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def discover_domains(self) -> list[DomainDescriptor]:
        """Scan the domains root and classify every subdirectory.

        Replaces the descriptors from any previous scan and drops registry
        entries of domains that are no longer on disk.

        Raises:
            OSError: If the domains root itself cannot be read.
        """
        logger.debug("Starting domain discovery in %s", self.domains_path)
        try:
            with os.scandir(self.domains_path) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            logger.error("Error discovering domains in %s: %s", self.domains_path, exc)
            raise

        descriptors = []
        for entry in entries:
            if entry.name.startswith(".") or entry.name in SKIPPED_DIRS:
                continue
            path = Path(entry.path)
            try:
                is_dir = entry.is_dir()
            except OSError as exc:
                logger.error("Error analyzing domain %s: %s", entry.name, exc)
                descriptors.append(
                    DomainDescriptor(name=entry.name, path=path, is_valid=False, error=str(exc))
                )
                continue
            if is_dir:
                descriptors.append(self._analyze_domain(entry.name, path))

        self._descriptors = descriptors
        present = {d.name for d in descriptors}
        self._entries = {name: e for name, e in self._entries.items() if name in present}
        self._discovered = True
        logger.info(
            "Discovered %d domains: %s",
            len(self._descriptors),
            ", ".join(d.name for d in self._descriptors),
        )
        return list(self._descriptors)

    def _analyze_domain(self, name: str, path: Path) -> DomainDescriptor:
        try:
            files = os.listdir(path)
        except OSError as exc:
            logger.error("Error analyzing domain %s: %s", name, exc)
            return DomainDescriptor(name=name, path=path, is_valid=False, error=str(exc))

        has_tools = any(f.endswith(TOOL_SUFFIX) for f in files)
        has_cli = any(f.endswith(CLI_SUFFIX) for f in files)
        has_resources = any(f.endswith(RESOURCE_SUFFIX) for f in files)
        has_index = INDEX_FILE in files

        return DomainDescriptor(
            name=name,
            path=path,
            has_tools=has_tools,
            has_cli=has_cli,
            has_resources=has_resources,
            is_valid=has_index and (has_tools or has_cli or has_resources),
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_domain(self, name: str) -> DomainModule | None:
        """Import one discovered domain.

        Returns ``None`` when the domain is unknown, invalid, or fails to
        import; the failure is recorded in the registry status.
        """
        descriptor = next((d for d in self._descriptors if d.name == name), None)
        if descriptor is None or not descriptor.is_valid:
            logger.warning("Domain %s not found or invalid", name)
            return None

        try:
            entry_module = self._import_entry(descriptor)
            module = DomainModule(
                meta=self._meta_for(name, entry_module),
                tool=getattr(entry_module, f"{name}_tool", None),
                cli=getattr(entry_module, f"{name}_cli", None),
                resource=getattr(entry_module, f"{name}_resource", None),
            )
        except Exception as exc:
            logger.error("Failed to load domain %s: %s", name, exc)
            self._entries[name] = RegistryEntry(
                name=name,
                path=descriptor.path,
                module=None,
                loaded=False,
                error=str(exc) or type(exc).__name__,
            )
            return None

        self._entries[name] = RegistryEntry(
            name=name, path=descriptor.path, module=module, loaded=True
        )
        logger.info(
            "Loaded domain %s (tools=%s, cli=%s, resources=%s)",
            name,
            module.tool is not None,
            module.cli is not None,
            module.resource is not None,
        )
        return module

    def load_all_domains(self) -> list[DomainModule]:
        """Load every valid domain, discovering first if that never happened."""
        if not self._discovered:
            self.discover_domains()

        modules = []
        for descriptor in self._descriptors:
            if not descriptor.is_valid:
                continue
            module = self.load_domain(descriptor.name)
            if module is not None:
                modules.append(module)

        logger.info("Loaded %d domains successfully", len(modules))
        return modules

    def _import_entry(self, descriptor: DomainDescriptor) -> ModuleType:
        if self.package:
            return importlib.import_module(f"{self.package}.{descriptor.name}")

        module_name = f"_lokalise_domain_{descriptor.name}"
        spec = importlib.util.spec_from_file_location(
            module_name,
            descriptor.path / INDEX_FILE,
            submodule_search_locations=[str(descriptor.path)],
        )
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load domain entry module from {descriptor.path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            raise
        return module

    @staticmethod
    def _meta_for(name: str, entry_module: ModuleType) -> DomainMeta:
        get_meta = getattr(entry_module, "get_meta", None)
        if callable(get_meta):
            meta = get_meta()
            if isinstance(meta, DomainMeta):
                return meta
        return DomainMeta(name=name, description=f"{name[:1].upper()}{name[1:]} domain")

    # ------------------------------------------------------------------
    # Registration fan-out
    # ------------------------------------------------------------------

    def register_all_tools(self, mcp: Any) -> int:
        """Register every domain's MCP tools; returns the number of domains registered."""
        return self._fan_out("tool", "register_tools", mcp, "tools")

    def register_all_cli(self, cli: Any) -> int:
        """Register every domain's CLI commands; returns the number of domains registered."""
        return self._fan_out("cli", "register", cli, "CLI commands")

    def register_all_resources(self, mcp: Any) -> int:
        """Register every domain's MCP resources; returns the number of domains registered."""
        return self._fan_out("resource", "register_resources", mcp, "resources")

    def _fan_out(self, capability: str, method: str, target: Any, label: str) -> int:
        modules = self.load_all_domains()
        registered = 0

        for module in modules:
            surface = getattr(module, capability)
            register = getattr(surface, method, None) if surface is not None else None
            if not callable(register):
                continue
            try:
                register(target)
            except Exception:
                logger.exception(
                    "Failed to register %s for domain: %s", label, module.meta.name
                )
                continue
            registered += 1
            logger.debug("Registered %s for domain: %s", label, module.meta.name)

        logger.info("Registered %s for %d domains", label, registered)
        return registered

    # ------------------------------------------------------------------
    # Status
    # ------------------------------------------------------------------

    def get_registry_status(self) -> RegistryStatus:
        entries = list(self._entries.values())
        loaded = sum(1 for e in entries if e.loaded)
        return RegistryStatus(
            discovered=len(self._descriptors),
            loaded=loaded,
            failed=len(entries) - loaded,
            entries=entries,
        )

"""Tests for domain discovery, loading and registration fan-out."""

import contextlib
import os
import shutil

import pytest

from lokalise_mcp.domains import registry as registry_module
from lokalise_mcp.domains.registry import DomainRegistry
from lokalise_mcp.domains.types import DomainMeta

TOOL_DOMAIN = {
    "__init__.py": """
        from . import {name}_tool
    """,
    "{name}_tool.py": """
        def register_tools(mcp):
            mcp.append("{name}")
    """,
}

FULL_DOMAIN = {
    "__init__.py": """
        from lokalise_mcp.domains.types import DomainMeta
        from . import {name}_cli, {name}_resource, {name}_tool

        def get_meta():
            return DomainMeta(name="{name}", description="Full {name}", tools_count=1)
    """,
    "{name}_tool.py": """
        def register_tools(mcp):
            mcp.append("tool:{name}")
    """,
    "{name}_cli.py": """
        def register(cli):
            cli.append("cli:{name}")
    """,
    "{name}_resource.py": """
        def register_resources(mcp):
            mcp.append("resource:{name}")
    """,
}


def add_domain(domain_tree, name, template):
    files = {
        filename.format(name=name): source.replace("{name}", name)
        for filename, source in template.items()
    }
    return domain_tree(name, files)


class TestDiscovery:
    """Tests for DomainRegistry.discover_domains."""

    def test_discovers_valid_domains_sorted(self, domain_tree):
        """Test that domains are found and returned sorted by name."""
        add_domain(domain_tree, "zeta", TOOL_DOMAIN)
        root = add_domain(domain_tree, "alpha", FULL_DOMAIN)

        descriptors = DomainRegistry(root).discover_domains()

        assert [d.name for d in descriptors] == ["alpha", "zeta"]
        alpha, zeta = descriptors
        assert alpha.is_valid and alpha.has_tools and alpha.has_cli and alpha.has_resources
        assert zeta.is_valid and zeta.has_tools
        assert not zeta.has_cli and not zeta.has_resources

    def test_skips_hidden_and_cache_directories(self, domain_tree):
        """Test that dot-prefixed directories and __pycache__ are ignored."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        add_domain(domain_tree, ".hidden", TOOL_DOMAIN)
        (root / "__pycache__").mkdir()
        (root / "notes.txt").write_text("not a domain")

        descriptors = DomainRegistry(root).discover_domains()

        assert [d.name for d in descriptors] == ["alpha"]

    def test_directory_without_index_is_invalid(self, domain_tree):
        """Test that a domain needs an __init__.py entry module."""
        root = domain_tree("orphan", {"orphan_tool.py": "def register_tools(mcp): pass\n"})

        (descriptor,) = DomainRegistry(root).discover_domains()

        assert descriptor.has_tools
        assert not descriptor.is_valid

    def test_directory_without_capabilities_is_invalid(self, domain_tree):
        """Test that a domain needs at least one capability file."""
        root = domain_tree("empty", {"__init__.py": "", "helpers.py": ""})

        (descriptor,) = DomainRegistry(root).discover_domains()

        assert not descriptor.is_valid
        assert descriptor.error is None

    def test_missing_root_raises(self, tmp_path):
        """Test that an unreadable domains root propagates the error."""
        registry = DomainRegistry(tmp_path / "does-not-exist")

        with pytest.raises(OSError):
            registry.discover_domains()

    def test_unreadable_domain_is_recorded(self, domain_tree, monkeypatch):
        """Test that a domain directory that cannot be listed becomes invalid."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        add_domain(domain_tree, "broken", TOOL_DOMAIN)
        real_listdir = os.listdir

        def listdir(path):
            if os.path.basename(os.fspath(path)) == "broken":
                raise PermissionError("permission denied")
            return real_listdir(path)

        monkeypatch.setattr(registry_module.os, "listdir", listdir)

        descriptors = {d.name: d for d in DomainRegistry(root).discover_domains()}

        assert descriptors["alpha"].is_valid
        assert not descriptors["broken"].is_valid
        assert "permission denied" in descriptors["broken"].error

    def test_rediscovery_replaces_previous_results(self, domain_tree):
        """Test that a second scan reflects directories added since the first."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        assert len(registry.discover_domains()) == 1

        add_domain(domain_tree, "beta", TOOL_DOMAIN)

        assert [d.name for d in registry.discover_domains()] == ["alpha", "beta"]

    def test_rediscovery_drops_removed_domains(self, domain_tree):
        """Test that a domain deleted between scans leaves no stale entry behind."""
        add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        root = add_domain(domain_tree, "beta", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        registry.load_all_domains()
        assert registry.get_registry_status().loaded == 2

        shutil.rmtree(root / "beta")

        assert [d.name for d in registry.discover_domains()] == ["alpha"]
        status = registry.get_registry_status()
        assert status.discovered == 1
        assert [e.name for e in status.entries] == ["alpha"]
        assert registry.load_domain("beta") is None

    def test_entry_that_cannot_be_inspected_is_recorded(self, domain_tree, monkeypatch):
        """Test that an entry whose type check fails becomes invalid without aborting the scan."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        real_scandir = os.scandir

        class UnstatableEntry:
            name = "flaky"
            path = str(root / "flaky")

            def is_dir(self):
                raise PermissionError("stat failed")

        @contextlib.contextmanager
        def scandir(path):
            with real_scandir(path) as entries:
                yield [*entries, UnstatableEntry()]

        monkeypatch.setattr(registry_module.os, "scandir", scandir)

        descriptors = DomainRegistry(root).discover_domains()

        assert [d.name for d in descriptors] == ["alpha", "flaky"]
        alpha, flaky = descriptors
        assert alpha.is_valid
        assert not flaky.is_valid
        assert "stat failed" in flaky.error


class TestLoading:
    """Tests for loading domain entry modules."""

    def test_load_domain_uses_get_meta(self, domain_tree):
        """Test that the domain's own metadata is used when it provides one."""
        root = add_domain(domain_tree, "alpha", FULL_DOMAIN)
        registry = DomainRegistry(root)
        registry.discover_domains()

        module = registry.load_domain("alpha")

        assert module is not None
        assert module.meta == DomainMeta(name="alpha", description="Full alpha", tools_count=1)
        assert module.tool is not None
        assert module.cli is not None
        assert module.resource is not None

    def test_load_domain_default_meta(self, domain_tree):
        """Test the fallback metadata for domains without get_meta."""
        root = add_domain(domain_tree, "beta", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        registry.discover_domains()

        module = registry.load_domain("beta")

        assert module.meta.name == "beta"
        assert module.meta.description == "Beta domain"
        assert module.meta.version == "1.0.0"
        assert module.cli is None
        assert module.resource is None

    def test_load_unknown_domain_returns_none(self, domain_tree):
        """Test that loading a name that was never discovered returns None."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        registry.discover_domains()

        assert registry.load_domain("missing") is None
        assert registry.get_registry_status().failed == 0

    def test_load_failure_is_recorded(self, domain_tree):
        """Test that an entry module raising on import is recorded as failed."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        domain_tree(
            "broken",
            {
                "__init__.py": "raise RuntimeError('boom')\n",
                "broken_tool.py": "def register_tools(mcp): pass\n",
            },
        )
        registry = DomainRegistry(root)

        modules = registry.load_all_domains()

        assert [m.meta.name for m in modules] == ["alpha"]
        status = registry.get_registry_status()
        assert status.discovered == 2
        assert status.loaded == 1
        assert status.failed == 1
        failed = next(e for e in status.entries if not e.loaded)
        assert failed.name == "broken"
        assert failed.module is None
        assert "boom" in failed.error

    def test_load_all_discovers_first(self, domain_tree):
        """Test that load_all_domains scans the root when no scan happened yet."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        registry = DomainRegistry(root)

        modules = registry.load_all_domains()

        assert len(modules) == 1
        assert registry.get_registry_status().discovered == 1

    def test_load_all_does_not_rescan(self, domain_tree):
        """Test that load_all_domains reuses an earlier scan."""
        root = add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        registry.discover_domains()
        add_domain(domain_tree, "beta", TOOL_DOMAIN)

        modules = registry.load_all_domains()
        registry.load_all_domains()

        assert [m.meta.name for m in modules] == ["alpha"]
        assert registry.get_registry_status().discovered == 1


class TestRegistration:
    """Tests for the registration fan-out."""

    def test_register_all_tools(self, domain_tree):
        """Test that every domain's tools are registered."""
        add_domain(domain_tree, "alpha", FULL_DOMAIN)
        root = add_domain(domain_tree, "beta", TOOL_DOMAIN)
        target = []

        count = DomainRegistry(root).register_all_tools(target)

        assert count == 2
        assert target == ["tool:alpha", "beta"]

    def test_cli_and_resources_only_for_domains_that_have_them(self, domain_tree):
        """Test that domains without a surface are skipped for that surface."""
        add_domain(domain_tree, "alpha", FULL_DOMAIN)
        root = add_domain(domain_tree, "beta", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        commands, resources = [], []

        assert registry.register_all_cli(commands) == 1
        assert registry.register_all_resources(resources) == 1
        assert commands == ["cli:alpha"]
        assert resources == ["resource:alpha"]

    def test_failing_domain_does_not_block_others(self, domain_tree):
        """Test that an exception in one domain's registration is isolated."""
        domain_tree(
            "alpha",
            {
                "__init__.py": "from . import alpha_tool\n",
                "alpha_tool.py": "def register_tools(mcp):\n    raise ValueError('bad tool')\n",
            },
        )
        root = add_domain(domain_tree, "beta", TOOL_DOMAIN)
        target = []

        count = DomainRegistry(root).register_all_tools(target)

        assert count == 1
        assert target == ["beta"]

    def test_status_reports_domain_without_cli_as_loaded(self, domain_tree):
        """Test that skipping a missing surface is not a load failure."""
        add_domain(domain_tree, "alpha", FULL_DOMAIN)
        root = add_domain(domain_tree, "beta", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        commands = []

        assert registry.register_all_cli(commands) == 1

        status = registry.get_registry_status()
        entries = {e.name: e for e in status.entries}
        assert commands == ["cli:alpha"]
        assert entries["beta"].loaded
        assert entries["beta"].module.cli is None
        assert status.loaded == 2
        assert status.failed == 0

    def test_index_only_domain_registers_nothing(self, domain_tree):
        """Test that a domain with only __init__.py is invalid and contributes no tools."""
        add_domain(domain_tree, "alpha", TOOL_DOMAIN)
        root = domain_tree("beta", {"__init__.py": ""})
        registry = DomainRegistry(root)
        target = []

        count = registry.register_all_tools(target)

        descriptors = {d.name: d for d in registry.discover_domains()}
        assert descriptors["alpha"].is_valid
        assert not descriptors["beta"].is_valid
        assert count == 1
        assert target == ["alpha"]
        assert [e.name for e in registry.get_registry_status().entries] == ["alpha"]

    def test_failure_in_first_domain_does_not_block_later_ones(self, domain_tree):
        """Test that domains after a failing one still register, in order."""
        domain_tree(
            "a",
            {
                "__init__.py": "from . import a_tool\n",
                "a_tool.py": "def register_tools(mcp):\n    raise RuntimeError('a failed')\n",
            },
        )
        add_domain(domain_tree, "b", TOOL_DOMAIN)
        root = add_domain(domain_tree, "c", TOOL_DOMAIN)
        target = []

        count = DomainRegistry(root).register_all_tools(target)

        assert count == 2
        assert target == ["b", "c"]

    def test_import_failure_in_first_domain_does_not_block_later_ones(self, domain_tree):
        """Test that a domain failing to import leaves the others registered."""
        domain_tree(
            "a",
            {
                "__init__.py": "raise ImportError('a missing dependency')\n",
                "a_tool.py": "def register_tools(mcp): pass\n",
            },
        )
        add_domain(domain_tree, "b", TOOL_DOMAIN)
        root = add_domain(domain_tree, "c", TOOL_DOMAIN)
        registry = DomainRegistry(root)
        target = []

        assert registry.register_all_tools(target) == 2
        assert target == ["b", "c"]
        assert registry.get_registry_status().failed == 1

    def test_empty_root_registers_nothing(self, tmp_path):
        """Test that an empty domains root is not an error."""
        root = tmp_path / "domains"
        root.mkdir()
        target = []

        assert DomainRegistry(root).register_all_tools(target) == 0
        assert target == []

"""Shared fixtures: a fake Lokalise client, isolated settings, temporary domain trees."""

import sys
import textwrap
from types import SimpleNamespace
from unittest.mock import create_autospec

import lokalise
import pytest

from lokalise_mcp.config import settings
from lokalise_mcp.lokalise_client import client as client_module

CONFIG_KEYS = (
    "LOKALISE_API_KEY",
    "LOKALISE_API_HOSTNAME",
    "LOKALISE_CONNECT_TIMEOUT",
    "LOKALISE_READ_TIMEOUT",
    "TRANSPORT_MODE",
    "PORT",
    "DEBUG",
    "MCP_SERVER_MODE",
)


class FakeApiError(Exception):
    """Stands in for an SDK error carrying an HTTP status in ``code``."""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


def collection(items, **paging):
    """Build an SDK-like collection object."""
    return SimpleNamespace(items=list(items), **paging)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without the developer's environment or config files."""
    for key in CONFIG_KEYS:
        # setenv first so teardown also removes values written by load()
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(settings, "_global_config_path", tmp_path / "configs.json")
    monkeypatch.setattr(settings, "_overrides", {})
    monkeypatch.setattr(settings, "_loaded", False)
    settings._read()
    return settings


@pytest.fixture
def fake_client(monkeypatch):
    """Install an autospecced ``lokalise.Client`` as the shared client."""
    fake = create_autospec(lokalise.Client, instance=True)
    monkeypatch.setattr(client_module, "_client", fake)
    return fake


@pytest.fixture
def domain_tree(tmp_path):
    """Return a helper that writes a domain directory under a fresh root.

    ``make(name, files)`` creates ``<root>/<name>/<file>`` for every entry of
    ``files`` (file name to source text) and returns the root.
    """
    root = tmp_path / "domains"
    root.mkdir()

    def make(name, files):
        directory = root / name
        directory.mkdir()
        for filename, source in files.items():
            (directory / filename).write_text(textwrap.dedent(source), encoding="utf-8")
        return root

    yield make

    for module_name in [m for m in sys.modules if m.startswith("_lokalise_domain_")]:
        del sys.modules[module_name]

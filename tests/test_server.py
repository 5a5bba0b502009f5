"""Tests for the server entry point and its CLI dispatch."""

import pytest
from mcp.server.fastmcp import FastMCP

from lokalise_mcp import server


@pytest.fixture
def runs(monkeypatch):
    """Record transports passed to FastMCP.run instead of serving."""
    calls = []
    monkeypatch.setattr(FastMCP, "run", lambda self, transport="stdio": calls.append(transport))
    monkeypatch.setattr(server, "setup_logging", lambda debug=False: None)
    return calls


@pytest.fixture
def cli_calls(monkeypatch):
    calls = []
    monkeypatch.setattr("lokalise_mcp.cli.main", lambda args=None: calls.append(args))
    return calls


class TestMain:
    """Tests for server.main."""

    def test_arguments_run_the_cli(self, monkeypatch, runs, cli_calls):
        """Test that command-line arguments are handed to the CLI."""
        monkeypatch.setattr("sys.argv", ["lokalise-mcp", "list-projects", "--limit", "5"])

        server.main()

        assert cli_calls == [["list-projects", "--limit", "5"]]
        assert runs == []

    def test_server_mode_ignores_arguments(self, monkeypatch, runs, cli_calls):
        """Test that MCP_SERVER_MODE forces the server even with arguments."""
        monkeypatch.setattr("sys.argv", ["lokalise-mcp", "--some-host-flag"])
        monkeypatch.setenv("MCP_SERVER_MODE", "true")
        monkeypatch.setenv("LOKALISE_API_KEY", "token")

        server.main()

        assert cli_calls == []
        assert runs == ["stdio"]

    def test_stdio_requires_api_key(self, monkeypatch, runs):
        monkeypatch.setattr("sys.argv", ["lokalise-mcp"])

        with pytest.raises(SystemExit) as excinfo:
            server.main()

        assert excinfo.value.code == 1
        assert runs == []

    def test_stdio(self, monkeypatch, runs):
        monkeypatch.setattr("sys.argv", ["lokalise-mcp"])
        monkeypatch.setenv("LOKALISE_API_KEY", "token")

        server.main()

        assert runs == ["stdio"]

    def test_http_transport(self, monkeypatch, runs):
        """Test that HTTP mode starts without an API key."""
        monkeypatch.setattr("sys.argv", ["lokalise-mcp"])
        monkeypatch.setenv("TRANSPORT_MODE", "http")
        monkeypatch.setenv("PORT", "3010")

        server.main()

        assert runs == ["streamable-http"]


def test_create_server_uses_configured_port(monkeypatch):
    monkeypatch.setenv("PORT", "3999")
    server.settings.reload()

    mcp = server.create_server()

    assert mcp.settings.port == 3999

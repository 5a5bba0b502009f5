"""Tests for the built-in domains wired into the server and the CLI."""

import asyncio

import pytest
from click.testing import CliRunner
from mcp.server.fastmcp.exceptions import ToolError

from lokalise_mcp.cli import build_cli
from lokalise_mcp.domains import (
    discover_domains,
    domain_registry,
    get_domain_registry_status,
    load_domain,
)
from lokalise_mcp.server import create_server
from tests.conftest import FakeApiError, collection

DOMAIN_COUNTS = {
    "comments": (5, 5, 2),
    "contributors": (6, 6, 2),
    "glossary": (5, 5, 2),
    "keys": (7, 7, 2),
    "languages": (6, 6, 2),
    "projects": (6, 6, 2),
    "queuedprocesses": (2, 2, 1),
    "tasks": (5, 5, 2),
    "teamusers": (4, 4, 2),
    "translations": (4, 4, 2),
    "usergroups": (9, 9, 2),
}


def tool_text(result):
    # newer mcp releases return (content, structured_content)
    if isinstance(result, tuple):
        result = result[0]
    return "\n".join(block.text for block in result)


@pytest.fixture
def server():
    return create_server()


class TestBuiltinDomains:
    """Tests for discovery and loading of the shipped domains."""

    def test_all_domains_discovered(self):
        """Test that every shipped domain is found and valid."""
        descriptors = discover_domains()

        assert [d.name for d in descriptors] == sorted(DOMAIN_COUNTS)
        assert all(d.is_valid for d in descriptors)
        assert all(d.has_tools and d.has_cli and d.has_resources for d in descriptors)

    @pytest.mark.parametrize("name", sorted(DOMAIN_COUNTS))
    def test_domain_meta(self, name):
        """Test the metadata each domain reports about itself."""
        discover_domains()

        module = load_domain(name)

        assert module is not None
        assert module.meta.name == name
        counts = (
            module.meta.tools_count,
            module.meta.cli_commands_count,
            module.meta.resources_count,
        )
        assert counts == DOMAIN_COUNTS[name]

    def test_registry_status(self):
        domain_registry.load_all_domains()

        status = get_domain_registry_status()

        assert status.discovered == len(DOMAIN_COUNTS)
        assert status.loaded == len(DOMAIN_COUNTS)
        assert status.failed == 0


class TestServer:
    """Tests for the assembled MCP server."""

    def test_registered_capabilities(self, server):
        """Test the number of tools, resources and prompts exposed."""
        tools = asyncio.run(server.list_tools())
        resources = asyncio.run(server.list_resources())
        templates = asyncio.run(server.list_resource_templates())
        prompts = asyncio.run(server.list_prompts())

        assert len(tools) == sum(c[0] for c in DOMAIN_COUNTS.values())
        assert len(resources) == 2
        assert len(templates) == 19
        assert len(prompts) == 10
        assert all(tool.name.startswith("lokalise_") for tool in tools)

    def test_call_tool(self, server, fake_client):
        fake_client.projects.return_value = collection(
            [{"project_id": "123.abc", "name": "Mobile App"}]
        )

        result = asyncio.run(server.call_tool("lokalise_list_projects", {"limit": 5}))

        assert "Mobile App" in tool_text(result)
        assert fake_client.projects.call_args.args[0]["limit"] == 5

    def test_tool_error(self, server, fake_client):
        """Test that API failures reach the client as tool errors."""
        fake_client.project.side_effect = FakeApiError("Unauthorized", 401)

        with pytest.raises(ToolError) as excinfo:
            asyncio.run(
                server.call_tool("lokalise_get_project", {"project_id": "123.abc"})
            )

        assert "Authentication failed" in str(excinfo.value)

    def test_resource_error_is_text(self, server, fake_client):
        """Test that a failing resource read returns the error as content."""
        fake_client.projects.side_effect = FakeApiError("Unauthorized", 401)

        contents = list(asyncio.run(server.read_resource("lokalise://projects")))

        text = contents[0].content
        assert text.startswith("Error: Authentication failed")
        assert "lokalise://projects (AUTH_INVALID)" in text


class TestCli:
    """Tests for the assembled CLI."""

    def test_registered_commands(self):
        cli = build_cli()

        assert len(cli.commands) == sum(c[1] for c in DOMAIN_COUNTS.values())
        assert "list-projects" in cli.commands
        assert "add-members-to-group" in cli.commands

    def test_help_without_command(self):
        result = CliRunner().invoke(build_cli(), [])

        assert result.exit_code == 0
        assert "list-projects" in result.output

    def test_list_projects(self, fake_client):
        fake_client.projects.return_value = collection(
            [{"project_id": "123.abc", "name": "Mobile App"}]
        )

        result = CliRunner().invoke(build_cli(), ["list-projects", "--limit", "5"])

        assert result.exit_code == 0
        assert "Lokalise Projects (1)" in result.output

    def test_delete_needs_confirmation(self, fake_client):
        """Test that declining the prompt leaves the project alone."""
        result = CliRunner().invoke(build_cli(), ["delete-project", "123.abc"], input="n\n")

        assert result.exit_code != 0
        fake_client.delete_project.assert_not_called()

    def test_delete_confirmed(self, fake_client):
        fake_client.delete_project.return_value = {"project_deleted": True}

        result = CliRunner().invoke(build_cli(), ["delete-project", "123.abc", "--yes"])

        assert result.exit_code == 0
        fake_client.delete_project.assert_called_once_with("123.abc")
        assert "Project Deleted" in result.output

    def test_api_error_exits_non_zero(self, fake_client):
        fake_client.project.side_effect = FakeApiError("Not Found", 404)

        result = CliRunner().invoke(build_cli(), ["get-project-details", "nope"])

        assert result.exit_code == 1

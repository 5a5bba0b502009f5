"""Tests for environment-backed settings."""

import json

import pytest

from lokalise_mcp.config import DEFAULT_API_HOSTNAME, DEFAULT_PORT, Settings
from lokalise_mcp.errors import ErrorType, LokaliseMcpError


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, tmp_path):
        """Test defaults when nothing is configured."""
        config = Settings(global_config_path=tmp_path / "configs.json")

        assert config.api_key == ""
        assert config.api_hostname == DEFAULT_API_HOSTNAME
        assert config.transport_mode == "stdio"
        assert config.port == DEFAULT_PORT
        assert config.debug is False
        assert config.mcp_server_mode is False
        assert config.connect_timeout is None

    def test_environment_values(self, tmp_path, monkeypatch):
        """Test values read from the environment."""
        monkeypatch.setenv("LOKALISE_API_KEY", "secret")
        monkeypatch.setenv("TRANSPORT_MODE", "HTTP")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOKALISE_READ_TIMEOUT", "12.5")

        config = Settings(global_config_path=tmp_path / "configs.json")

        assert config.api_key == "secret"
        assert config.transport_mode == "http"
        assert config.port == 8080
        assert config.debug is True
        assert config.read_timeout == 12.5

    def test_unknown_transport_falls_back_to_stdio(self, tmp_path, monkeypatch):
        """Test that an unsupported transport mode is ignored."""
        monkeypatch.setenv("TRANSPORT_MODE", "carrier-pigeon")

        config = Settings(global_config_path=tmp_path / "configs.json")

        assert config.transport_mode == "stdio"

    def test_dotenv_file(self, tmp_path):
        """Test that load() reads a .env file from the working directory."""
        (tmp_path / ".env").write_text("LOKALISE_API_KEY=from-dotenv\n")
        config = Settings(global_config_path=tmp_path / "configs.json")

        config.load()

        assert config.api_key == "from-dotenv"

    def test_environment_beats_dotenv(self, tmp_path, monkeypatch):
        """Test that real environment variables win over .env values."""
        (tmp_path / ".env").write_text("LOKALISE_API_KEY=from-dotenv\n")
        monkeypatch.setenv("LOKALISE_API_KEY", "from-env")
        config = Settings(global_config_path=tmp_path / "configs.json")

        config.load()

        assert config.api_key == "from-env"

    def test_global_config_file(self, tmp_path):
        """Test reading the lokalise-mcp section of the global config file."""
        path = tmp_path / "configs.json"
        path.write_text(
            json.dumps(
                {"lokalise-mcp": {"environments": {"LOKALISE_API_KEY": "from-global"}}}
            )
        )
        config = Settings(global_config_path=path)

        config.load()

        assert config.api_key == "from-global"

    def test_broken_global_config_is_ignored(self, tmp_path):
        """Test that an unreadable global config does not stop loading."""
        path = tmp_path / "configs.json"
        path.write_text("{not json")
        config = Settings(global_config_path=path)

        config.load()

        assert config.api_key == ""

    def test_overrides_have_highest_priority(self, tmp_path, monkeypatch):
        """Test that explicit overrides beat the environment."""
        monkeypatch.setenv("LOKALISE_API_KEY", "from-env")
        config = Settings(global_config_path=tmp_path / "configs.json")

        config.apply_overrides({"LOKALISE_API_KEY": "override", "debug_mode": True})

        assert config.api_key == "override"
        assert config.debug is True

    def test_validate_reports_missing_key(self, tmp_path):
        """Test that validation fails with AUTH_MISSING without an API key."""
        config = Settings(global_config_path=tmp_path / "configs.json")

        assert config.missing_keys() == ["LOKALISE_API_KEY"]
        with pytest.raises(LokaliseMcpError) as excinfo:
            config.validate()
        assert excinfo.value.error_type is ErrorType.AUTH_MISSING

    def test_dashboard_url_follows_api_host(self, tmp_path, monkeypatch):
        """Test that the dashboard URL is derived from the API host."""
        monkeypatch.setenv("LOKALISE_API_HOSTNAME", "https://api.stage.lokalise.cloud/api2/")
        config = Settings(global_config_path=tmp_path / "configs.json")

        assert config.dashboard_base_url == "https://app.stage.lokalise.cloud"

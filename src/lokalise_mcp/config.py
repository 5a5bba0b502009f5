"""Application settings loaded from environment variables.

Values are resolved, lowest priority first, from built-in defaults, the
global ``~/.mcp/configs.json`` file, a ``.env`` file in the working
directory, the process environment, and finally explicit overrides.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from lokalise_mcp.errors import auth_missing_error

logger = logging.getLogger(__name__)

PACKAGE_NAME = "lokalise-mcp"
DEFAULT_API_HOSTNAME = "https://api.lokalise.com/api2/"
DEFAULT_PORT = 3000
TRANSPORT_MODES = ("stdio", "http")
REQUIRED_KEYS = ("LOKALISE_API_KEY",)


def _parse_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_float(value: str | None) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning("Ignoring non-numeric timeout value: %r", value)
        return None


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, global_config_path: Path | None = None) -> None:
        self._global_config_path = global_config_path or (
            Path.home() / ".mcp" / "configs.json"
        )
        self._overrides: dict[str, str] = {}
        self._loaded = False
        self._read()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Load the global config file and ``.env`` once, then re-read values."""
        if self._loaded:
            return
        self._load_global_config()
        load_dotenv(Path.cwd() / ".env", override=False)
        self._read()
        self._loaded = True
        logger.debug("Configuration loaded")

    def reload(self) -> None:
        """Force a full re-read and drop the cached Lokalise client."""
        from lokalise_mcp.lokalise_client import reset_lokalise_client

        self._loaded = False
        self.load()
        reset_lokalise_client()

    def apply_overrides(self, values: Mapping[str, Any]) -> None:
        """Apply highest-priority values (e.g. from an MCP host) and re-read."""
        for key, value in values.items():
            if value is None:
                continue
            if key == "debug_mode":
                key = "DEBUG"
            self._overrides[key] = str(value).lower() if isinstance(value, bool) else str(value)
        self._read()

    def _get(self, key: str, default: str | None = None) -> str | None:
        if key in self._overrides:
            return self._overrides[key]
        return os.environ.get(key, default)

    def _read(self) -> None:
        self.api_key: str = self._get("LOKALISE_API_KEY", "") or ""
        self.api_hostname: str = (
            self._get("LOKALISE_API_HOSTNAME") or DEFAULT_API_HOSTNAME
        )
        self.connect_timeout: float | None = _parse_float(
            self._get("LOKALISE_CONNECT_TIMEOUT")
        )
        self.read_timeout: float | None = _parse_float(
            self._get("LOKALISE_READ_TIMEOUT")
        )

        mode = (self._get("TRANSPORT_MODE", "stdio") or "stdio").lower()
        if mode not in TRANSPORT_MODES:
            logger.warning("Unknown TRANSPORT_MODE %r, falling back to stdio", mode)
            mode = "stdio"
        self.transport_mode: str = mode

        port = self._get("PORT")
        self.port: int = int(port) if port and port.isdigit() else DEFAULT_PORT

        self.debug: bool = _parse_bool(self._get("DEBUG"))
        self.mcp_server_mode: bool = _parse_bool(self._get("MCP_SERVER_MODE"))

    def _load_global_config(self) -> None:
        """Copy ``environments`` from ``~/.mcp/configs.json`` into unset env vars."""
        path = self._global_config_path
        if not path.exists():
            logger.debug("Global config file not found: %s", path)
            return

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Error loading global config file %s: %s", path, exc)
            return

        section = raw.get(PACKAGE_NAME) if isinstance(raw, dict) else None
        environments = section.get("environments") if isinstance(section, dict) else None
        if not isinstance(environments, dict):
            logger.debug("No %s section in %s", PACKAGE_NAME, path)
            return

        for key, value in environments.items():
            os.environ.setdefault(key, str(value))
        logger.debug("Loaded configuration from global config file %s", path)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def missing_keys(self) -> list[str]:
        return [key for key in REQUIRED_KEYS if not self._get(key)]

    def validate(self) -> None:
        missing = self.missing_keys()
        if missing:
            raise auth_missing_error(
                f"Required configuration missing: {', '.join(missing)}. "
                "Set these environment variables or add them to your .env file."
            )

    @property
    def dashboard_base_url(self) -> str:
        """Web app base URL derived from the API host."""
        host = self.api_hostname.split("://", 1)[-1].split("/", 1)[0]
        if host.startswith("api."):
            host = host[len("api."):]
        return f"https://app.{host}"


settings = Settings()

"""Settings management for golemio-mcp with environment variable override support."""

import json
import logging
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

TOKEN_ENV_VAR = "GOLEMIO_API_TOKEN"
BASE_URL_ENV_VAR = "GOLEMIO_BASE_URL"
SETTINGS_PATH_ENV_VAR = "GOLEMIO_MCP_SETTINGS"

DEFAULT_BASE_URL = "https://api.golemio.cz/v2"


class GolemioSettings(BaseModel):
    """Main settings configuration."""

    version: str = Field(default="1.0.0")
    api_token: Optional[str] = Field(
        default=None,
        description="Golemio API access token. The GOLEMIO_API_TOKEN environment variable takes priority.",
    )
    base_url: str = Field(default=DEFAULT_BASE_URL)
    request_timeout_seconds: float = Field(default=30.0, gt=0)
    tool_timeout_seconds: float = Field(default=60.0, gt=0)
    cache_ttl_hours: float = Field(default=24.0, gt=0)
    log_file: Optional[str] = Field(default=None, description="Optional path of a daily-rotated log file")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended with a slash."""
        return v.rstrip("/")


class SettingsManager:
    """Manages golemio-mcp settings with environment variable override support."""

    def __init__(self, settings_path: Optional[Path] = None):
        env_path = os.getenv(SETTINGS_PATH_ENV_VAR)
        self.settings_path = settings_path or (
            Path(env_path) if env_path else Path.home() / ".golemio-mcp" / "settings.json"
        )
        self._settings: Optional[GolemioSettings] = None
        # Values as read from the file, before env overrides
        self._file_token: Optional[str] = None
        self._file_base_url: str = DEFAULT_BASE_URL
        # Lock for thread-safe load-modify-save operations
        self._lock = threading.Lock()

    def load(self) -> GolemioSettings:
        """Load settings with environment variable overrides."""
        if self._settings is None:
            self._settings = self._load_from_file()
        settings = self._settings
        # Always (re)apply env overrides to handle toggling without restart
        self._apply_env_overrides(settings)
        return settings

    def reload(self) -> GolemioSettings:
        """Force reload settings from file."""
        self._settings = None
        return self.load()

    def _load_from_file(self) -> GolemioSettings:
        """Load settings from file or return defaults."""
        loaded = GolemioSettings()
        if self.settings_path.exists():
            try:
                with open(self.settings_path, encoding="utf-8") as f:
                    data = json.load(f)
                loaded = GolemioSettings(**data)
            except Exception as e:
                # If file is corrupted, use defaults
                logger.warning(f"Failed to load settings from {self.settings_path} ({e}); using defaults")
                loaded = GolemioSettings()
        self._file_token = loaded.api_token
        self._file_base_url = loaded.base_url
        return loaded

    def _apply_env_overrides(self, settings: GolemioSettings) -> None:
        """Apply environment variable overrides on top of the file values."""
        settings.api_token = os.getenv(TOKEN_ENV_VAR) or self._file_token
        env_base_url = os.getenv(BASE_URL_ENV_VAR)
        settings.base_url = env_base_url.rstrip("/") if env_base_url else self._file_base_url

    def resolve_api_token(self) -> Optional[str]:
        """Return the API token: environment variable first, settings file second."""
        token = self.load().api_token
        return token or None

    def save(self, settings: Optional[GolemioSettings] = None) -> None:
        """Save settings to file with atomic operations and secure permissions.

        Env-derived values are never persisted; the file keeps its own token
        and base URL.
        """
        current = self.load()
        if settings is None:
            settings = current

        self.settings_path.parent.mkdir(parents=True, exist_ok=True)

        # Atomic write pattern: write to temp file, then replace
        temp_fd, temp_path = tempfile.mkstemp(dir=self.settings_path.parent, prefix=".settings.", suffix=".tmp")

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                data = settings.model_dump()
                data["api_token"] = self._file_token
                data["base_url"] = self._file_base_url
                json.dump(data, f, indent=2)

            os.replace(temp_path, self.settings_path)

            # Set restrictive permissions (owner read/write only), the file may hold the token
            os.chmod(self.settings_path, stat.S_IRUSR | stat.S_IWUSR)  # 0o600

            # Clear cache to force reload on next access
            self._settings = None

        except Exception:
            Path(temp_path).unlink(missing_ok=True)
            raise

    def set_api_token(self, token: str) -> None:
        """Store the API token in the settings file."""
        with self._lock:
            settings = self.load()
            self._file_token = token
            self.save(settings)

    def unset_api_token(self) -> bool:
        """Remove the API token from the settings file.

        Returns:
            True if a token was removed, False if none was stored
        """
        with self._lock:
            settings = self.load()
            if self._file_token is None:
                return False
            self._file_token = None
            self.save(settings)
            return True

    @staticmethod
    def mask_value(value: Optional[str]) -> Optional[str]:
        """Mask a secret, keeping only the first 3 characters."""
        if not value:
            return value
        if len(value) <= 3:
            return "***"
        return value[:3] + "***"

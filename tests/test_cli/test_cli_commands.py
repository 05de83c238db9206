"""Tests for the golemio-mcp command line."""

from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from golemio_mcp.cli.main import cli
from golemio_mcp.core.settings import SettingsManager


@pytest.fixture
def runner() -> CliRunner:
    """Create Click CLI runner."""
    return CliRunner()


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch) -> Path:
    """Point SettingsManager at an isolated settings file."""
    path = tmp_path / ".golemio-mcp" / "settings.json"
    monkeypatch.setenv("GOLEMIO_MCP_SETTINGS", str(path))
    return path


class TestSettingsCommands:
    def test_set_token(self, runner: CliRunner, settings_path: Path) -> None:
        result = runner.invoke(cli, ["settings", "set-token", "abcdef123"])

        assert result.exit_code == 0
        assert "abc***" in result.output
        assert "abcdef123" not in result.output
        assert SettingsManager(settings_path=settings_path).resolve_api_token() == "abcdef123"

    def test_set_empty_token(self, runner: CliRunner, settings_path: Path) -> None:
        result = runner.invoke(cli, ["settings", "set-token", "  "])

        assert result.exit_code != 0
        assert not settings_path.exists()

    def test_show_masks_token(self, runner: CliRunner, settings_path: Path) -> None:
        SettingsManager(settings_path=settings_path).set_api_token("abcdef123")

        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0
        assert str(settings_path) in result.output
        assert '"api_token": "abc***"' in result.output
        assert "abcdef123" not in result.output

    def test_show_warns_about_missing_token(self, runner: CliRunner, settings_path: Path) -> None:
        result = runner.invoke(cli, ["settings", "show"])

        assert "No API token configured" in result.output

    def test_show_notes_env_override(self, runner: CliRunner, settings_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("GOLEMIO_API_TOKEN", "env-token-value")

        result = runner.invoke(cli, ["settings", "show"])

        assert "GOLEMIO_API_TOKEN environment variable is set" in result.output
        assert "env-token-value" not in result.output

    def test_unset_token(self, runner: CliRunner, settings_path: Path) -> None:
        SettingsManager(settings_path=settings_path).set_api_token("abcdef123")

        first = runner.invoke(cli, ["settings", "unset-token"])
        second = runner.invoke(cli, ["settings", "unset-token"])

        assert "Removed API token" in first.output
        assert "No API token stored" in second.output


class TestServeCommand:
    def test_defaults(self, runner: CliRunner, settings_path: Path) -> None:
        with (
            patch("golemio_mcp.cli.main.run_server") as run_server,
            patch("golemio_mcp.cli.main.configure_logging") as configure_logging,
        ):
            result = runner.invoke(cli, ["serve"])

        assert result.exit_code == 0, result.output
        configure_logging.assert_called_once_with(False, None)
        args, kwargs = run_server.call_args
        assert args == ("stdio",)
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 5093
        assert kwargs["path"] == "/api/mcp"

    def test_http_transport_options(self, runner: CliRunner, settings_path: Path, tmp_path: Path) -> None:
        log_file = str(tmp_path / "server.log")
        with (
            patch("golemio_mcp.cli.main.run_server") as run_server,
            patch("golemio_mcp.cli.main.configure_logging") as configure_logging,
        ):
            result = runner.invoke(
                cli,
                ["serve", "--transport", "streamable-http", "--host", "0.0.0.0", "--port", "8080", "--debug",
                 "--log-file", log_file],
            )

        assert result.exit_code == 0, result.output
        configure_logging.assert_called_once_with(True, log_file)
        args, kwargs = run_server.call_args
        assert args == ("streamable-http",)
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080

    def test_rejects_unknown_transport(self, runner: CliRunner, settings_path: Path) -> None:
        result = runner.invoke(cli, ["serve", "--transport", "sse"])

        assert result.exit_code == 2

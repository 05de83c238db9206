"""Command line entry point for golemio-mcp."""

from typing import Optional

import click

from golemio_mcp.core.settings import SettingsManager
from golemio_mcp.mcp_server.main import configure_logging, run_server
from golemio_mcp.mcp_server.server import DEFAULT_HOST, DEFAULT_PATH, DEFAULT_PORT

from .commands.settings import settings


@click.group()
@click.version_option(package_name="golemio-mcp")
def cli() -> None:
    """MCP server for the Prague Golemio open-data API."""
    pass


@cli.command()
@click.option(
    "--transport",
    type=click.Choice(["stdio", "streamable-http"]),
    default="stdio",
    show_default=True,
    help="MCP transport to serve on.",
)
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Bind address for streamable HTTP.")
@click.option("--port", type=int, default=DEFAULT_PORT, show_default=True, help="Port for streamable HTTP.")
@click.option("--path", default=DEFAULT_PATH, show_default=True, help="Endpoint path for streamable HTTP.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also log to this file, rotated daily.")
def serve(transport: str, host: str, port: int, path: str, debug: bool, log_file: Optional[str]) -> None:
    """Start the MCP server.

    Examples:
        # Serve over stdio for a local MCP client
        golemio-mcp serve

        # Serve over HTTP at http://0.0.0.0:5093/api/mcp
        golemio-mcp serve --transport streamable-http --host 0.0.0.0
    """
    manager = SettingsManager()
    configure_logging(debug, log_file or manager.load().log_file)
    run_server(transport, host=host, port=port, path=path, settings_manager=manager)  # type: ignore[arg-type]


cli.add_command(settings)


def main() -> None:
    cli()

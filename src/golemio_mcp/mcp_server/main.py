"""Main entry point for the golemio-mcp server.

This module provides the run_server function that starts the MCP server
over stdio or streamable HTTP. It handles signal handlers for graceful
shutdown and ensures proper logging configuration.
"""

import logging
import signal
import sys
from pathlib import Path
from types import FrameType
from typing import Literal, Optional

import uvicorn

from golemio_mcp.core.settings import SettingsManager

from .context import build_context
from .server import DEFAULT_HOST, DEFAULT_PATH, DEFAULT_PORT, SERVER_NAME, create_http_app, create_server
from .utils.log_files import DailySizeRotatingFileHandler

# Configure logging to stderr (stdout is reserved for protocol messages)
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_BACKUP_COUNT = 30
LOG_MAX_BYTES = 10 * 1024 * 1024

Transport = Literal["stdio", "streamable-http"]


def run_server(
    transport: Transport = "stdio",
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    path: str = DEFAULT_PATH,
    settings_manager: Optional[SettingsManager] = None,
) -> None:
    """Run the golemio-mcp server.

    This function:
    1. Builds the shared context (HTTP client, lookup cache, services)
    2. Creates the server and registers all tools
    3. Sets up signal handlers for graceful shutdown
    4. Runs the server with the requested transport

    Note: This function is synchronous because FastMCP manages
    its own event loop.
    """
    context = build_context(settings_manager)
    mcp = create_server(context, host=host, port=port, path=path)

    # Set up signal handlers for graceful shutdown
    def handle_shutdown(signum: int, frame: Optional[FrameType]) -> None:
        """Handle shutdown signals gracefully."""
        logger.info(f"Received signal {signum}, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    if transport == "streamable-http":
        logger.info(f"Starting {SERVER_NAME} with streamable HTTP transport on http://{host}:{port}{path}")
    else:
        logger.info(f"Starting {SERVER_NAME} with stdio transport...")

    try:
        # Blocking call that runs until the server shuts down
        if transport == "streamable-http":
            # Served through uvicorn so the app can carry the CORS policy
            uvicorn.run(create_http_app(mcp), host=host, port=port, log_config=None)
        else:
            mcp.run(transport)
    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"MCP server error: {e}", exc_info=True)
        sys.exit(1)
    finally:
        context.close()
        logger.info("MCP server shutdown complete")


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging for the MCP server.

    Console logs go to stderr to keep stdout clean for protocol messages.
    With ``log_file`` set, records are also written to a file rotated at
    midnight and at 10 MB, keeping the last 30 files.

    Args:
        debug: Enable debug logging if True
        log_file: Optional path of the rotating log file
    """
    level = logging.DEBUG if debug else logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            DailySizeRotatingFileHandler(str(log_path), max_bytes=LOG_MAX_BYTES, backup_count=LOG_BACKUP_COUNT)
        )

    # force=True so a second call (e.g. in tests) replaces earlier handlers
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT, handlers=handlers, force=True)

    # Reduce noise from some verbose libraries
    if not debug:
        for name in ("asyncio", "urllib3", "httpx", "mcp"):
            logging.getLogger(name).setLevel(logging.WARNING)


"""FastMCP server factory for golemio-mcp.

The server is built around an ``AppContext`` created once per process, so
every session shares the same lookup cache and HTTP client.
"""

import logging

from mcp.server.fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware

from .context import AppContext
from .tools import air_quality_tools, bicycle_counter_tools, city_district_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "golemio-mcp"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5093
DEFAULT_PATH = "/api/mcp"

INSTRUCTIONS = """Read-only access to Prague open data from the Golemio API.

Tools:
• get_air_quality_stations → current measurements per station, with pollutant and index descriptions
• get_air_quality_stations_history → past measurements (default: last 24 hours)
• get_bicycle_counters → counter locations and their directions
• get_bicycle_counter_detections → counts for ONE direction id from get_bicycle_counters
• get_city_districts → district names, slugs and center coordinates

Every tool returns {"success": true, "data": ...} or {"success": false, "errorMessage": "..."}.
District slugs from get_city_districts are valid values for the districts filter."""


def create_server(
    context: AppContext,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    path: str = DEFAULT_PATH,
) -> FastMCP:
    """Create the FastMCP server and register every tool against ``context``.

    ``host``, ``port`` and ``path`` only matter for the streamable HTTP
    transport.
    """
    mcp = FastMCP(
        SERVER_NAME,
        instructions=INSTRUCTIONS,
        host=host,
        port=port,
        streamable_http_path=path,
    )

    air_quality_tools.register(mcp, context.air_quality, context.tool_timeout)
    bicycle_counter_tools.register(mcp, context.bicycle_counters, context.tool_timeout)
    city_district_tools.register(mcp, context.city_districts, context.tool_timeout)

    logger.debug(f"Created {SERVER_NAME} server")
    return mcp


def create_http_app(mcp: FastMCP) -> Starlette:
    """Return the streamable HTTP app with a CORS policy that allows any origin."""
    app = mcp.streamable_http_app()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Mcp-Session-Id"],
    )
    return app


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PATH",
    "DEFAULT_PORT",
    "INSTRUCTIONS",
    "SERVER_NAME",
    "create_http_app",
    "create_server",
]

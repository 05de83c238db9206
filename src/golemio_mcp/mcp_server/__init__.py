"""golemio-mcp MCP server.

Exposes Prague open data from the Golemio API as read-only MCP tools.
"""

from .main import run_server
from .server import create_server

__all__ = ["create_server", "run_server"]

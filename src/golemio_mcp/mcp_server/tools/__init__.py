"""MCP tools for golemio-mcp.

Each module exposes ``register(mcp, service, timeout)``; the server factory
calls them with the shared services.
"""

from . import air_quality_tools, bicycle_counter_tools, city_district_tools

__all__ = ["air_quality_tools", "bicycle_counter_tools", "city_district_tools"]

"""City district tools for the MCP server."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from ..services.city_district_service import CityDistrictService
from ..utils.execution import run_operation

logger = logging.getLogger(__name__)


def register(mcp: FastMCP, service: CityDistrictService, timeout: float) -> None:
    """Register the city district tool on ``mcp``."""

    @mcp.tool()
    async def get_city_districts() -> dict[str, Any]:
        """Get all Prague city districts from the Golemio API.

        Each district comes with its id, name and slug, and a single center
        coordinate ``[lon, lat]`` instead of the full polygon. The slugs are
        the values accepted by the ``districts`` filter of
        get_air_quality_stations. The result is cached for 24 hours.
        """
        return await run_operation("get_city_districts", service.get_districts, timeout)

    logger.debug("Registered city district tools")

"""Air quality tools for the MCP server.

Current station snapshots and station history, both enriched with the
pollutant component and air quality index lookup tables.
"""

import logging
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..services.air_quality_service import AirQualityService
from ..utils.execution import run_operation

logger = logging.getLogger(__name__)


def register(mcp: FastMCP, service: AirQualityService, timeout: float) -> None:
    """Register the air quality tools on ``mcp``."""

    @mcp.tool()
    async def get_air_quality_stations(
        latlng: Annotated[
            Optional[str],
            Field(
                description=(
                    "Sorting by location (latitude and longitude separated by comma, latitude first, "
                    "e.g. '50.124935,14.457204'). Results are sorted by distance from this point."
                )
            ),
        ] = None,
        range: Annotated[  # noqa: A002
            Optional[float],
            Field(
                description=(
                    "Filter by distance from latlng in meters. Depends on the latlng parameter. "
                    "For example 5000 for a 5 km radius."
                )
            ),
        ] = None,
        districts: Annotated[
            Optional[str],
            Field(
                description="Filter by Prague city districts (slug) separated by comma, e.g. 'praha-1' or 'praha-4,praha-6'."
            ),
        ] = None,
        limit: Annotated[
            int, Field(description="Limits number of retrieved items. The maximum is 10000 (default 10).")
        ] = 10,
        offset: Annotated[int, Field(description="Number of the first items that are skipped (for pagination).")] = 0,
        updated_since: Annotated[
            Optional[str],
            Field(
                description=(
                    "Filters out results with updated_at older than this datetime. "
                    "ISO 8601 format (e.g. '2019-05-18T07:38:37.000Z'), UTC."
                )
            ),
        ] = None,
    ) -> dict[str, Any]:
        """Get current air quality station data from Prague (Golemio API).

        Returns station locations and current measurements. Every measurement
        carries its air quality index with descriptions and, for each
        pollutant, the component information: type, unit and descriptions in
        Czech and English.

        Examples:
            # Stations closest to a point, within 5 km
            latlng="50.124935,14.457204", range=5000

            # Stations in two districts
            districts="praha-4,praha-6"
        """
        return await run_operation(
            "get_air_quality_stations",
            service.get_stations,
            timeout,
            latlng=latlng,
            range=range,
            districts=districts,
            limit=limit,
            offset=offset,
            updated_since=updated_since,
        )

    @mcp.tool()
    async def get_air_quality_stations_history(
        limit: Annotated[
            int, Field(description="Limits number of retrieved items. The maximum is 10000 (default 10).")
        ] = 10,
        offset: Annotated[int, Field(description="Number of the first items that are skipped (for pagination).")] = 0,
        date_from: Annotated[
            Optional[str],
            Field(
                description=(
                    "Limits data measured from this datetime. ISO 8601 format (e.g. '2019-05-16T04:27:58.000Z'), "
                    "UTC. Defaults to 24 hours ago."
                )
            ),
        ] = None,
        date_to: Annotated[
            Optional[str],
            Field(
                description=(
                    "Limits data measured up until this datetime. ISO 8601 format (e.g. '2019-05-18T04:27:58.000Z'), "
                    "UTC. Defaults to the current time."
                )
            ),
        ] = None,
        sensor_id: Annotated[
            Optional[str],
            Field(description="Limits data to the station sensor with this ID (e.g. 'ACHOA')."),
        ] = None,
    ) -> dict[str, Any]:
        """Get historical air quality measurements from Prague (Golemio API).

        Returns history points enriched the same way as get_air_quality_stations.
        If no time range is given, the last 24 hours are returned.
        """
        return await run_operation(
            "get_air_quality_stations_history",
            service.get_history,
            timeout,
            limit=limit,
            offset=offset,
            date_from=date_from,
            date_to=date_to,
            sensor_id=sensor_id,
        )

    logger.debug("Registered air quality tools")

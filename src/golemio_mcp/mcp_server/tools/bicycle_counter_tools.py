"""Bicycle counter tools for the MCP server."""

import logging
from typing import Annotated, Any, Optional

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ..services.bicycle_counter_service import BicycleCounterService
from ..utils.execution import run_operation

logger = logging.getLogger(__name__)


def register(mcp: FastMCP, service: BicycleCounterService, timeout: float) -> None:
    """Register the bicycle counter tools on ``mcp``."""

    @mcp.tool()
    async def get_bicycle_counters(
        latlng: Annotated[
            Optional[str],
            Field(
                description=(
                    "Coordinates for location-based sorting and filtering (latitude,longitude, latitude first). "
                    "Example: '50.124935,14.457204'. Keep empty for all counters."
                )
            ),
        ] = None,
        range: Annotated[  # noqa: A002
            Optional[str],
            Field(
                description=(
                    "Distance in meters around latlng. Requires latlng. Example: '5000' for a 5 km radius. "
                    "Keep empty for all counters."
                )
            ),
        ] = None,
        limit: Annotated[
            Optional[str],
            Field(
                description=(
                    "Maximum number of results. Must be a positive integer, maximum 10000. Example: '10'. "
                    "Keep empty for all counters."
                )
            ),
        ] = None,
        offset: Annotated[
            Optional[str],
            Field(description="Number of results to skip for pagination. Must be a non-negative integer. Example: '0'"),
        ] = None,
    ) -> dict[str, Any]:
        """Get bicycle counter locations and data from Prague (Golemio API).

        Returns counter positions, names, routes and directions with their
        latest counts. Use a direction ``id`` from this result with
        get_bicycle_counter_detections.
        """
        return await run_operation(
            "get_bicycle_counters",
            service.get_counters,
            timeout,
            latlng=latlng,
            range=range,
            limit=limit,
            offset=offset,
        )

    @mcp.tool()
    async def get_bicycle_counter_detections(
        direction_id: Annotated[
            str,
            Field(
                description=(
                    "Single bicycle counter direction ID (e.g. 'camea-BC_ZA-BO'). It must be a direction ID, "
                    "not a counter ID; get them from get_bicycle_counters. For a whole counter, call this tool "
                    "once per direction."
                )
            ),
        ],
        date_from: Annotated[
            Optional[str],
            Field(
                description=(
                    "ISO 8601 datetime, limits data measured from this time "
                    "(e.g. '2020-03-13T10:54:00.000Z' or '2024-01-15'). Defaults to 24 hours ago."
                )
            ),
        ] = None,
        date_to: Annotated[
            Optional[str],
            Field(
                description=(
                    "ISO 8601 datetime, limits data measured up until this time "
                    "(e.g. '2020-03-15T13:05:00.000Z' or '2024-01-15'). Defaults to the current time."
                )
            ),
        ] = None,
    ) -> dict[str, Any]:
        """Get bicycle counter detections from Prague (Golemio API).

        Returns aggregated detection windows with bicycle counts, pedestrian
        counts where available and the measurement period. If no time range
        is given, the last 24 hours are used.
        """
        return await run_operation(
            "get_bicycle_counter_detections",
            service.get_detections,
            timeout,
            direction_id=direction_id,
            date_from=date_from,
            date_to=date_to,
        )

    logger.debug("Registered bicycle counter tools")

"""Reduce polygon geometries to a single representative coordinate.

The centre is the arithmetic mean of the outer ring's vertices, not the true
area centroid. Consumers already rely on these values, so the approximation
is kept as is.
"""

import logging
from numbers import Real
from typing import Any, Optional

logger = logging.getLogger(__name__)

Coordinate = list[float]


def _is_valid_point(point: Any) -> bool:
    if not isinstance(point, (list, tuple)) or len(point) < 2:
        return False
    return all(isinstance(value, Real) and not isinstance(value, bool) for value in point[:2])


def polygon_center(rings: Optional[list[Any]]) -> Coordinate:
    """Return ``[lon, lat]`` averaged over the first ring's vertices.

    Holes (rings after the first) are ignored. Vertices with fewer than two
    numeric values are skipped. With no usable vertex the result is
    ``[0.0, 0.0]`` and a warning is logged.
    """
    if not rings or not rings[0]:
        logger.warning("Invalid coordinates provided for center calculation")
        return [0.0, 0.0]

    sum_lon = 0.0
    sum_lat = 0.0
    point_count = 0
    for point in rings[0]:
        if _is_valid_point(point):
            sum_lon += float(point[0])
            sum_lat += float(point[1])
            point_count += 1

    if point_count == 0:
        logger.warning("No valid coordinate points found for center calculation")
        return [0.0, 0.0]

    center = [sum_lon / point_count, sum_lat / point_count]
    logger.debug(f"Calculated center coordinates {center} from {point_count} points")
    return center


def reduce_geometry(geometry_type: Optional[str], coordinates: Optional[list[Any]]) -> Coordinate:
    """Reduce a GeoJSON polygon geometry to its center point.

    ``MultiPolygon`` geometries use only their first polygon.
    """
    if geometry_type == "MultiPolygon":
        return polygon_center(coordinates[0] if coordinates else None)
    return polygon_center(coordinates)

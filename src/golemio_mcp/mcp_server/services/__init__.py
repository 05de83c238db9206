"""Service layer for the MCP server.

Services validate parameters, call the Golemio API and reshape the payloads.
Every public method returns a ``Result``; none of them raise.
"""

from .air_quality_service import AirQualityService
from .base_service import BaseService, operation_boundary
from .bicycle_counter_service import BicycleCounterService
from .city_district_service import CityDistrictService

__all__ = [
    "AirQualityService",
    "BaseService",
    "BicycleCounterService",
    "CityDistrictService",
    "operation_boundary",
]

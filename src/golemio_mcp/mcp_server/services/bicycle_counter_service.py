"""Bicycle counter service: counter locations and per-direction detections."""

import logging
from typing import Optional

from golemio_mcp.core.enrichment import clean_counter_collection
from golemio_mcp.core.models import CleanCounterFeatureCollection, CounterDetection, CounterFeatureCollection
from golemio_mcp.core.params import CounterQuery, DetectionQuery
from golemio_mcp.core.result import Result, Success
from golemio_mcp.core.upstream import BICYCLE_COUNTERS_PATH, BICYCLE_DETECTIONS_PATH

from .base_service import BaseService, operation_boundary, parse_payload

logger = logging.getLogger(__name__)


class BicycleCounterService(BaseService):
    """Fetch bicycle counters and their detection windows."""

    @operation_boundary("bicycle counters")
    def get_counters(
        self,
        latlng: Optional[str] = None,
        range: Optional[str] = None,  # noqa: A002
        limit: Optional[str] = None,
        offset: Optional[str] = None,
    ) -> Result[CleanCounterFeatureCollection]:
        """Return counter locations with their directions and latest counts.

        Numeric parameters arrive as strings and are validated here; omitted
        values are left for the API to default.
        """
        query = CounterQuery.build(latlng=latlng, range=range, limit=limit, offset=offset)
        payload = self.client.get_json(BICYCLE_COUNTERS_PATH, query.query_params())
        collection: CounterFeatureCollection = parse_payload(CounterFeatureCollection, payload, "bicycle counters")

        cleaned = clean_counter_collection(collection)
        logger.info(f"Fetched {len(cleaned.features)} bicycle counters")
        return Success(cleaned)

    @operation_boundary("bicycle counter detections")
    def get_detections(
        self,
        direction_id: Optional[str],
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> Result[list[CounterDetection]]:
        """Return aggregated detections for one counter direction."""
        query = DetectionQuery.build(direction_id=direction_id, date_from=date_from, date_to=date_to)
        payload = self.client.get_json(BICYCLE_DETECTIONS_PATH, query.query_params())
        detections: list[CounterDetection] = parse_payload(
            list[CounterDetection], payload, "bicycle counter detections"
        )
        logger.info(f"Fetched {len(detections)} detections for direction {query.direction_id}")
        return Success(detections)

"""Air quality service: current station data, station history and lookup tables."""

import logging
from typing import Any, Optional, Union

from golemio_mcp.core.enrichment import enrich_history, enrich_station_collection
from golemio_mcp.core.models import (
    CleanStationFeatureCollection,
    ComponentType,
    EnrichedStationHistory,
    IndexType,
    StationFeatureCollection,
    StationHistory,
)
from golemio_mcp.core.params import DEFAULT_LIMIT, HistoryQuery, StationQuery
from golemio_mcp.core.result import Failure, Result, Success
from golemio_mcp.core.upstream import (
    AIR_QUALITY_HISTORY_PATH,
    AIR_QUALITY_STATIONS_PATH,
    COMPONENT_TYPES_PATH,
    INDEX_TYPES_PATH,
)

from .base_service import BaseService, operation_boundary, parse_payload

logger = logging.getLogger(__name__)

COMPONENT_TYPES_CACHE_KEY = "air_quality_component_types"
INDEX_TYPES_CACHE_KEY = "air_quality_index_types"

LookupTables = tuple[tuple[ComponentType, ...], tuple[IndexType, ...]]


class AirQualityService(BaseService):
    """Fetch air quality data and enrich it with the cached lookup tables."""

    @operation_boundary("air quality stations")
    def get_stations(
        self,
        latlng: Optional[str] = None,
        range: Optional[float] = None,  # noqa: A002
        districts: Union[str, list[str], None] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        updated_since: Optional[str] = None,
    ) -> Result[CleanStationFeatureCollection]:
        """Return current station snapshots with enriched measurements."""
        query = StationQuery.build(
            latlng=latlng,
            range=range,
            districts=districts,
            limit=limit,
            offset=offset,
            updated_since=updated_since,
        )
        payload = self.client.get_json(AIR_QUALITY_STATIONS_PATH, query.query_params())
        collection: StationFeatureCollection = parse_payload(
            StationFeatureCollection, payload, "air quality stations"
        )

        lookups = self._lookup_tables()
        if isinstance(lookups, Failure):
            return lookups
        component_types, index_types = lookups.data

        enriched = enrich_station_collection(collection, component_types, index_types)
        logger.info(f"Fetched {len(enriched.features)} air quality stations")
        return Success(enriched)

    @operation_boundary("air quality stations history")
    def get_history(
        self,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        sensor_id: Optional[str] = None,
    ) -> Result[list[EnrichedStationHistory]]:
        """Return enriched history points, defaulting to the last 24 hours."""
        query = HistoryQuery.build(
            limit=limit,
            offset=offset,
            date_from=date_from,
            date_to=date_to,
            sensor_id=sensor_id,
        )
        payload = self.client.get_json(AIR_QUALITY_HISTORY_PATH, query.query_params())
        records: list[StationHistory] = parse_payload(
            list[StationHistory], payload, "air quality stations history"
        )

        lookups = self._lookup_tables()
        if isinstance(lookups, Failure):
            return lookups
        component_types, index_types = lookups.data

        enriched = enrich_history(records, component_types, index_types)
        logger.info(f"Fetched {len(enriched)} air quality history records")
        return Success(enriched)

    def get_component_types(self) -> Result[tuple[ComponentType, ...]]:
        """Return the pollutant component table, from cache when fresh."""
        return self.cache.get_or_fetch(COMPONENT_TYPES_CACHE_KEY, self._fetch_component_types, self.cache_ttl)

    def get_index_types(self) -> Result[tuple[IndexType, ...]]:
        """Return the air quality index table, from cache when fresh."""
        return self.cache.get_or_fetch(INDEX_TYPES_CACHE_KEY, self._fetch_index_types, self.cache_ttl)

    @operation_boundary("component types")
    def _fetch_component_types(self) -> Result[tuple[ComponentType, ...]]:
        payload = self.client.get_json(COMPONENT_TYPES_PATH)
        entries: list[ComponentType] = parse_payload(list[ComponentType], payload, "component types")
        logger.info(f"Loaded {len(entries)} air quality component types")
        return Success(tuple(entries))

    @operation_boundary("index types")
    def _fetch_index_types(self) -> Result[tuple[IndexType, ...]]:
        payload = self.client.get_json(INDEX_TYPES_PATH)
        entries: list[IndexType] = parse_payload(list[IndexType], payload, "index types")
        logger.info(f"Loaded {len(entries)} air quality index types")
        return Success(tuple(entries))

    def _lookup_tables(self) -> Result[Any]:
        # Both tables are required; the first failure is returned unchanged
        component_types = self.get_component_types()
        if isinstance(component_types, Failure):
            return component_types
        index_types = self.get_index_types()
        if isinstance(index_types, Failure):
            return index_types
        tables: LookupTables = (component_types.data, index_types.data)
        return Success(tables)

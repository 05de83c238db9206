"""City district service."""

import logging
from typing import Optional

from golemio_mcp.core.enrichment import clean_district_collection
from golemio_mcp.core.lookup_cache import district_cache_key
from golemio_mcp.core.models import CleanDistrictFeatureCollection, DistrictFeatureCollection
from golemio_mcp.core.params import DISTRICT_LIMIT, DistrictQuery
from golemio_mcp.core.result import Result, Success
from golemio_mcp.core.upstream import CITY_DISTRICTS_PATH

from .base_service import BaseService, operation_boundary, parse_payload

logger = logging.getLogger(__name__)


class CityDistrictService(BaseService):
    """Fetch Prague city districts with each polygon reduced to its center."""

    def get_districts(
        self,
        districts: Optional[list[str]] = None,
        limit: int = DISTRICT_LIMIT,
        offset: int = 0,
    ) -> Result[CleanDistrictFeatureCollection]:
        """Return the cleaned district collection, cached per query."""
        key = district_cache_key(districts, limit, offset)
        return self.cache.get_or_fetch(
            key, lambda: self._fetch_districts(districts, limit, offset), self.cache_ttl
        )

    @operation_boundary("city districts")
    def _fetch_districts(
        self, districts: Optional[list[str]], limit: int, offset: int
    ) -> Result[CleanDistrictFeatureCollection]:
        query = DistrictQuery.build(districts=districts, limit=limit, offset=offset)
        payload = self.client.get_json(CITY_DISTRICTS_PATH, query.query_params())
        collection: DistrictFeatureCollection = parse_payload(DistrictFeatureCollection, payload, "city districts")

        cleaned = clean_district_collection(collection)
        logger.info(f"Fetched {len(cleaned.features)} city districts")
        return Success(cleaned)

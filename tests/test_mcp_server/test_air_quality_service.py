"""Tests for the air quality service."""

from datetime import timedelta

import pytest

from golemio_mcp.core.exceptions import UpstreamError
from golemio_mcp.core.params import parse_iso_datetime
from golemio_mcp.core.result import Failure, Success
from golemio_mcp.core.upstream import (
    AIR_QUALITY_HISTORY_PATH,
    AIR_QUALITY_STATIONS_PATH,
    COMPONENT_TYPES_PATH,
    INDEX_TYPES_PATH,
)
from golemio_mcp.mcp_server.services.air_quality_service import (
    COMPONENT_TYPES_CACHE_KEY,
    INDEX_TYPES_CACHE_KEY,
    AirQualityService,
)


@pytest.fixture
def service(fake_client, cache) -> AirQualityService:
    return AirQualityService(fake_client, cache)


class TestGetStations:
    def test_returns_enriched_collection(self, service: AirQualityService) -> None:
        result = service.get_stations()

        assert isinstance(result, Success)
        features = result.data.features
        assert [f.properties.id for f in features] == ["ACHOA", "ALEGA"]
        assert features[0].properties.measurement.index_info.index_code == "1A"
        assert features[1].properties.measurement.index_info is None

    def test_forwards_query_parameters(self, service: AirQualityService, fake_client) -> None:
        service.get_stations(latlng="50.1,14.4", range=1000, districts="praha-8", limit=5)

        assert fake_client.calls_to(AIR_QUALITY_STATIONS_PATH) == [
            {"latlng": "50.1,14.4", "range": "1000", "districts": "praha-8", "limit": "5", "offset": "0"}
        ]

    def test_invalid_limit_makes_no_request(self, service: AirQualityService, fake_client) -> None:
        result = service.get_stations(limit=-1)

        assert isinstance(result, Failure)
        assert "Invalid limit value: -1" in result.error_message
        assert fake_client.calls == []

    def test_upstream_error_message_is_returned(self, service: AirQualityService, fake_client) -> None:
        fake_client.responses[AIR_QUALITY_STATIONS_PATH] = UpstreamError(
            "API request failed: 401 - Unauthorized", status_code=401, reason="Unauthorized"
        )

        assert service.get_stations() == Failure("API request failed: 401 - Unauthorized")

    def test_unexpected_payload_is_deserialization_failure(self, service: AirQualityService, fake_client) -> None:
        fake_client.responses[AIR_QUALITY_STATIONS_PATH] = {"features": "nope"}

        result = service.get_stations()

        assert isinstance(result, Failure)
        assert result.error_message.startswith("Failed to deserialize air quality stations response")

    def test_lookup_failure_is_returned_verbatim(self, service: AirQualityService, fake_client) -> None:
        fake_client.responses[INDEX_TYPES_PATH] = UpstreamError("API request failed: 503 - Service Unavailable")

        assert service.get_stations() == Failure("API request failed: 503 - Service Unavailable")

    def test_unexpected_exception_becomes_failure(self, service: AirQualityService, fake_client) -> None:
        fake_client.responses[AIR_QUALITY_STATIONS_PATH] = RuntimeError("socket exploded")

        result = service.get_stations()

        assert result == Failure("Error occurred while fetching air quality stations: socket exploded")


class TestLookupTables:
    def test_lookup_tables_are_cached(self, service: AirQualityService, fake_client, cache) -> None:
        service.get_stations()
        service.get_history()

        assert len(fake_client.calls_to(COMPONENT_TYPES_PATH)) == 1
        assert len(fake_client.calls_to(INDEX_TYPES_PATH)) == 1
        assert COMPONENT_TYPES_CACHE_KEY in cache
        assert INDEX_TYPES_CACHE_KEY in cache

    def test_lookup_tables_refresh_after_ttl(self, service: AirQualityService, fake_client, clock) -> None:
        service.get_component_types()
        clock.advance(timedelta(hours=24).total_seconds())
        service.get_component_types()

        assert len(fake_client.calls_to(COMPONENT_TYPES_PATH)) == 2

    def test_failed_lookup_is_retried(self, service: AirQualityService, fake_client) -> None:
        original = fake_client.responses[COMPONENT_TYPES_PATH]
        fake_client.responses[COMPONENT_TYPES_PATH] = UpstreamError("API request failed: 500 - Internal Server Error")
        assert isinstance(service.get_component_types(), Failure)

        fake_client.responses[COMPONENT_TYPES_PATH] = original
        result = service.get_component_types()

        assert isinstance(result, Success)
        assert [entry.component_code for entry in result.data] == ["PM10", "NO2"]

    def test_bad_lookup_payload(self, service: AirQualityService, fake_client) -> None:
        fake_client.responses[INDEX_TYPES_PATH] = {"not": "a list"}

        result = service.get_index_types()

        assert isinstance(result, Failure)
        assert result.error_message.startswith("Failed to deserialize index types response")


class TestGetHistory:
    def test_returns_enriched_records_in_order(self, service: AirQualityService) -> None:
        result = service.get_history(sensor_id="ACHOA")

        assert isinstance(result, Success)
        assert [r.measurement.components[0].type for r in result.data] == ["PM10", "NO2"]
        assert result.data[1].measurement.components[0].component_info.description_en == "Nitrogen dioxide"

    def test_default_window(self, service: AirQualityService, fake_client) -> None:
        service.get_history()

        params = fake_client.calls_to(AIR_QUALITY_HISTORY_PATH)[0]
        window = parse_iso_datetime(params["to"], "to") - parse_iso_datetime(params["from"], "from")
        assert abs(window - timedelta(hours=24)) < timedelta(seconds=5)

    def test_invalid_date_makes_no_request(self, service: AirQualityService, fake_client) -> None:
        result = service.get_history(date_from="last tuesday")

        assert isinstance(result, Failure)
        assert "Invalid date_from parameter format" in result.error_message
        assert fake_client.calls == []

"""Tests for the enrichment and cleaning transforms."""

from sample_payloads import COMPONENT_TYPES, COUNTERS, DISTRICTS, HISTORY, INDEX_TYPES, STATIONS

from golemio_mcp.core.enrichment import (
    build_lookup,
    clean_counter_collection,
    clean_district_collection,
    enrich_history,
    enrich_station_collection,
)
from golemio_mcp.core.models import (
    ComponentType,
    CounterFeatureCollection,
    DistrictFeatureCollection,
    IndexType,
    StationFeatureCollection,
    StationHistory,
)


def component_types() -> list[ComponentType]:
    return [ComponentType(**entry) for entry in COMPONENT_TYPES]


def index_types() -> list[IndexType]:
    return [IndexType(**entry) for entry in INDEX_TYPES]


class TestBuildLookup:
    def test_last_duplicate_wins(self) -> None:
        entries = [ComponentType(component_code="PM10", unit="a"), ComponentType(component_code="PM10", unit="b")]

        lookup = build_lookup(entries, lambda entry: entry.component_code)

        assert lookup["PM10"].unit == "b"


class TestEnrichStationCollection:
    def test_known_codes_get_info(self) -> None:
        collection = StationFeatureCollection.model_validate(STATIONS)

        enriched = enrich_station_collection(collection, component_types(), index_types())

        measurement = enriched.features[0].properties.measurement
        assert measurement.aq_hourly_index == "1A"
        assert measurement.index_info is not None
        assert measurement.index_info.description_en == "Very good to good"
        assert [c.component_info.component_code for c in measurement.components] == ["PM10", "NO2"]

    def test_unknown_codes_are_kept_without_info(self) -> None:
        collection = StationFeatureCollection.model_validate(STATIONS)

        enriched = enrich_station_collection(collection, component_types(), index_types())

        measurement = enriched.features[1].properties.measurement
        assert measurement.aq_hourly_index == "9Z"
        assert measurement.index_info is None
        assert len(measurement.components) == 1
        assert measurement.components[0].type == "O3"
        assert measurement.components[0].component_info is None

    def test_empty_lookup_tables_keep_every_record(self) -> None:
        collection = StationFeatureCollection.model_validate(STATIONS)

        enriched = enrich_station_collection(collection, [], [])

        assert len(enriched.features) == len(STATIONS["features"])
        for feature in enriched.features:
            assert feature.properties.measurement.index_info is None

    def test_type_fields_are_dropped(self) -> None:
        collection = StationFeatureCollection.model_validate(STATIONS)

        dumped = enrich_station_collection(collection, component_types(), index_types()).model_dump(by_alias=True)

        assert "type" not in dumped
        feature = dumped["features"][0]
        assert "type" not in feature
        assert "type" not in feature["geometry"]
        assert feature["geometry"]["coordinates"] == [14.4632, 50.1067]
        assert feature["properties"]["measurement"]["AQ_hourly_index"] == "1A"
        assert feature["properties"]["measurement"]["components"][0]["component_info"]["unit"] == "µg/m³"


class TestEnrichHistory:
    def test_order_and_length_are_preserved(self) -> None:
        records = [StationHistory.model_validate(record) for record in HISTORY]
        records.append(StationHistory(id="LAST"))

        enriched = enrich_history(records, component_types(), index_types())

        assert [record.id for record in enriched] == ["ACHOA", "ACHOA", "LAST"]
        assert [record.updated_at for record in enriched] == [record.updated_at for record in records]
        assert enriched[0].measurement.components[0].component_info.component_code == "PM10"
        assert enriched[1].measurement.components[0].component_info.component_code == "NO2"
        assert enriched[2].measurement.components == []

    def test_empty_input(self) -> None:
        assert enrich_history([], component_types(), index_types()) == []


class TestCleanCollections:
    def test_counter_properties_pass_through(self) -> None:
        collection = CounterFeatureCollection.model_validate(COUNTERS)

        dumped = clean_counter_collection(collection).model_dump(mode="json")

        feature = dumped["features"][0]
        assert "type" not in feature
        assert feature["geometry"] == {"coordinates": [14.4133, 50.0464]}
        assert [d["id"] for d in feature["properties"]["directions"]] == ["camea-BC_ZA-BO", "camea-BC_ZA-VY"]

    def test_districts_reduced_to_center(self) -> None:
        collection = DistrictFeatureCollection.model_validate(DISTRICTS)

        cleaned = clean_district_collection(collection)

        assert [f.geometry.coordinates for f in cleaned.features] == [[1.0, 1.0], [11.0, 11.0]]
        assert cleaned.features[0].properties.slug == "praha-1"
        assert "type" not in cleaned.model_dump()["features"][0]["properties"]

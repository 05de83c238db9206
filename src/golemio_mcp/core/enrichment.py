"""Turn raw Golemio payloads into the clean shapes returned by the tools.

Air quality records are joined against the component and index lookup
tables. The join is a left join: a code with no matching lookup entry keeps
its record and gets ``None`` as info. Every transform here is 1:1, output
order and length always match the input.
"""

from collections.abc import Iterable, Sequence
from typing import Callable, TypeVar

from .geometry import reduce_geometry
from .models import (
    CleanCounterFeature,
    CleanCounterFeatureCollection,
    CleanDistrictFeature,
    CleanDistrictFeatureCollection,
    CleanPointGeometry,
    CleanStationFeature,
    CleanStationFeatureCollection,
    ComponentType,
    CounterFeatureCollection,
    DistrictFeatureCollection,
    EnrichedComponent,
    EnrichedMeasurement,
    EnrichedStationHistory,
    EnrichedStationProperties,
    IndexType,
    Measurement,
    StationFeatureCollection,
    StationHistory,
)

E = TypeVar("E")


def build_lookup(entries: Iterable[E], key: Callable[[E], str]) -> dict[str, E]:
    """Index lookup entries by code. A duplicated code keeps the last entry."""
    return {key(entry): entry for entry in entries}


def component_lookup(component_types: Iterable[ComponentType]) -> dict[str, ComponentType]:
    return build_lookup(component_types, lambda entry: entry.component_code)


def index_lookup(index_types: Iterable[IndexType]) -> dict[str, IndexType]:
    return build_lookup(index_types, lambda entry: entry.index_code)


def enrich_measurement(
    measurement: Measurement,
    components_by_code: dict[str, ComponentType],
    indexes_by_code: dict[str, IndexType],
) -> EnrichedMeasurement:
    """Inline lookup info for the hourly index and every component."""
    return EnrichedMeasurement(
        aq_hourly_index=measurement.aq_hourly_index,
        index_info=indexes_by_code.get(measurement.aq_hourly_index),
        components=[
            EnrichedComponent(
                type=component.type,
                component_info=components_by_code.get(component.type),
                averaged_time=component.averaged_time,
            )
            for component in measurement.components
        ],
    )


def enrich_station_collection(
    collection: StationFeatureCollection,
    component_types: Sequence[ComponentType],
    index_types: Sequence[IndexType],
) -> CleanStationFeatureCollection:
    """Drop GeoJSON ``type`` fields and enrich every station's measurement."""
    components_by_code = component_lookup(component_types)
    indexes_by_code = index_lookup(index_types)

    return CleanStationFeatureCollection(
        features=[
            CleanStationFeature(
                geometry=CleanPointGeometry(coordinates=feature.geometry.coordinates),
                properties=EnrichedStationProperties(
                    id=feature.properties.id,
                    name=feature.properties.name,
                    district=feature.properties.district,
                    updated_at=feature.properties.updated_at,
                    measurement=enrich_measurement(
                        feature.properties.measurement, components_by_code, indexes_by_code
                    ),
                ),
            )
            for feature in collection.features
        ]
    )


def enrich_history(
    records: Sequence[StationHistory],
    component_types: Sequence[ComponentType],
    index_types: Sequence[IndexType],
) -> list[EnrichedStationHistory]:
    """Enrich station history points, one output record per input record."""
    components_by_code = component_lookup(component_types)
    indexes_by_code = index_lookup(index_types)

    return [
        EnrichedStationHistory(
            id=record.id,
            updated_at=record.updated_at,
            measurement=enrich_measurement(record.measurement, components_by_code, indexes_by_code),
        )
        for record in records
    ]


def clean_counter_collection(collection: CounterFeatureCollection) -> CleanCounterFeatureCollection:
    """Drop GeoJSON ``type`` fields from bicycle counter features."""
    return CleanCounterFeatureCollection(
        features=[
            CleanCounterFeature(
                geometry=CleanPointGeometry(coordinates=feature.geometry.coordinates),
                properties=feature.properties,
            )
            for feature in collection.features
        ]
    )


def clean_district_collection(collection: DistrictFeatureCollection) -> CleanDistrictFeatureCollection:
    """Drop GeoJSON ``type`` fields and reduce each district polygon to its center."""
    return CleanDistrictFeatureCollection(
        features=[
            CleanDistrictFeature(
                geometry=CleanPointGeometry(
                    coordinates=reduce_geometry(feature.geometry.type, feature.geometry.coordinates)
                ),
                properties=feature.properties,
            )
            for feature in collection.features
        ]
    )

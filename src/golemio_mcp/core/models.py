"""Pydantic models for Golemio API payloads.

Raw models mirror the upstream JSON, including the GeoJSON ``type``
discriminators. Clean models are what the tools return: the ``type`` fields
are gone, district polygons are reduced to a point and air quality
measurements carry their lookup information inline.

Missing upstream fields fall back to empty defaults; unknown fields are
ignored.
"""

from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


# Lookup tables


class ComponentType(_UpstreamModel):
    """Pollutant component definition (e.g. PM10, NO2)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = 0
    component_code: str = ""
    unit: str = ""
    description_cs: str = ""
    description_en: str = ""


class IndexType(_UpstreamModel):
    """Air quality index band with its thresholds and display colors."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = 0
    index_code: str = ""
    limit_gte: Optional[float] = None
    limit_lt: Optional[float] = None
    color: str = ""
    color_text: str = ""
    description_cs: str = ""
    description_en: str = ""


# Air quality


class AveragedTime(_UpstreamModel):
    averaged_hours: Union[str, int, None] = ""
    value: Optional[float] = None


class Component(_UpstreamModel):
    type: str = ""
    averaged_time: AveragedTime = Field(default_factory=AveragedTime)


class Measurement(_UpstreamModel):
    aq_hourly_index: str = Field(default="", alias="AQ_hourly_index")
    components: list[Component] = Field(default_factory=list)


class PointGeometry(_UpstreamModel):
    type: str = ""
    coordinates: list[float] = Field(default_factory=list)


class CleanPointGeometry(_UpstreamModel):
    coordinates: list[float] = Field(default_factory=list)


class StationProperties(_UpstreamModel):
    id: str = ""
    name: str = ""
    district: Optional[str] = ""
    measurement: Measurement = Field(default_factory=Measurement)
    updated_at: Optional[datetime] = None


class StationFeature(_UpstreamModel):
    type: str = ""
    geometry: PointGeometry = Field(default_factory=PointGeometry)
    properties: StationProperties = Field(default_factory=StationProperties)


class StationFeatureCollection(_UpstreamModel):
    type: str = ""
    features: list[StationFeature] = Field(default_factory=list)


class StationHistory(_UpstreamModel):
    id: str = ""
    measurement: Measurement = Field(default_factory=Measurement)
    updated_at: Optional[datetime] = None


class EnrichedComponent(_UpstreamModel):
    type: str = ""
    component_info: Optional[ComponentType] = None
    averaged_time: AveragedTime = Field(default_factory=AveragedTime)


class EnrichedMeasurement(_UpstreamModel):
    aq_hourly_index: str = Field(default="", alias="AQ_hourly_index")
    index_info: Optional[IndexType] = None
    components: list[EnrichedComponent] = Field(default_factory=list)


class EnrichedStationProperties(_UpstreamModel):
    id: str = ""
    name: str = ""
    district: Optional[str] = ""
    measurement: EnrichedMeasurement = Field(default_factory=EnrichedMeasurement)
    updated_at: Optional[datetime] = None


class CleanStationFeature(_UpstreamModel):
    geometry: CleanPointGeometry = Field(default_factory=CleanPointGeometry)
    properties: EnrichedStationProperties = Field(default_factory=EnrichedStationProperties)


class CleanStationFeatureCollection(_UpstreamModel):
    features: list[CleanStationFeature] = Field(default_factory=list)


class EnrichedStationHistory(_UpstreamModel):
    id: str = ""
    measurement: EnrichedMeasurement = Field(default_factory=EnrichedMeasurement)
    updated_at: Optional[datetime] = None


# Bicycle counters


class CounterDirection(_UpstreamModel):
    id: str = ""
    name: str = ""
    direction: Optional[str] = ""
    last_count: Optional[int] = None
    last_count_at: Optional[datetime] = None


class CounterProperties(_UpstreamModel):
    id: str = ""
    name: str = ""
    route: Optional[str] = ""
    directions: list[CounterDirection] = Field(default_factory=list)
    updated_at: Optional[datetime] = None


class CounterFeature(_UpstreamModel):
    type: str = ""
    geometry: PointGeometry = Field(default_factory=PointGeometry)
    properties: CounterProperties = Field(default_factory=CounterProperties)


class CounterFeatureCollection(_UpstreamModel):
    type: str = ""
    features: list[CounterFeature] = Field(default_factory=list)


class CleanCounterFeature(_UpstreamModel):
    geometry: CleanPointGeometry = Field(default_factory=CleanPointGeometry)
    properties: CounterProperties = Field(default_factory=CounterProperties)


class CleanCounterFeatureCollection(_UpstreamModel):
    features: list[CleanCounterFeature] = Field(default_factory=list)


class CounterDetection(_UpstreamModel):
    """One aggregated detection window for a counter direction."""

    id: str = ""
    value: Optional[int] = None
    value_pedestrians: Optional[int] = None
    locations_id: str = ""
    measured_from: Optional[datetime] = None
    measured_to: Optional[datetime] = None
    measurement_count: Union[str, int, None] = ""


# City districts


class PolygonGeometry(_UpstreamModel):
    type: str = ""
    coordinates: list[Any] = Field(default_factory=list)


class DistrictProperties(_UpstreamModel):
    id: int = 0
    name: str = ""
    slug: str = ""
    updated_at: Optional[datetime] = None


class DistrictFeature(_UpstreamModel):
    type: str = ""
    geometry: PolygonGeometry = Field(default_factory=PolygonGeometry)
    properties: DistrictProperties = Field(default_factory=DistrictProperties)


class DistrictFeatureCollection(_UpstreamModel):
    type: str = ""
    features: list[DistrictFeature] = Field(default_factory=list)


class CleanDistrictFeature(_UpstreamModel):
    geometry: CleanPointGeometry = Field(default_factory=CleanPointGeometry)
    properties: DistrictProperties = Field(default_factory=DistrictProperties)


class CleanDistrictFeatureCollection(_UpstreamModel):
    features: list[CleanDistrictFeature] = Field(default_factory=list)

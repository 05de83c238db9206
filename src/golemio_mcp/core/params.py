"""Parameter option structures for every tool operation.

Each operation gets one pydantic model listing its parameters, their defaults
and their validation rules. Building a model is the validation step: any
problem raises ``ParameterValidationError`` before a request is sent.

Rules shared by all operations:
- ``latlng`` strings are passed through untouched, the API validates them
- ``limit`` must be a positive integer, ``offset`` a non-negative one
- dates are ISO-8601 (date or date-time, trailing ``Z`` allowed); naive
  values are read as UTC
- an omitted time window defaults to the last 24 hours
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from .exceptions import ParameterValidationError

MAX_LIMIT = 10000
DEFAULT_LIMIT = 10
DEFAULT_WINDOW = timedelta(hours=24)

DETECTION_LIMIT = 10
DISTRICT_LIMIT = 1000

Q = TypeVar("Q", bound="QueryOptions")


def parse_iso_datetime(value: str, name: str) -> datetime:
    """Parse an ISO-8601 date or date-time into an aware UTC datetime.

    Raises:
        ValueError: If the string is not ISO-8601
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(
            f"Invalid {name} parameter format: '{value}'. "
            "Expected ISO 8601 format (e.g., '2024-01-15T10:30:00Z' or '2024-01-15')."
        ) from None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_api_datetime(value: datetime) -> str:
    """Format a datetime the way the Golemio API expects: ``YYYY-MM-DDTHH:MM:SS.fffZ``."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_number(value: float) -> str:
    """Render a float without a trailing ``.0`` for whole numbers."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _coerce_datetime(value: Any, name: str) -> Any:
    value = _blank_to_none(value)
    if isinstance(value, str):
        return parse_iso_datetime(value, name)
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _format_error(error: Any) -> str:
    if error["type"] == "value_error" and "error" in error.get("ctx", {}):
        return str(error["ctx"]["error"])
    field = ".".join(str(part) for part in error["loc"]) or "parameters"
    if error["type"] == "missing":
        return f"Parameter '{field}' is required."
    return f"Invalid {field} value: {error.get('input')!r}. {error['msg']}."


class QueryOptions(BaseModel):
    """Base class for per-operation option structures."""

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def build(cls: type[Q], **values: Any) -> Q:
        """Validate caller values and return the options.

        Raises:
            ParameterValidationError: If any value is malformed or out of range
        """
        try:
            return cls(**values)
        except ValidationError as e:
            raise ParameterValidationError(" ".join(_format_error(err) for err in e.errors())) from e

    def query_params(self) -> dict[str, str]:
        """Return the upstream query string parameters.

        This method should be overridden by subclasses to map their fields
        onto the upstream parameter names.
        """
        raise NotImplementedError("Subclasses must implement query_params")


class _TimeWindowMixin(BaseModel):
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    @field_validator("date_from", mode="before")
    @classmethod
    def parse_date_from(cls, v: Any) -> Any:
        return _coerce_datetime(v, "date_from")

    @field_validator("date_to", mode="before")
    @classmethod
    def parse_date_to(cls, v: Any) -> Any:
        return _coerce_datetime(v, "date_to")

    @model_validator(mode="after")
    def apply_default_window(self) -> "_TimeWindowMixin":
        now = datetime.now(timezone.utc)
        if self.date_from is None:
            self.date_from = now - DEFAULT_WINDOW
        if self.date_to is None:
            self.date_to = now
        return self


class StationQuery(QueryOptions):
    """Options for the current air quality stations query."""

    latlng: Optional[str] = None
    range: Optional[float] = None
    districts: Optional[list[str]] = None
    limit: int = Field(default=DEFAULT_LIMIT, gt=0, le=MAX_LIMIT)
    offset: int = Field(default=0, ge=0)
    updated_since: Optional[datetime] = None

    @field_validator("latlng", mode="before")
    @classmethod
    def blank_latlng(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("range")
    @classmethod
    def finite_range(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not math.isfinite(v):
            raise ValueError(f"Invalid range value: {v}. Must be a valid number.")
        return v

    @field_validator("districts", mode="before")
    @classmethod
    def split_districts(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = [part.strip() for part in v.split(",")]
        if isinstance(v, list):
            v = [part for part in v if part]
            return v or None
        return v

    @field_validator("updated_since", mode="before")
    @classmethod
    def parse_updated_since(cls, v: Any) -> Any:
        return _coerce_datetime(v, "updated_since")

    def query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.latlng:
            params["latlng"] = self.latlng
        if self.range is not None:
            params["range"] = format_number(self.range)
        if self.districts:
            params["districts"] = ",".join(self.districts)
        params["limit"] = str(self.limit)
        params["offset"] = str(self.offset)
        if self.updated_since is not None:
            params["updatedSince"] = format_api_datetime(self.updated_since)
        return params


class HistoryQuery(_TimeWindowMixin, QueryOptions):
    """Options for the air quality station history query."""

    limit: int = Field(default=DEFAULT_LIMIT, gt=0, le=MAX_LIMIT)
    offset: int = Field(default=0, ge=0)
    sensor_id: Optional[str] = None

    @field_validator("sensor_id", mode="before")
    @classmethod
    def blank_sensor_id(cls, v: Any) -> Any:
        return _blank_to_none(v)

    def query_params(self) -> dict[str, str]:
        params = {
            "limit": str(self.limit),
            "offset": str(self.offset),
            "from": format_api_datetime(self.date_from),  # type: ignore[arg-type]
            "to": format_api_datetime(self.date_to),  # type: ignore[arg-type]
        }
        if self.sensor_id:
            params["sensorId"] = self.sensor_id
        return params


class CounterQuery(QueryOptions):
    """Options for the bicycle counter locations query.

    All numeric values arrive as free-form strings. Omitted values are not
    sent, so the API applies its own defaults.
    """

    latlng: Optional[str] = None
    range: Optional[float] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    @field_validator("latlng", mode="before")
    @classmethod
    def blank_latlng(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("range", mode="before")
    @classmethod
    def parse_range(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        if v is None:
            return None
        try:
            parsed = float(v)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid range value: {v}. Must be a valid number.") from None
        if not math.isfinite(parsed):
            raise ValueError(f"Invalid range value: {v}. Must be a valid number.")
        return parsed

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        if v is None:
            return None
        parsed = _parse_int(v)
        if parsed is None or parsed <= 0:
            raise ValueError(f"Invalid limit value: {v}. Must be a positive integer.")
        return parsed

    @field_validator("offset", mode="before")
    @classmethod
    def parse_offset(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        if v is None:
            return None
        parsed = _parse_int(v)
        if parsed is None or parsed < 0:
            raise ValueError(f"Invalid offset value: {v}. Must be a non-negative integer.")
        return parsed

    def query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.latlng:
            params["latlng"] = self.latlng
        if self.range is not None:
            params["range"] = format_number(self.range)
        if self.limit is not None:
            params["limit"] = str(self.limit)
        if self.offset is not None:
            params["offset"] = str(self.offset)
        return params


class DetectionQuery(_TimeWindowMixin, QueryOptions):
    """Options for the bicycle counter detections query.

    Pagination and aggregation are fixed: the API is always asked for the
    first 10 aggregated windows of a single direction.
    """

    direction_id: str

    @field_validator("direction_id", mode="before")
    @classmethod
    def require_direction_id(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("Direction ID is required and cannot be null or empty.")
        return v.strip() if isinstance(v, str) else v

    def query_params(self) -> dict[str, str]:
        return {
            "limit": str(DETECTION_LIMIT),
            "offset": "0",
            "aggregate": "true",
            "from": format_api_datetime(self.date_from),  # type: ignore[arg-type]
            "to": format_api_datetime(self.date_to),  # type: ignore[arg-type]
            "id": self.direction_id,
        }


class DistrictQuery(QueryOptions):
    """Options for the city districts query.

    Callers cannot change these: the tool always asks for the complete list
    so the result is a cacheable snapshot rather than a partial page.
    """

    districts: Optional[list[str]] = None
    limit: int = Field(default=DISTRICT_LIMIT, gt=0)
    offset: int = Field(default=0, ge=0)

    def query_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.districts:
            params["districts"] = ",".join(self.districts)
        params["limit"] = str(self.limit)
        params["offset"] = str(self.offset)
        return params


def _parse_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None

"""Tests for the result envelope."""

from datetime import datetime, timezone

import pytest

from golemio_mcp.core.models import ComponentType, EnrichedMeasurement, StationHistory
from golemio_mcp.core.result import Failure, Success, to_envelope


class TestResult:
    def test_success_envelope(self) -> None:
        assert to_envelope(Success([1, 2])) == {"success": True, "data": [1, 2]}

    def test_failure_envelope(self) -> None:
        assert to_envelope(Failure("boom")) == {"success": False, "errorMessage": "boom"}

    def test_failure_has_no_data(self) -> None:
        assert not hasattr(Failure("boom"), "data")
        assert Failure("boom").success is False
        assert Success(1).success is True

    def test_results_are_immutable(self) -> None:
        with pytest.raises(AttributeError):
            Success(1).data = 2  # type: ignore[misc]

    def test_models_are_dumped_with_upstream_names(self) -> None:
        data = (EnrichedMeasurement(aq_hourly_index="1A"), ComponentType(component_code="PM10"))

        envelope = to_envelope(Success(data))

        assert envelope["data"][0]["AQ_hourly_index"] == "1A"
        assert envelope["data"][0]["index_info"] is None
        assert envelope["data"][1]["component_code"] == "PM10"

    def test_datetimes_become_strings(self) -> None:
        record = StationHistory(id="A", updated_at=datetime(2024, 1, 15, 10, tzinfo=timezone.utc))

        envelope = to_envelope(Success([record]))

        assert envelope["data"][0]["updated_at"] == "2024-01-15T10:00:00Z"

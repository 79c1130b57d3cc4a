"""Unit tests for district lookup and common Pydantic schemas."""

import pytest
from pydantic import ValidationError

from civic_lookup.lib.districts.types import DistrictRecord
from civic_lookup.schemas.common import ErrorResponse
from civic_lookup.schemas.districts import AddressLookupRequest, DistrictRecordResponse, GeolocateRequest


class TestAddressLookupRequest:
    """Required fields are enforced by the lookup, not the schema."""

    def test_all_optional(self) -> None:
        req = AddressLookupRequest()
        assert req.street is None
        assert req.zip is None

    def test_zip_too_long(self) -> None:
        with pytest.raises(ValidationError):
            AddressLookupRequest(zip="98109-12345678")


class TestGeolocateRequest:
    """Tests for GeolocateRequest validation."""

    def test_coordinates(self) -> None:
        req = GeolocateRequest(latitude=47.62, longitude=-122.35)
        assert req.geolocation_error is None

    @pytest.mark.parametrize("error", ["permission_denied", "unsupported"])
    def test_known_errors(self, error: str) -> None:
        assert GeolocateRequest(geolocation_error=error).latitude is None

    def test_unknown_error_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeolocateRequest(geolocation_error="timeout")

    @pytest.mark.parametrize(("lat", "lng"), [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0)])
    def test_out_of_range(self, lat: float, lng: float) -> None:
        with pytest.raises(ValidationError):
            GeolocateRequest(latitude=lat, longitude=lng)


class TestDistrictRecordResponse:
    def test_from_record(self) -> None:
        record = DistrictRecord(state="Washington", county="King County")
        resp = DistrictRecordResponse.from_record(record)

        assert resp.state == "Washington"
        assert resp.county == "King County"
        assert resp.school_board is None


class TestErrorResponse:
    def test_minimal(self) -> None:
        err = ErrorResponse(detail="Not found")
        assert err.code is None
        assert err.errors is None

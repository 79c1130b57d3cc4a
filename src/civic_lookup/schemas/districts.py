"""District lookup request and response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field

from civic_lookup.lib.districts.types import DistrictRecord


class AddressLookupRequest(BaseModel):
    """Manually entered address.  Street, city and state are required."""

    street: str | None = Field(default=None, max_length=200)
    city: str | None = Field(default=None, max_length=100)
    state: str | None = Field(default=None, max_length=50)
    zip: str | None = Field(default=None, max_length=10)


class GeolocateRequest(BaseModel):
    """Position reported by the client device.

    When the device could not produce a position, ``latitude`` and
    ``longitude`` are omitted and ``geolocation_error`` says why.
    """

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    geolocation_error: str | None = Field(
        default=None,
        pattern="^(permission_denied|unsupported)$",
        description="Client-side geolocation failure, if any",
    )


class DistrictRecordResponse(BaseModel):
    """Human-readable district labels; absent fields are null."""

    country: str | None = None
    state: str | None = None
    county: str | None = None
    municipal: str | None = None
    congressional_district: str | None = None
    state_district: str | None = None
    state_lower_district: str | None = None
    school_board: str | None = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_record(cls, record: DistrictRecord) -> "DistrictRecordResponse":
        return cls(**record.to_dict())


class DistrictLookupResponse(BaseModel):
    """Successful lookup outcome."""

    message: str
    districts: DistrictRecordResponse
    saved_to_account: bool = Field(description="Whether the districts were written to the caller's account")


class StoredDistrictsResponse(DistrictRecordResponse):
    """Districts stored against the current user's account."""

    updated_at: datetime | None = None

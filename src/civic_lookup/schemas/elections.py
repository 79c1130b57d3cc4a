"""Election, voter-info and candidate response schemas.

Voter-info schemas mirror the view dataclasses in
:mod:`civic_lookup.lib.civic.display` and validate from their attributes.
"""

from datetime import date

from pydantic import BaseModel, Field


class ElectionSummary(BaseModel):
    """An election row in the list view."""

    id: str
    name: str
    election_day: date
    election_day_display: str
    level: str = Field(description="federal, state or local")
    type: str = Field(description="general, primary or special")
    ocd_division_id: str | None = None


class ElectionListResponse(BaseModel):
    items: list[ElectionSummary]
    total: int


class LocationViewResponse(BaseModel):
    name: str
    address: str
    hours: str | None = None
    notes: str | None = None
    start_date: str | None = None
    end_date: str | None = None

    model_config = {"from_attributes": True}


class CandidateViewResponse(BaseModel):
    name: str
    party: str | None = None
    url: str | None = None
    photo_url: str | None = None

    model_config = {"from_attributes": True}


class ContestViewResponse(BaseModel):
    title: str
    label: str
    district: str | None = None
    candidates: list[CandidateViewResponse] = Field(default_factory=list)
    subtitle: str | None = None
    url: str | None = None
    ballot_responses: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class AdministrationLinkResponse(BaseModel):
    label: str
    url: str

    model_config = {"from_attributes": True}


class AdministrationViewResponse(BaseModel):
    name: str | None = None
    links: list[AdministrationLinkResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class VoterInfoViewResponse(BaseModel):
    """Voter information shaped for display."""

    election_id: str
    election_name: str
    election_day: date
    election_day_display: str
    administration: AdministrationViewResponse | None = None
    polling_locations: list[LocationViewResponse] = Field(default_factory=list)
    early_vote_sites: list[LocationViewResponse] = Field(default_factory=list)
    drop_off_locations: list[LocationViewResponse] = Field(default_factory=list)
    contests: list[ContestViewResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class CandidateListingResponse(BaseModel):
    name: str
    office: str
    level: str
    party: str | None = None
    url: str | None = None
    photo_url: str | None = None

    model_config = {"from_attributes": True}


class CandidateListResponse(BaseModel):
    items: list[CandidateListingResponse]
    total: int

"""Pydantic models for Civic Information API payloads.

Field names use camelCase to match the API's JSON.  Unknown fields are
ignored so that additions on the provider side do not break parsing.
"""

# ruff: noqa: N815

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_null_to_list(v: Any) -> Any:
    """Coerce explicit JSON null to empty list."""
    return v if v is not None else []


class _CivicModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Source(_CivicModel):
    name: str = ""
    official: bool = False


class ElectionInfo(_CivicModel):
    """An election known to the Civic Information API."""

    id: str
    name: str
    electionDay: date
    ocdDivisionId: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v


class SimpleAddress(_CivicModel):
    locationName: str | None = None
    line1: str | None = None
    line2: str | None = None
    line3: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


class PollingLocation(_CivicModel):
    """A polling place, early-vote site, or drop-off location."""

    address: SimpleAddress = Field(default_factory=SimpleAddress)
    notes: str | None = None
    pollingHours: str | None = None
    name: str | None = None
    voterServices: str | None = None
    startDate: str | None = None
    endDate: str | None = None
    sources: list[Source] = Field(default_factory=list)


class Channel(_CivicModel):
    type: str
    id: str


class Candidate(_CivicModel):
    name: str
    party: str | None = None
    candidateUrl: str | None = None
    phone: str | None = None
    email: str | None = None
    photoUrl: str | None = None
    channels: list[Channel] = Field(default_factory=list)


class ElectoralDistrict(_CivicModel):
    name: str = ""
    scope: str | None = None
    id: str | None = None


class Contest(_CivicModel):
    """A candidate race or a referendum."""

    type: str = "General"
    office: str | None = None
    primaryParty: str | None = None
    district: ElectoralDistrict | None = None
    level: list[str] = Field(default_factory=list)
    roles: list[str] = Field(default_factory=list)
    candidates: list[Candidate] = Field(default_factory=list)
    referendumTitle: str | None = None
    referendumSubtitle: str | None = None
    referendumUrl: str | None = None
    referendumBrief: str | None = None
    referendumText: str | None = None
    referendumProStatement: str | None = None
    referendumConStatement: str | None = None
    referendumPassageThreshold: str | None = None
    referendumEffectOfAbstain: str | None = None
    referendumBallotResponses: list[str] = Field(default_factory=list)
    sources: list[Source] = Field(default_factory=list)

    @field_validator("level", "roles", "candidates", "referendumBallotResponses", "sources", mode="before")
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)

    @property
    def is_referendum(self) -> bool:
        return self.type.lower() == "referendum"


class AdministrationBody(_CivicModel):
    name: str | None = None
    electionInfoUrl: str | None = None
    votingLocationFinderUrl: str | None = None
    ballotInfoUrl: str | None = None
    electionRegistrationUrl: str | None = None
    correspondenceAddress: SimpleAddress | None = None


class AdministrativeRegion(_CivicModel):
    name: str | None = None
    electionAdministrationBody: AdministrationBody | None = None
    sources: list[Source] = Field(default_factory=list)


class VoterInfoResponse(_CivicModel):
    """Response of the ``voterinfo`` endpoint."""

    election: ElectionInfo
    normalizedInput: SimpleAddress | None = None
    pollingLocations: list[PollingLocation] = Field(default_factory=list)
    earlyVoteSites: list[PollingLocation] = Field(default_factory=list)
    dropOffLocations: list[PollingLocation] = Field(default_factory=list)
    contests: list[Contest] = Field(default_factory=list)
    state: list[AdministrativeRegion] = Field(default_factory=list)

    @field_validator("pollingLocations", "earlyVoteSites", "dropOffLocations", "contests", "state", mode="before")
    @classmethod
    def _coerce_lists(cls, v: Any) -> Any:
        return _coerce_null_to_list(v)

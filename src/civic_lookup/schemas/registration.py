"""Voter registration directory schemas."""

from pydantic import BaseModel


class StateSummary(BaseModel):
    code: str
    name: str


class StateRegistrationResponse(BaseModel):
    """Registration resources for one state or territory."""

    code: str
    name: str
    status_url: str
    registration_url: str
    deadline: str
    absentee_deadline: str
    early_voting: str

    model_config = {"from_attributes": True}

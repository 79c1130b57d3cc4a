"""Voter registration directory API endpoints."""

from fastapi import APIRouter, HTTPException, status

from civic_lookup.lib.registration import UnknownStateError, get_state, list_states
from civic_lookup.schemas.registration import StateRegistrationResponse, StateSummary

registration_router = APIRouter(prefix="/registration", tags=["registration"])


@registration_router.get("/states", response_model=list[StateSummary])
async def list_registration_states() -> list[StateSummary]:
    """Every state and territory in the directory."""
    return [StateSummary(code=entry.code, name=entry.name) for entry in list_states()]


@registration_router.get("/{state}", response_model=StateRegistrationResponse)
async def get_registration_info(state: str) -> StateRegistrationResponse:
    """Registration status URL and deadlines for a state code or name."""
    try:
        entry = get_state(state)
    except UnknownStateError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return StateRegistrationResponse.model_validate(entry)

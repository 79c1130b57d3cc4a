"""Election list, voter information and candidate API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from civic_lookup.core.dependencies import get_async_session, get_civic_client, get_optional_user
from civic_lookup.lib.civic.client import CivicApiError, CivicInfoClient
from civic_lookup.lib.civic.filters import ElectionTab
from civic_lookup.lib.districts.address import address_from_districts
from civic_lookup.models.user import User
from civic_lookup.schemas.elections import (
    CandidateListingResponse,
    CandidateListResponse,
    ElectionListResponse,
    VoterInfoViewResponse,
)
from civic_lookup.services import election_service
from civic_lookup.services.district_service import get_user_districts

elections_router = APIRouter(prefix="/elections", tags=["elections"])

_UPSTREAM_UNAVAILABLE = "The civic information service is unavailable. Please retry."
_NO_VOTER_INFO = "No voter information is available for this address."


async def _voter_address(address: str | None, user: User | None, session: AsyncSession) -> str:
    """Use the explicit address, else a coarse one derived from the user's stored districts."""
    if address and address.strip():
        return address.strip()
    if user is not None:
        row = await get_user_districts(session, user.id)
        derived = address_from_districts(row.to_record()) if row is not None else None
        if derived:
            return derived
    raise HTTPException(
        status_code=422,
        detail="An address is required. Look up your districts first or pass ?address=.",
    )


@elections_router.get("", response_model=ElectionListResponse)
async def list_elections(
    q: str = Query("", max_length=200, description="Case-insensitive election name search"),
    tab: ElectionTab = Query(ElectionTab.ALL, description="Election list tab"),
    civic: CivicInfoClient = Depends(get_civic_client),
) -> ElectionListResponse:
    """List elections known to the civic information service.

    No authentication required.
    """
    try:
        items = await election_service.list_elections(civic, query=q, tab=tab)
    except CivicApiError as e:
        logger.warning(f"Election list unavailable: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=_UPSTREAM_UNAVAILABLE) from e
    return ElectionListResponse(items=items, total=len(items))


@elections_router.get("/voter-info", response_model=VoterInfoViewResponse)
async def voter_info(
    address: str | None = Query(None, max_length=300, description="Registered voting address"),
    election_id: str | None = Query(None, description="Election id; defaults to the next election"),
    session: AsyncSession = Depends(get_async_session),
    civic: CivicInfoClient = Depends(get_civic_client),
    user: User | None = Depends(get_optional_user),
) -> VoterInfoViewResponse:
    """Polling places, contests and election administration for an address."""
    query = await _voter_address(address, user, session)
    try:
        view = await election_service.get_voter_info_view(civic, query, election_id)
    except CivicApiError as e:
        logger.warning(f"Voter info unavailable: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=_UPSTREAM_UNAVAILABLE) from e
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NO_VOTER_INFO)
    return VoterInfoViewResponse.model_validate(view)


@elections_router.get("/candidates", response_model=CandidateListResponse)
async def list_candidates(
    address: str | None = Query(None, max_length=300, description="Registered voting address"),
    election_id: str | None = Query(None),
    q: str = Query("", max_length=200, description="Matches candidate name or office"),
    office: str | None = Query(None, description="Exact office title, or 'all'"),
    party: str | None = Query(None, description="Exact party name, or 'all'"),
    level: str | None = Query(None, description="Federal, State, County, Local or Ballot Measure"),
    session: AsyncSession = Depends(get_async_session),
    civic: CivicInfoClient = Depends(get_civic_client),
    user: User | None = Depends(get_optional_user),
) -> CandidateListResponse:
    """Candidates on the ballot for an address, with search and filters."""
    query = await _voter_address(address, user, session)
    try:
        listings = await election_service.list_candidates(
            civic, query, election_id=election_id, query=q, office=office, party=party, level=level
        )
    except CivicApiError as e:
        logger.warning(f"Candidate list unavailable: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=_UPSTREAM_UNAVAILABLE) from e
    if listings is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_NO_VOTER_INFO)
    items = [CandidateListingResponse.model_validate(listing) for listing in listings]
    return CandidateListResponse(items=items, total=len(items))

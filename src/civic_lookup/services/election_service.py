"""Election listing, voter-info shaping, and candidate listings.

Thin async helpers over :class:`CivicInfoClient` used by both the API and
the CLI.  ``CivicApiError`` propagates to the caller; a ``None`` result
means the API had no data for the request.
"""

from datetime import date

from civic_lookup.lib.civic.client import CivicInfoClient
from civic_lookup.lib.civic.display import VoterInfoView, format_election_day, shape_voter_info
from civic_lookup.lib.civic.filters import (
    CandidateListing,
    ElectionTab,
    election_level,
    election_type,
    filter_candidates,
    filter_elections,
)
from civic_lookup.schemas.elections import ElectionSummary


async def list_elections(
    client: CivicInfoClient,
    *,
    query: str = "",
    tab: ElectionTab = ElectionTab.ALL,
    today: date | None = None,
) -> list[ElectionSummary]:
    """Fetch elections and return the filtered, date-ordered summaries."""
    elections = await client.get_elections()
    return [
        ElectionSummary(
            id=election.id,
            name=election.name,
            election_day=election.electionDay,
            election_day_display=format_election_day(election.electionDay),
            level=election_level(election).value,
            type=election_type(election).value,
            ocd_division_id=election.ocdDivisionId,
        )
        for election in filter_elections(elections, query=query, tab=tab, today=today)
    ]


async def get_voter_info_view(
    client: CivicInfoClient,
    address: str,
    election_id: str | None = None,
) -> VoterInfoView | None:
    """Fetch voter information for ``address`` and shape it for display."""
    response = await client.get_voter_info(address, election_id)
    if response is None:
        return None
    return shape_voter_info(response)


async def list_candidates(
    client: CivicInfoClient,
    address: str,
    *,
    election_id: str | None = None,
    query: str = "",
    office: str | None = None,
    party: str | None = None,
    level: str | None = None,
) -> list[CandidateListing] | None:
    """Flatten the contests on ``address``'s ballot into filtered candidate listings."""
    response = await client.get_voter_info(address, election_id)
    if response is None:
        return None
    return filter_candidates(response.contests, query=query, office=office, party=party, level=level)

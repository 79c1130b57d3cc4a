"""Shape voter-info payloads for display.

Converts a :class:`VoterInfoResponse` into flat view objects: long-form
election day, election administration links, labelled locations with
multi-line addresses, and contests with a human-readable type label.
"""

from dataclasses import dataclass, field
from datetime import date

from civic_lookup.lib.civic.models import Contest, PollingLocation, VoterInfoResponse

# Contest ``level`` values, most general first.
LEVEL_LABELS: tuple[tuple[str, str], ...] = (
    ("country", "Federal"),
    ("administrativeArea1", "State"),
    ("administrativeArea2", "County"),
    ("locality", "Local"),
)

BALLOT_MEASURE_LABEL = "Ballot Measure"


@dataclass
class LocationView:
    name: str
    address: str
    hours: str | None = None
    notes: str | None = None
    start_date: str | None = None
    end_date: str | None = None


@dataclass
class CandidateView:
    name: str
    party: str | None = None
    url: str | None = None
    photo_url: str | None = None


@dataclass
class ContestView:
    title: str
    label: str
    district: str | None = None
    candidates: list[CandidateView] = field(default_factory=list)
    subtitle: str | None = None
    url: str | None = None
    ballot_responses: list[str] = field(default_factory=list)


@dataclass
class AdministrationLink:
    label: str
    url: str


@dataclass
class AdministrationView:
    name: str | None
    links: list[AdministrationLink] = field(default_factory=list)


@dataclass
class VoterInfoView:
    election_id: str
    election_name: str
    election_day: date
    election_day_display: str
    administration: AdministrationView | None = None
    polling_locations: list[LocationView] = field(default_factory=list)
    early_vote_sites: list[LocationView] = field(default_factory=list)
    drop_off_locations: list[LocationView] = field(default_factory=list)
    contests: list[ContestView] = field(default_factory=list)


def format_election_day(day: date) -> str:
    """Render a date as ``"November 5, 2024"``."""
    return f"{day:%B} {day.day}, {day.year}"


def format_location_address(location: PollingLocation) -> str:
    """Render a location's address as newline-separated lines."""
    address = location.address
    lines = [line for line in (address.locationName, address.line1, address.line2, address.line3) if line]

    locality = address.city or ""
    if address.state:
        locality = f"{locality}, {address.state}" if locality else address.state
    if address.zip:
        locality = f"{locality} {address.zip}" if locality else address.zip
    if locality:
        lines.append(locality)
    return "\n".join(lines)


def contest_type_label(contest: Contest) -> str:
    """Label a contest: ``Ballot Measure`` for referenda, else by government level."""
    if contest.is_referendum:
        return BALLOT_MEASURE_LABEL
    for level, label in LEVEL_LABELS:
        if level in contest.level:
            return label
    return contest.type


def contest_title(contest: Contest) -> str:
    if contest.is_referendum:
        return contest.referendumTitle or contest.type
    return contest.office or contest.type


def _location_view(location: PollingLocation, default_name: str) -> LocationView:
    return LocationView(
        name=location.name or location.address.locationName or default_name,
        address=format_location_address(location),
        hours=location.pollingHours,
        notes=location.notes,
        start_date=location.startDate,
        end_date=location.endDate,
    )


def _contest_view(contest: Contest) -> ContestView:
    return ContestView(
        title=contest_title(contest),
        label=contest_type_label(contest),
        district=contest.district.name if contest.district and contest.district.name else None,
        candidates=[
            CandidateView(name=c.name, party=c.party, url=c.candidateUrl, photo_url=c.photoUrl)
            for c in contest.candidates
        ],
        subtitle=contest.referendumSubtitle,
        url=contest.referendumUrl,
        ballot_responses=list(contest.referendumBallotResponses),
    )


def _administration_view(response: VoterInfoResponse) -> AdministrationView | None:
    if not response.state or response.state[0].electionAdministrationBody is None:
        return None
    body = response.state[0].electionAdministrationBody
    candidates = (
        ("Election Information", body.electionInfoUrl),
        ("Find Voting Locations", body.votingLocationFinderUrl),
        ("Ballot Information", body.ballotInfoUrl),
        ("Registration", body.electionRegistrationUrl),
    )
    return AdministrationView(
        name=body.name,
        links=[AdministrationLink(label=label, url=url) for label, url in candidates if url],
    )


def shape_voter_info(response: VoterInfoResponse) -> VoterInfoView:
    """Build the display view for a voter-info response."""
    election = response.election
    return VoterInfoView(
        election_id=election.id,
        election_name=election.name,
        election_day=election.electionDay,
        election_day_display=format_election_day(election.electionDay),
        administration=_administration_view(response),
        polling_locations=[_location_view(loc, "Polling Location") for loc in response.pollingLocations],
        early_vote_sites=[_location_view(loc, "Early Voting Location") for loc in response.earlyVoteSites],
        drop_off_locations=[_location_view(loc, "Drop-off Location") for loc in response.dropOffLocations],
        contests=[_contest_view(contest) for contest in response.contests],
    )

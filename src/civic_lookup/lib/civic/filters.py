"""Search and tab filtering over election and candidate lists."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from civic_lookup.lib.civic.display import contest_title, contest_type_label
from civic_lookup.lib.civic.models import Contest, ElectionInfo


class ElectionLevel(StrEnum):
    FEDERAL = "federal"
    STATE = "state"
    LOCAL = "local"


class ElectionType(StrEnum):
    GENERAL = "general"
    PRIMARY = "primary"
    SPECIAL = "special"


class ElectionTab(StrEnum):
    """Election list views.  Level and type tabs reuse the enum values above."""

    ALL = "all"
    UPCOMING = "upcoming"
    FEDERAL = "federal"
    STATE = "state"
    LOCAL = "local"
    GENERAL = "general"
    PRIMARY = "primary"
    SPECIAL = "special"


def election_level(election: ElectionInfo) -> ElectionLevel:
    """Classify an election by the depth of its OCD division scope."""
    scope = (election.ocdDivisionId or "ocd-division/country:us").strip().lower()
    segments = scope.removeprefix("ocd-division/").split("/")
    if len(segments) <= 1:
        return ElectionLevel.FEDERAL
    if len(segments) == 2:
        return ElectionLevel.STATE
    return ElectionLevel.LOCAL


def election_type(election: ElectionInfo) -> ElectionType:
    name = election.name.lower()
    if "primary" in name:
        return ElectionType.PRIMARY
    if "special" in name or "runoff" in name:
        return ElectionType.SPECIAL
    return ElectionType.GENERAL


def filter_elections(
    elections: list[ElectionInfo],
    *,
    query: str = "",
    tab: ElectionTab = ElectionTab.ALL,
    today: date | None = None,
) -> list[ElectionInfo]:
    """Filter elections by name search and tab, soonest first.

    Args:
        elections: Elections to filter.
        query: Case-insensitive substring matched against the election name.
        tab: ``all``, ``upcoming``, a level or a type.
        today: Reference date for ``upcoming`` (defaults to today).

    Returns:
        Matching elections sorted by election day.
    """
    needle = query.strip().lower()
    reference = today or date.today()

    def matches_tab(election: ElectionInfo) -> bool:
        if tab == ElectionTab.ALL:
            return True
        if tab == ElectionTab.UPCOMING:
            return election.electionDay >= reference
        if tab.value in {level.value for level in ElectionLevel}:
            return election_level(election).value == tab.value
        return election_type(election).value == tab.value

    selected = [e for e in elections if (not needle or needle in e.name.lower()) and matches_tab(e)]
    return sorted(selected, key=lambda e: e.electionDay)


@dataclass
class CandidateListing:
    """A candidate together with the contest they are running in."""

    name: str
    office: str
    level: str
    party: str | None = None
    url: str | None = None
    photo_url: str | None = None


def filter_candidates(
    contests: list[Contest],
    *,
    query: str = "",
    office: str | None = None,
    party: str | None = None,
    level: str | None = None,
) -> list[CandidateListing]:
    """Flatten contests into candidate listings and filter them.

    ``query`` matches candidate name or office; ``office``, ``party`` and
    ``level`` are case-insensitive exact matches (``None`` or ``"all"``
    disables the filter).  Referenda have no candidates and never appear.
    """
    needle = query.strip().lower()

    def wanted(value: str | None) -> str | None:
        if value is None or value.strip().lower() in ("", "all"):
            return None
        return value.strip().lower()

    office_filter, party_filter, level_filter = wanted(office), wanted(party), wanted(level)

    listings: list[CandidateListing] = []
    for contest in contests:
        title = contest_title(contest)
        label = contest_type_label(contest)
        for candidate in contest.candidates:
            if needle and needle not in candidate.name.lower() and needle not in title.lower():
                continue
            if office_filter and title.lower() != office_filter:
                continue
            if party_filter and (candidate.party or "").lower() != party_filter:
                continue
            if level_filter and label.lower() != level_filter:
                continue
            listings.append(
                CandidateListing(
                    name=candidate.name,
                    office=title,
                    level=label,
                    party=candidate.party,
                    url=candidate.candidateUrl,
                    photo_url=candidate.photoUrl,
                )
            )
    return listings

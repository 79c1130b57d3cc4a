"""Civic Information API library: client, payload models, display shaping, filters.

Public API:
    - CivicInfoClient: Async API client
    - CivicApiError: Transport/service failure
    - ElectionInfo, VoterInfoResponse, Contest, PollingLocation: Payload models
    - shape_voter_info: VoterInfoResponse -> VoterInfoView
    - filter_elections / filter_candidates: List search and tab filtering
"""

from civic_lookup.lib.civic.client import CivicApiError, CivicInfoClient
from civic_lookup.lib.civic.display import (
    VoterInfoView,
    contest_type_label,
    format_election_day,
    format_location_address,
    shape_voter_info,
)
from civic_lookup.lib.civic.filters import (
    CandidateListing,
    ElectionLevel,
    ElectionTab,
    ElectionType,
    filter_candidates,
    filter_elections,
)
from civic_lookup.lib.civic.models import Contest, ElectionInfo, PollingLocation, VoterInfoResponse

__all__ = [
    "CandidateListing",
    "CivicApiError",
    "CivicInfoClient",
    "Contest",
    "ElectionInfo",
    "ElectionLevel",
    "ElectionTab",
    "ElectionType",
    "PollingLocation",
    "VoterInfoResponse",
    "VoterInfoView",
    "contest_type_label",
    "filter_candidates",
    "filter_elections",
    "format_election_day",
    "format_location_address",
    "shape_voter_info",
]

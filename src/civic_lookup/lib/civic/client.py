"""Google Civic Information API v2 client.

Three read endpoints are used: ``/elections``, ``/divisionsByAddress`` and
``/voterinfo``.  A non-success HTTP status or an empty payload is reported
as "no data" (``None`` or an empty list); transport failures raise
:class:`CivicApiError`.  Addresses are never written to the log.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from loguru import logger
from pydantic import ValidationError

from civic_lookup.lib.civic.models import ElectionInfo, VoterInfoResponse

if TYPE_CHECKING:
    from civic_lookup.core.config import Settings

DEFAULT_BASE_URL = "https://civicinfo.googleapis.com/civicinfo/v2"
DEFAULT_TIMEOUT = 10.0


class CivicApiError(Exception):
    """Raised when the Civic Information API cannot be reached or returns garbage.

    Args:
        provider_name: Name of the failing provider.
        message: Human-readable error description.
        status_code: Optional HTTP status code from the provider.
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class CivicInfoClient:
    """Async client for the Civic Information API.

    Args:
        api_key: API key sent as the ``key`` query parameter.
        base_url: API root.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._api_key = api_key
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> CivicInfoClient:
        return cls(
            api_key=settings.civic_api_key,
            base_url=settings.civic_api_base_url,
            timeout=settings.civic_api_timeout,
        )

    @property
    def provider_name(self) -> str:
        return "google_civic"

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def get_elections(self) -> list[ElectionInfo]:
        """List the elections the API currently knows about.

        Returns:
            Elections in API order; empty when the API has none or refuses.
        """
        data = await self._request("/elections", {})
        if data is None:
            return []

        elections: list[ElectionInfo] = []
        for raw in data.get("elections") or []:
            try:
                elections.append(ElectionInfo.model_validate(raw))
            except ValidationError:
                election_id = raw.get("id") if isinstance(raw, dict) else None
                logger.warning("Skipping malformed election entry id={!r}", election_id)
        return elections

    async def get_divisions(self, address: str) -> dict[str, dict] | None:
        """Look up the OCD divisions containing an address.

        Args:
            address: Single-line address or ``"lat,lng"``.

        Returns:
            OCD identifier -> division descriptor, or None if the API has no data.
        """
        data = await self._request("/divisionsByAddress", {"address": address})
        if data is None:
            return None
        divisions = data.get("divisions")
        if not isinstance(divisions, dict) or not divisions:
            return None
        return {str(k): v if isinstance(v, dict) else {} for k, v in divisions.items()}

    async def get_voter_info(self, address: str, election_id: str | None = None) -> VoterInfoResponse | None:
        """Fetch polling locations and contests for an address.

        Without ``election_id`` the API answers for the next election covering
        the address.

        Returns:
            The parsed response, or None if no voter information is available.
        """
        params: dict[str, Any] = {"address": address}
        if election_id:
            params["electionId"] = election_id
        data = await self._request("/voterinfo", params)
        if data is None or "election" not in data:
            return None
        try:
            return VoterInfoResponse.model_validate(data)
        except ValidationError as exc:
            logger.error("Civic API voterinfo response failed validation: {} errors", exc.error_count())
            raise CivicApiError(self.provider_name, "Malformed voterinfo response") from exc

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request(self, path: str, params: dict[str, Any]) -> dict[str, Any] | None:
        """GET ``path`` and return the JSON body, or None for a non-success status."""
        query = {**params}
        if self._api_key:
            query["key"] = self._api_key

        try:
            response = await self._client.get(path, params=query)
        except httpx.TimeoutException as exc:
            logger.warning("Civic API timeout for {}", path)
            raise CivicApiError(self.provider_name, "Request timed out") from exc
        except httpx.RequestError as exc:
            logger.warning("Civic API request failed for {}: {}", path, type(exc).__name__)
            raise CivicApiError(self.provider_name, f"Request failed: {type(exc).__name__}") from exc

        if response.is_error:
            logger.warning("Civic API returned HTTP {} for {}", response.status_code, path)
            return None

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("Civic API returned non-JSON response for {}", path)
            raise CivicApiError(self.provider_name, f"Invalid JSON response for {path}") from exc

        if not isinstance(body, dict):
            logger.warning("Civic API returned unexpected payload type for {}", path)
            return None
        return body

"""Unit tests for the Civic Information API client."""

from datetime import date
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from civic_lookup.lib.civic.client import CivicApiError, CivicInfoClient


def _response(body: object, *, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.is_error = status_code >= 400
    response.json.return_value = body
    return response


@pytest.fixture
async def client():
    civic = CivicInfoClient(api_key="test-key", base_url="https://civic.test/v2")
    yield civic
    await civic.close()


class TestGetDivisions:
    """Tests for divisionsByAddress."""

    @pytest.mark.asyncio
    async def test_returns_divisions(self, client: CivicInfoClient, wa_divisions: dict) -> None:
        """Divisions are returned keyed by OCD id, with the key and address as query params."""
        with patch.object(client._client, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = _response({"normalizedInput": {}, "divisions": wa_divisions})
            divisions = await client.get_divisions("400 Broad St, Seattle, WA 98109")

        assert divisions == wa_divisions
        path = mock_get.call_args.args[0]
        params = mock_get.call_args.kwargs["params"]
        assert path == "/divisionsByAddress"
        assert params == {"address": "400 Broad St, Seattle, WA 98109", "key": "test-key"}

    @pytest.mark.asyncio
    async def test_non_dict_descriptors_normalized(self, client: CivicInfoClient) -> None:
        with patch.object(client._client, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = _response({"divisions": {"ocd-division/country:us": None}})
            divisions = await client.get_divisions("US")

        assert divisions == {"ocd-division/country:us": {}}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"divisions": {}}, {"divisions": []}, ["not", "a", "dict"]])
    async def test_empty_payload_is_no_data(self, client: CivicInfoClient, body: object) -> None:
        with patch.object(client._client, "get", new_callable=AsyncMock, return_value=_response(body)):
            assert await client.get_divisions("nowhere") is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 403, 404, 500])
    async def test_error_status_is_no_data(self, client: CivicInfoClient, status_code: int) -> None:
        """A non-success status is reported as no data, not an exception."""
        error = _response({"error": {"message": "Failed to parse address"}}, status_code=status_code)
        with patch.object(client._client, "get", new_callable=AsyncMock, return_value=error):
            assert await client.get_divisions("bad address") is None

    @pytest.mark.asyncio
    async def test_timeout_raises(self, client: CivicInfoClient) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(CivicApiError, match="timed out") as exc_info,
        ):
            mock_get.side_effect = httpx.ReadTimeout("slow")
            await client.get_divisions("400 Broad St")

        assert exc_info.value.provider_name == "google_civic"

    @pytest.mark.asyncio
    async def test_connection_error_raises(self, client: CivicInfoClient) -> None:
        with (
            patch.object(client._client, "get", new_callable=AsyncMock) as mock_get,
            pytest.raises(CivicApiError, match="ConnectError"),
        ):
            mock_get.side_effect = httpx.ConnectError("refused")
            await client.get_divisions("400 Broad St")

    @pytest.mark.asyncio
    async def test_non_json_raises(self, client: CivicInfoClient) -> None:
        response = _response(None)
        response.json.side_effect = ValueError("no json")
        with (
            patch.object(client._client, "get", new_callable=AsyncMock, return_value=response),
            pytest.raises(CivicApiError, match="Invalid JSON"),
        ):
            await client.get_divisions("400 Broad St")


class TestGetElections:
    """Tests for the elections endpoint."""

    @pytest.mark.asyncio
    async def test_parses_elections(self, client: CivicInfoClient) -> None:
        body = {
            "elections": [
                {
                    "id": "2000",
                    "name": "VIP Test Election",
                    "electionDay": "2031-06-06",
                    "ocdDivisionId": "ocd-division/country:us",
                },
                {"id": 9001, "name": "Washington General", "electionDay": "2024-11-05"},
            ]
        }
        with patch.object(client._client, "get", new_callable=AsyncMock, return_value=_response(body)):
            elections = await client.get_elections()

        assert [e.id for e in elections] == ["2000", "9001"]
        assert elections[1].electionDay == date(2024, 11, 5)
        assert elections[1].ocdDivisionId is None

    @pytest.mark.asyncio
    async def test_skips_malformed_entries(self, client: CivicInfoClient) -> None:
        body = {"elections": [{"id": "1", "name": "No date"}, {"id": "2", "name": "Ok", "electionDay": "2025-01-01"}]}
        with patch.object(client._client, "get", new_callable=AsyncMock, return_value=_response(body)):
            elections = await client.get_elections()

        assert [e.id for e in elections] == ["2"]

    @pytest.mark.asyncio
    async def test_error_status_is_empty(self, client: CivicInfoClient) -> None:
        with patch.object(client._client, "get", new_callable=AsyncMock, return_value=_response({}, status_code=503)):
            assert await client.get_elections() == []


class TestGetVoterInfo:
    """Tests for the voterinfo endpoint."""

    @pytest.mark.asyncio
    async def test_parses_voter_info(self, client: CivicInfoClient, voter_info_payload: dict) -> None:
        with patch.object(client._client, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = _response(voter_info_payload)
            info = await client.get_voter_info("Seattle, WA", election_id="9000")

        assert info is not None
        assert info.election.id == "9000"
        assert len(info.contests) == 3
        assert info.contests[2].is_referendum
        assert mock_get.call_args.kwargs["params"]["electionId"] == "9000"

    @pytest.mark.asyncio
    async def test_election_id_optional(self, client: CivicInfoClient, voter_info_payload: dict) -> None:
        with patch.object(client._client, "get", new_callable=AsyncMock) as mock_get:
            mock_get.return_value = _response(voter_info_payload)
            await client.get_voter_info("Seattle, WA")

        assert "electionId" not in mock_get.call_args.kwargs["params"]

    @pytest.mark.asyncio
    async def test_null_lists_coerced(self, client: CivicInfoClient) -> None:
        body = {
            "election": {"id": "1", "name": "E", "electionDay": "2025-01-01"},
            "contests": None,
            "pollingLocations": None,
        }
        with patch.object(client._client, "get", new_callable=AsyncMock, return_value=_response(body)):
            info = await client.get_voter_info("Seattle, WA")

        assert info is not None
        assert info.contests == []
        assert info.pollingLocations == []

    @pytest.mark.asyncio
    async def test_no_election_is_no_data(self, client: CivicInfoClient) -> None:
        with patch.object(client._client, "get", new_callable=AsyncMock, return_value=_response({"kind": "x"})):
            assert await client.get_voter_info("Seattle, WA") is None

    @pytest.mark.asyncio
    async def test_malformed_election_raises(self, client: CivicInfoClient) -> None:
        body = {"election": {"id": "1"}}
        with (
            patch.object(client._client, "get", new_callable=AsyncMock, return_value=_response(body)),
            pytest.raises(CivicApiError, match="Malformed"),
        ):
            await client.get_voter_info("Seattle, WA")


class TestClientConfiguration:
    """Tests for construction helpers."""

    @pytest.mark.asyncio
    async def test_no_key_omits_param(self) -> None:
        civic = CivicInfoClient(api_key=None)
        assert not civic.is_configured
        with patch.object(civic._client, "get", new_callable=AsyncMock, return_value=_response({})) as mock_get:
            await civic.get_elections()
        await civic.close()

        assert "key" not in mock_get.call_args.kwargs["params"]

    @pytest.mark.asyncio
    async def test_from_settings(self, settings) -> None:
        civic = CivicInfoClient.from_settings(settings)
        assert civic.is_configured
        assert str(civic._client.base_url).startswith(settings.civic_api_base_url)
        await civic.close()

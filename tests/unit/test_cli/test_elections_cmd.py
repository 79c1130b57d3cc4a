"""Unit tests for the `elections` and `registration` CLI commands."""

from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from civic_lookup.cli.app import app
from civic_lookup.core.config import Settings
from civic_lookup.lib.civic.client import CivicApiError
from civic_lookup.lib.civic.models import ElectionInfo, VoterInfoResponse

runner = CliRunner()


@pytest.fixture
def civic(voter_info_payload: dict) -> MagicMock:
    client = MagicMock()
    client.get_elections = AsyncMock(
        return_value=[
            ElectionInfo.model_validate({"id": "2000", "name": "VIP Test Election", "electionDay": "2099-06-06"}),
            ElectionInfo.model_validate(
                {
                    "id": "9001",
                    "name": "Washington Primary",
                    "electionDay": "2098-08-06",
                    "ocdDivisionId": "ocd-division/country:us/state:wa",
                }
            ),
        ]
    )
    client.get_voter_info = AsyncMock(return_value=VoterInfoResponse.model_validate(voter_info_payload))
    client.close = AsyncMock()
    return client


@pytest.fixture
def _patched(cli_settings: Settings, civic: MagicMock) -> Generator[None]:
    with (
        patch("civic_lookup.cli.elections_cmd.get_settings", return_value=cli_settings),
        patch("civic_lookup.cli.elections_cmd.CivicInfoClient") as mock_client_cls,
    ):
        mock_client_cls.from_settings.return_value = civic
        yield


@pytest.mark.usefixtures("_patched")
class TestElectionsList:
    """Tests for `elections list`."""

    def test_lists_in_date_order(self, civic: MagicMock) -> None:
        result = runner.invoke(app, ["elections", "list"])

        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert "Washington Primary" in lines[0]
        assert "VIP Test Election" in lines[1]
        assert "June 6, 2099" in lines[1]
        civic.close.assert_awaited_once()

    def test_tab_with_no_matches(self) -> None:
        result = runner.invoke(app, ["elections", "list", "--tab", "local"])

        assert result.exit_code == 0
        assert "No elections found." in result.output

    def test_invalid_tab(self) -> None:
        result = runner.invoke(app, ["elections", "list", "--tab", "county"])
        assert result.exit_code != 0

    def test_upstream_error(self, civic: MagicMock) -> None:
        civic.get_elections.side_effect = CivicApiError("google_civic", "Request timed out")
        result = runner.invoke(app, ["elections", "list"])

        assert result.exit_code == 1
        assert "Error: Request timed out" in result.output


@pytest.mark.usefixtures("_patched")
class TestVoterInfo:
    """Tests for `elections voter-info`."""

    def test_prints_ballot(self, civic: MagicMock) -> None:
        result = runner.invoke(
            app, ["elections", "voter-info", "--address", "400 Broad St, Seattle, WA", "--election-id", "9000"]
        )

        assert result.exit_code == 0, result.output
        assert "General Election (November 5, 2024)" in result.output
        assert "Secretary of State" in result.output
        assert "Seattle Center" in result.output
        assert "[Federal] U.S. Representative" in result.output
        assert "- Jane Doe (Democratic Party)" in result.output
        civic.get_voter_info.assert_awaited_once_with("400 Broad St, Seattle, WA", "9000")

    def test_no_data(self, civic: MagicMock) -> None:
        civic.get_voter_info.return_value = None
        result = runner.invoke(app, ["elections", "voter-info", "--address", "Nowhere"])

        assert result.exit_code == 1
        assert "No voter information" in result.output

    def test_address_required(self) -> None:
        result = runner.invoke(app, ["elections", "voter-info"])
        assert result.exit_code != 0


class TestRegistration:
    """Tests for `registration list` and `registration show`."""

    def test_list(self) -> None:
        result = runner.invoke(app, ["registration", "list"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 56
        assert lines[0] == "AL  Alabama"

    @pytest.mark.parametrize("state", ["WA", "washington"])
    def test_show(self, state: str) -> None:
        result = runner.invoke(app, ["registration", "show", state])

        assert result.exit_code == 0
        assert "Washington (WA)" in result.output
        assert "https://voter.votewa.gov/WhereToVote.aspx" in result.output
        assert "All voting by mail" in result.output

    def test_unknown_state(self) -> None:
        result = runner.invoke(app, ["registration", "show", "Atlantis"])

        assert result.exit_code == 1
        assert "Error:" in result.output

"""Unit tests for the `lookup` CLI commands."""

import json
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from civic_lookup.cli.app import app
from civic_lookup.core.config import Settings
from civic_lookup.lib.civic.client import CivicApiError
from civic_lookup.lib.districts.types import AddressInput

runner = CliRunner()

ADDRESS_ARGS = ["--street", "400 Broad St", "--city", "Seattle", "--state", "WA", "--zip", "98109"]


@pytest.fixture
def civic(wa_divisions: dict) -> MagicMock:
    client = MagicMock()
    client.get_divisions = AsyncMock(return_value=wa_divisions)
    client.close = AsyncMock()
    return client


@pytest.fixture
def geocoder() -> MagicMock:
    mock = MagicMock()
    mock.provider_name = "census"
    mock.recover_address = AsyncMock(return_value=AddressInput(city="Seattle city", state="WA", zip="98109"))
    return mock


@pytest.fixture(autouse=True)
def _patched(cli_settings: Settings, civic: MagicMock, geocoder: MagicMock) -> Generator[None]:
    with (
        patch("civic_lookup.cli.lookup_cmd.get_settings", return_value=cli_settings),
        patch("civic_lookup.cli.lookup_cmd.CivicInfoClient") as mock_client_cls,
        patch("civic_lookup.cli.lookup_cmd.CensusGeocoder", return_value=geocoder),
    ):
        mock_client_cls.from_settings.return_value = civic
        yield


class TestLookupAddress:
    """Tests for `lookup address`."""

    def test_prints_districts_and_caches(self, cli_settings: Settings, civic: MagicMock) -> None:
        result = runner.invoke(app, ["lookup", "address", *ADDRESS_ARGS])

        assert result.exit_code == 0, result.output
        assert "We've identified your electoral districts." in result.output
        assert "Congressional District: Washington's 9th congressional district" in result.output
        assert "School District: Seattle Public Schools School District" in result.output
        civic.get_divisions.assert_awaited_once_with("400 Broad St, Seattle, WA 98109")
        civic.close.assert_awaited_once()

        with open(cli_settings.local_store_path, encoding="utf-8") as f:
            stored = json.load(f)
        assert stored["userDistricts"]["county"] == "King County"
        assert "street" not in stored["userDistricts"]

    def test_incomplete_address_fails(self, civic: MagicMock) -> None:
        result = runner.invoke(app, ["lookup", "address", "--city", "Seattle", "--state", "WA"])

        assert result.exit_code == 1
        assert "Please complete the address form" in result.output
        civic.get_divisions.assert_not_awaited()

    def test_upstream_error_fails(self, civic: MagicMock) -> None:
        civic.get_divisions.side_effect = CivicApiError("google_civic", "Request timed out")
        result = runner.invoke(app, ["lookup", "address", *ADDRESS_ARGS])

        assert result.exit_code == 1
        assert "Unable to reach the civic information service" in result.output
        civic.close.assert_awaited_once()


class TestLookupLocate:
    """Tests for `lookup locate`."""

    def test_uses_recovered_address(self, civic: MagicMock, geocoder: MagicMock) -> None:
        result = runner.invoke(app, ["lookup", "locate", "--lat", "47.62", "--lon=-122.35"])

        assert result.exit_code == 0, result.output
        assert "Municipal District: Seattle city" in result.output
        civic.get_divisions.assert_awaited_once_with("Seattle city, WA 98109")
        geocoder.recover_address.assert_awaited_once()

    def test_out_of_range_latitude(self, civic: MagicMock) -> None:
        result = runner.invoke(app, ["lookup", "locate", "--lat", "95", "--lon", "0"])

        assert result.exit_code != 0
        civic.get_divisions.assert_not_awaited()


class TestShowAndClear:
    """Tests for `lookup show` and `lookup clear`."""

    def test_show_without_cache(self) -> None:
        result = runner.invoke(app, ["lookup", "show"])

        assert result.exit_code == 1
        assert "No districts cached" in result.output

    def test_show_after_lookup_then_clear(self) -> None:
        runner.invoke(app, ["lookup", "address", *ADDRESS_ARGS])

        result = runner.invoke(app, ["lookup", "show"])
        assert result.exit_code == 0
        assert "State: Washington" in result.output

        result = runner.invoke(app, ["lookup", "clear"])
        assert result.exit_code == 0
        assert "Cached districts cleared." in result.output

        assert runner.invoke(app, ["lookup", "show"]).exit_code == 1

"""Integration test: account, district lookup and ballot information through the full router."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from civic_lookup.api.router import create_router
from civic_lookup.core.config import Settings, get_settings
from civic_lookup.core.dependencies import get_async_session, get_civic_client
from civic_lookup.lib.civic.models import VoterInfoResponse


@pytest.fixture
def civic(wa_divisions: dict, voter_info_payload: dict) -> MagicMock:
    client = MagicMock()
    client.get_divisions = AsyncMock(return_value=wa_divisions)
    client.get_voter_info = AsyncMock(return_value=VoterInfoResponse.model_validate(voter_info_payload))
    return client


@pytest.fixture
def client(async_session: AsyncSession, settings: Settings, civic: MagicMock) -> AsyncClient:
    app = FastAPI()
    app.include_router(create_router(settings))
    app.dependency_overrides[get_async_session] = lambda: async_session
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_civic_client] = lambda: civic
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestDistrictFlow:
    """A resident registers, looks up their districts and reads their ballot."""

    @pytest.mark.asyncio
    async def test_full_flow(self, client: AsyncClient, civic: MagicMock) -> None:
        resp = await client.post(
            "/api/v1/auth/register",
            json={"username": "voter42", "email": "voter42@example.com", "password": "longenough1"},
        )
        assert resp.status_code == 201

        resp = await client.post("/api/v1/auth/login", data={"username": "voter42", "password": "longenough1"})
        assert resp.status_code == 200
        headers = {"Authorization": f"Bearer {resp.json()['access_token']}"}

        assert (await client.get("/api/v1/districts/me", headers=headers)).status_code == 404

        resp = await client.post(
            "/api/v1/districts/lookup",
            json={"street": "400 Broad St", "city": "Seattle", "state": "WA", "zip": "98109"},
            headers=headers,
        )
        assert resp.status_code == 200
        assert resp.json()["saved_to_account"] is True

        resp = await client.get("/api/v1/districts/me", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["congressional_district"] == "Washington's 9th congressional district"

        resp = await client.get("/api/v1/elections/voter-info", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["election_name"] == "General Election"
        civic.get_voter_info.assert_awaited_once_with("Seattle city, Washington", None)

    @pytest.mark.asyncio
    async def test_anonymous_lookup_is_not_saved(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/districts/lookup",
            json={"street": "400 Broad St", "city": "Seattle", "state": "WA"},
        )
        assert resp.status_code == 200
        assert resp.json()["saved_to_account"] is False

        assert (await client.get("/api/v1/districts/me")).status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_token_rejected_on_optional_auth(self, client: AsyncClient) -> None:
        resp = await client.post(
            "/api/v1/districts/lookup",
            json={"street": "400 Broad St", "city": "Seattle", "state": "WA"},
            headers={"Authorization": "Bearer not-a-token"},
        )
        assert resp.status_code == 401

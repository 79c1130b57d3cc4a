"""Shared test fixtures for async database, sessions, auth tokens, and civic payloads."""

import uuid
from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from civic_lookup.core.config import Settings
from civic_lookup.core.security import create_access_token, hash_password
from civic_lookup.models.base import Base
from civic_lookup.models.user import User

TEST_SECRET = "test-secret-key-not-for-production"


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret_key=TEST_SECRET,
        jwt_algorithm="HS256",
        jwt_access_token_expire_minutes=30,
        jwt_refresh_token_expire_days=7,
        civic_api_key="test-civic-key",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
async def async_engine(settings: Settings) -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory async SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def async_session(async_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a per-test async session."""
    session_factory = async_sessionmaker(async_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def sample_user(async_session: AsyncSession) -> User:
    """Create a sample resident in the test database."""
    user = User(
        id=uuid.uuid4(),
        username="resident1",
        email="resident1@example.com",
        hashed_password=hash_password("testpassword123"),
        role="resident",
    )
    async_session.add(user)
    await async_session.commit()
    await async_session.refresh(user)
    return user


@pytest.fixture
def resident_token(settings: Settings, sample_user: User) -> str:
    """JWT access token for ``sample_user``."""
    return create_access_token(
        user_id=str(sample_user.id),
        role=sample_user.role,
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


@pytest.fixture
def wa_divisions() -> dict[str, dict]:
    """divisionsByAddress payload for a Seattle address."""
    return {
        "ocd-division/country:us": {"name": "United States"},
        "ocd-division/country:us/state:wa": {"name": "Washington"},
        "ocd-division/country:us/state:wa/cd:9": {"name": "Washington's 9th congressional district"},
        "ocd-division/country:us/state:wa/sldu:37": {"name": ""},
        "ocd-division/country:us/state:wa/sldl:37": {},
        "ocd-division/country:us/state:wa/county:king": {"name": "King County"},
        "ocd-division/country:us/state:wa/place:seattle": {"name": "Seattle city"},
        "ocd-division/country:us/state:wa/school_district:seattle_public_schools": {},
    }


@pytest.fixture
def voter_info_payload() -> dict:
    """A representative voterinfo response."""
    return {
        "kind": "civicinfo#voterInfoResponse",
        "election": {
            "id": "9000",
            "name": "General Election",
            "electionDay": "2024-11-05",
            "ocdDivisionId": "ocd-division/country:us",
        },
        "normalizedInput": {"line1": "400 Broad St", "city": "Seattle", "state": "WA", "zip": "98109"},
        "pollingLocations": [
            {
                "address": {
                    "locationName": "Seattle Center",
                    "line1": "305 Harrison St",
                    "city": "Seattle",
                    "state": "WA",
                    "zip": "98109",
                },
                "pollingHours": "7am-8pm",
            }
        ],
        "dropOffLocations": [
            {
                "address": {"line1": "500 4th Ave", "city": "Seattle", "state": "WA", "zip": "98104"},
            }
        ],
        "contests": [
            {
                "type": "General",
                "office": "U.S. Representative",
                "level": ["country"],
                "district": {"name": "Washington's 9th congressional district", "scope": "congressional"},
                "candidates": [
                    {"name": "Jane Doe", "party": "Democratic Party", "candidateUrl": "https://janedoe.example"},
                    {"name": "John Roe", "party": "Republican Party"},
                ],
            },
            {
                "type": "General",
                "office": "State Senator",
                "level": ["administrativeArea1"],
                "candidates": [{"name": "Alex Poe", "party": "Independent"}],
            },
            {
                "type": "Referendum",
                "referendumTitle": "Initiative Measure No. 2117",
                "referendumSubtitle": "Concerns carbon tax credit trading",
                "referendumBallotResponses": ["Yes", "No"],
            },
        ],
        "state": [
            {
                "name": "Washington",
                "electionAdministrationBody": {
                    "name": "Secretary of State",
                    "electionInfoUrl": "https://www.sos.wa.gov/elections",
                    "votingLocationFinderUrl": "https://voter.votewa.gov/WhereToVote.aspx",
                    "ballotInfoUrl": "https://voter.votewa.gov/",
                    "electionRegistrationUrl": "https://voter.votewa.gov/portal2023/login.aspx",
                },
            }
        ],
    }

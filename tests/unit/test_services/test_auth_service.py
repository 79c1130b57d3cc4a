"""Tests for the authentication service module."""

import uuid
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from civic_lookup.core.config import Settings
from civic_lookup.core.security import create_access_token, create_refresh_token, decode_token
from civic_lookup.models.user import User
from civic_lookup.schemas.auth import RegisterRequest, TokenResponse, UserCreateRequest
from civic_lookup.services.auth_service import (
    authenticate_user,
    create_user,
    generate_tokens,
    get_user,
    refresh_access_token,
)


def _mock_user(**overrides: object) -> MagicMock:
    """Create a mock User object."""
    user = MagicMock()
    user.id = uuid.uuid4()
    user.username = "resident1"
    user.email = "resident1@example.com"
    user.hashed_password = "$2b$12$hashed"
    user.role = "resident"
    user.is_active = True
    user.last_login_at = None
    user.created_at = datetime(2024, 1, 1, tzinfo=UTC)
    for key, value in overrides.items():
        setattr(user, key, value)
    return user


def _mock_session_with_result(scalar_result: object) -> AsyncMock:
    """Create mock session returning a specific scalar result."""
    session = AsyncMock()
    result = MagicMock()
    result.scalar_one_or_none.return_value = scalar_result
    session.execute.return_value = result
    return session


class TestAuthenticateUser:
    """Tests for authenticate_user."""

    @pytest.mark.asyncio
    async def test_valid_credentials_returns_user(self) -> None:
        user = _mock_user()
        session = _mock_session_with_result(user)

        with patch("civic_lookup.services.auth_service.verify_password", return_value=True):
            result = await authenticate_user(session, "resident1", "password123")

        assert result is user
        assert user.last_login_at is not None
        session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_wrong_password_returns_none(self) -> None:
        session = _mock_session_with_result(_mock_user())

        with patch("civic_lookup.services.auth_service.verify_password", return_value=False):
            result = await authenticate_user(session, "resident1", "wrongpassword")

        assert result is None
        session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self) -> None:
        session = _mock_session_with_result(None)
        assert await authenticate_user(session, "nobody", "password123") is None

    @pytest.mark.asyncio
    async def test_inactive_user_returns_none(self) -> None:
        session = _mock_session_with_result(_mock_user(is_active=False))

        with patch("civic_lookup.services.auth_service.verify_password", return_value=True):
            assert await authenticate_user(session, "resident1", "password123") is None

    @pytest.mark.asyncio
    async def test_against_database(self, async_session: AsyncSession, sample_user: User) -> None:
        """The fixture user's real bcrypt hash verifies."""
        user = await authenticate_user(async_session, "resident1", "testpassword123")
        assert user is not None
        assert user.id == sample_user.id


class TestCreateUser:
    """Tests for create_user."""

    @pytest.mark.asyncio
    async def test_self_registration_is_resident(self, async_session: AsyncSession) -> None:
        request = RegisterRequest(username="newvoter", email="newvoter@example.com", password="longenough1")
        user = await create_user(async_session, request)

        assert user.id is not None
        assert user.role == "resident"
        assert user.is_active
        assert user.hashed_password != "longenough1"

    @pytest.mark.asyncio
    async def test_admin_creation_assigns_role(self, async_session: AsyncSession) -> None:
        request = UserCreateRequest(username="clerk", email="clerk@example.com", password="longenough1", role="admin")
        user = await create_user(async_session, request)
        assert user.role == "admin"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "email"),
        [("resident1", "other@example.com"), ("someone", "resident1@example.com")],
    )
    async def test_duplicate_rejected(
        self, async_session: AsyncSession, sample_user: User, username: str, email: str
    ) -> None:
        request = RegisterRequest(username=username, email=email, password="longenough1")
        with pytest.raises(ValueError, match="already exists"):
            await create_user(async_session, request)


class TestGenerateTokens:
    """Tests for generate_tokens."""

    def test_token_pair(self, settings: Settings) -> None:
        user = _mock_user()
        tokens = generate_tokens(user, settings)

        assert isinstance(tokens, TokenResponse)
        assert tokens.token_type == "bearer"
        assert tokens.expires_in == 30 * 60
        access = decode_token(tokens.access_token, settings.jwt_secret_key)
        refresh = decode_token(tokens.refresh_token, settings.jwt_secret_key)
        assert access["sub"] == str(user.id)
        assert access["type"] == "access"
        assert refresh["type"] == "refresh"


class TestRefreshAccessToken:
    """Tests for refresh_access_token."""

    @pytest.mark.asyncio
    async def test_valid_refresh(self, async_session: AsyncSession, settings: Settings, sample_user: User) -> None:
        token = create_refresh_token(str(sample_user.id), settings.jwt_secret_key)
        tokens = await refresh_access_token(async_session, token, settings)
        assert decode_token(tokens.access_token, settings.jwt_secret_key)["sub"] == str(sample_user.id)

    @pytest.mark.asyncio
    async def test_access_token_rejected(self, async_session: AsyncSession, settings: Settings) -> None:
        token = create_access_token(str(uuid.uuid4()), "resident", settings.jwt_secret_key)
        with pytest.raises(ValueError, match="not a refresh token"):
            await refresh_access_token(async_session, token, settings)

    @pytest.mark.asyncio
    async def test_garbage_rejected(self, async_session: AsyncSession, settings: Settings) -> None:
        with pytest.raises(ValueError, match="Invalid refresh token"):
            await refresh_access_token(async_session, "garbage", settings)

    @pytest.mark.asyncio
    async def test_bad_subject_rejected(self, async_session: AsyncSession, settings: Settings) -> None:
        token = create_refresh_token("not-a-uuid", settings.jwt_secret_key)
        with pytest.raises(ValueError, match="Invalid token payload"):
            await refresh_access_token(async_session, token, settings)

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, async_session: AsyncSession, settings: Settings) -> None:
        token = create_refresh_token(str(uuid.uuid4()), settings.jwt_secret_key)
        with pytest.raises(ValueError, match="not found"):
            await refresh_access_token(async_session, token, settings)


class TestGetUser:
    """Tests for get_user."""

    @pytest.mark.asyncio
    async def test_found_and_missing(self, async_session: AsyncSession, sample_user: User) -> None:
        assert (await get_user(async_session, sample_user.id)).username == "resident1"
        assert await get_user(async_session, uuid.uuid4()) is None

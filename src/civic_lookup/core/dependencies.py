"""FastAPI dependency injection for database sessions, auth, and providers.

Provides get_async_session, get_current_user / get_optional_user, a role
guard factory, and per-request civic client and reverse geocoder instances.
"""

import uuid
from collections.abc import AsyncGenerator, Callable
from typing import Annotated, Any

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from civic_lookup.core.config import Settings, get_settings
from civic_lookup.core.database import get_session_factory
from civic_lookup.core.security import ACCESS_TOKEN_TYPE, decode_token
from civic_lookup.lib.civic.client import CivicInfoClient
from civic_lookup.lib.geocoder.base import BaseReverseGeocoder
from civic_lookup.lib.geocoder.census import CensusGeocoder
from civic_lookup.models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login")
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="api/v1/auth/login", auto_error=False)


async def get_async_session() -> AsyncGenerator[AsyncSession]:
    """Yield an async database session with per-request lifecycle."""
    factory = get_session_factory()
    async with factory() as session:
        yield session


async def _resolve_user(token: str, session: AsyncSession, settings: Settings) -> User:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = decode_token(token, settings.jwt_secret_key, settings.jwt_algorithm)
        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise credentials_exception
        user_id = uuid.UUID(str(payload.get("sub")))
    except Exception as exc:
        raise credentials_exception from exc

    result = await session.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None or not user.is_active:
        raise credentials_exception
    return user


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User:
    """Decode the bearer JWT and return the authenticated user.

    Raises:
        HTTPException: 401 if the token is invalid or the user is unknown or inactive.
    """
    return await _resolve_user(token, session, settings)


async def get_optional_user(
    token: Annotated[str | None, Depends(optional_oauth2_scheme)],
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> User | None:
    """Return the authenticated user, or None for anonymous requests.

    A token that is present but invalid is still rejected with 401.
    """
    if token is None:
        return None
    return await _resolve_user(token, session, settings)


def require_role(*roles: str) -> Callable[..., Any]:
    """Factory that creates a dependency requiring specific user roles."""

    async def role_checker(
        current_user: Annotated[User, Depends(get_current_user)],
    ) -> User:
        if current_user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{current_user.role}' does not have access to this resource",
            )
        return current_user

    return role_checker


async def get_civic_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncGenerator[CivicInfoClient]:
    """Yield a Civic Information API client, closed when the request ends."""
    client = CivicInfoClient.from_settings(settings)
    try:
        yield client
    finally:
        await client.close()


def get_reverse_geocoder(
    settings: Annotated[Settings, Depends(get_settings)],
) -> BaseReverseGeocoder:
    """Return the reverse geocoder used to recover addresses from positions."""
    return CensusGeocoder(timeout=settings.geocoder_census_timeout)

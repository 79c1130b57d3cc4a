"""Authentication API endpoints.

POST /auth/register, POST /auth/login, POST /auth/refresh, GET /auth/me,
GET /health, GET /info.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from civic_lookup import __version__
from civic_lookup.core.config import Settings, get_settings
from civic_lookup.core.dependencies import get_async_session, get_current_user
from civic_lookup.models.user import User
from civic_lookup.schemas.auth import RefreshRequest, RegisterRequest, TokenResponse, UserResponse
from civic_lookup.schemas.common import HealthResponse, InfoResponse
from civic_lookup.services import auth_service

router = APIRouter(tags=["auth"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint (no authentication required)."""
    return HealthResponse(status="healthy")


@router.get("/info", response_model=InfoResponse)
async def info(
    settings: Annotated[Settings, Depends(get_settings)],
) -> InfoResponse:
    """Return application version and environment."""
    return InfoResponse(
        name="civic-lookup",
        version=__version__,
        environment=settings.environment,
        civic_api_configured=bool(settings.civic_api_key),
    )


@router.post("/auth/register", response_model=UserResponse, status_code=201)
async def register(
    request: RegisterRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
) -> User:
    """Create a resident account."""
    try:
        user = await auth_service.create_user(session, request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e
    logger.info(f"Registered user {user.username}")
    return user


@router.post("/auth/login", response_model=TokenResponse)
async def login(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenResponse:
    """Authenticate user and return JWT tokens."""
    user = await auth_service.authenticate_user(session, form_data.username, form_data.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return auth_service.generate_tokens(user, settings)


@router.post("/auth/refresh", response_model=TokenResponse)
async def refresh_token(
    request: RefreshRequest,
    session: Annotated[AsyncSession, Depends(get_async_session)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenResponse:
    """Refresh an access token using a refresh token."""
    try:
        return await auth_service.refresh_access_token(session, request.refresh_token, settings)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e


@router.get("/auth/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    """Get the currently authenticated user's profile."""
    return current_user

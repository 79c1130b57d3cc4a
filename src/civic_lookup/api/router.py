"""Root API router with /api/v1 prefix and middleware registration."""

from fastapi import APIRouter, FastAPI

from civic_lookup.api.middleware import RateLimitMiddleware, SecurityHeadersMiddleware, setup_cors
from civic_lookup.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included."""
    from civic_lookup.api.v1.auth import router as auth_router
    from civic_lookup.api.v1.districts import districts_router
    from civic_lookup.api.v1.elections import elections_router
    from civic_lookup.api.v1.registration import registration_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(auth_router)
    root_router.include_router(districts_router)
    root_router.include_router(elections_router)
    root_router.include_router(registration_router)

    return root_router


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware on the FastAPI app."""
    setup_cors(app, settings)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        RateLimitMiddleware,
        requests_per_minute=settings.rate_limit_per_minute,
        trusted_proxy_headers=settings.trusted_proxy_header_list,
    )

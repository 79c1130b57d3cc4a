"""District lookup API endpoints.

Anonymous callers get their districts back and nothing is stored
server-side; the browser keeps its own copy.  Authenticated callers also
have the result saved against their account.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from civic_lookup.core.dependencies import (
    get_async_session,
    get_civic_client,
    get_current_user,
    get_optional_user,
    get_reverse_geocoder,
)
from civic_lookup.lib.civic.client import CivicInfoClient
from civic_lookup.lib.districts.types import AddressInput
from civic_lookup.lib.geocoder.base import BaseReverseGeocoder, Coordinates
from civic_lookup.lib.lookup import (
    DeniedPositionProvider,
    DistrictLookup,
    LookupErrorKind,
    LookupFailure,
    LookupResult,
    MemoryKeyValueStore,
    PositionProvider,
    StaticPositionProvider,
    ValidationError,
)
from civic_lookup.models.user import User
from civic_lookup.schemas.common import ErrorResponse
from civic_lookup.schemas.districts import (
    AddressLookupRequest,
    DistrictLookupResponse,
    DistrictRecordResponse,
    GeolocateRequest,
    StoredDistrictsResponse,
)
from civic_lookup.services.district_service import SqlDistrictStore, clear_user_districts, get_user_districts

districts_router = APIRouter(prefix="/districts", tags=["districts"])

FAILURE_STATUS: dict[LookupErrorKind, int] = {
    LookupErrorKind.VALIDATION: 422,
    LookupErrorKind.PERMISSION_DENIED: status.HTTP_403_FORBIDDEN,
    LookupErrorKind.UNSUPPORTED_PLATFORM: status.HTTP_400_BAD_REQUEST,
    LookupErrorKind.LOOKUP_FAILURE: status.HTTP_404_NOT_FOUND,
}

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


def failure_status(result: LookupResult) -> int:
    """HTTP status for a failed lookup result."""
    error = result.error
    if isinstance(error, LookupFailure) and error.transport_error:
        return status.HTTP_502_BAD_GATEWAY
    return FAILURE_STATUS.get(result.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def failure_response(result: LookupResult) -> JSONResponse:
    """Render a failed lookup as an ErrorResponse body."""
    errors = None
    if isinstance(result.error, ValidationError) and result.error.missing:
        errors = [{"loc": ["body", name], "msg": "Field required"} for name in result.error.missing]
    body = ErrorResponse(detail=result.message, code=str(result.kind), errors=errors)
    return JSONResponse(status_code=failure_status(result), content=body.model_dump(exclude_none=True))


def _build_lookup(
    civic: CivicInfoClient,
    geocoder: BaseReverseGeocoder,
    position: PositionProvider,
    session: AsyncSession,
    user: User | None,
) -> DistrictLookup:
    return DistrictLookup(
        civic_client=civic,
        reverse_geocoder=geocoder,
        position_provider=position,
        local_store=MemoryKeyValueStore(),
        district_store=SqlDistrictStore(session) if user is not None else None,
    )


def _success_response(result: LookupResult) -> DistrictLookupResponse:
    return DistrictLookupResponse(
        message=result.message,
        districts=DistrictRecordResponse.from_record(result.record),
        saved_to_account=result.saved_to_account,
    )


@districts_router.post("/lookup", response_model=DistrictLookupResponse, responses=_ERROR_RESPONSES)
async def lookup_by_address(
    request: AddressLookupRequest,
    session: AsyncSession = Depends(get_async_session),
    civic: CivicInfoClient = Depends(get_civic_client),
    geocoder: BaseReverseGeocoder = Depends(get_reverse_geocoder),
    user: User | None = Depends(get_optional_user),
) -> DistrictLookupResponse | JSONResponse:
    """Resolve a manually entered address to electoral districts."""
    lookup = _build_lookup(civic, geocoder, StaticPositionProvider(None), session, user)
    result = await lookup.lookup_by_address(
        AddressInput(**request.model_dump()),
        user_id=str(user.id) if user is not None else None,
    )
    if result.record is None:
        return failure_response(result)
    return _success_response(result)


@districts_router.post("/geolocate", response_model=DistrictLookupResponse, responses=_ERROR_RESPONSES)
async def lookup_by_geolocation(
    request: GeolocateRequest,
    session: AsyncSession = Depends(get_async_session),
    civic: CivicInfoClient = Depends(get_civic_client),
    geocoder: BaseReverseGeocoder = Depends(get_reverse_geocoder),
    user: User | None = Depends(get_optional_user),
) -> DistrictLookupResponse | JSONResponse:
    """Resolve the position reported by the client device to electoral districts."""
    position: PositionProvider
    if request.geolocation_error == "permission_denied":
        position = DeniedPositionProvider()
    elif request.latitude is not None and request.longitude is not None:
        position = StaticPositionProvider(Coordinates(request.latitude, request.longitude))
    else:
        position = StaticPositionProvider(None)

    lookup = _build_lookup(civic, geocoder, position, session, user)
    result = await lookup.lookup_by_geolocation(user_id=str(user.id) if user is not None else None)
    if result.record is None:
        return failure_response(result)
    return _success_response(result)


@districts_router.get("/me", response_model=StoredDistrictsResponse)
async def get_my_districts(
    session: AsyncSession = Depends(get_async_session),
    current_user: User = Depends(get_current_user),
) -> StoredDistrictsResponse:
    """Return the districts stored for the current user."""
    row = await get_user_districts(session, current_user.id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No districts stored for this account.")
    return StoredDistrictsResponse(**row.to_record().to_dict(), updated_at=row.updated_at)


@districts_router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_my_districts(
    session: AsyncSession = Depends(get_async_session),
    current_user: User = Depends(get_current_user),
) -> None:
    """Forget the districts stored for the current user."""
    deleted = await clear_user_districts(session, current_user.id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No districts stored for this account.")
    logger.info(f"Cleared stored districts for user {current_user.username}")

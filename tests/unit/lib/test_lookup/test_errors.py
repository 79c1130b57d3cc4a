"""Unit tests for the lookup error taxonomy, result type and position providers."""

import pytest

from civic_lookup.lib.districts.types import DistrictRecord
from civic_lookup.lib.geocoder.base import Coordinates
from civic_lookup.lib.lookup.errors import (
    LookupErrorKind,
    LookupFailure,
    LookupResult,
    PermissionDenied,
    PersistenceFailure,
    UnsupportedPlatform,
    ValidationError,
)
from civic_lookup.lib.lookup.position import DeniedPositionProvider, StaticPositionProvider


class TestErrors:
    """Tests for the error classes."""

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (ValidationError(), LookupErrorKind.VALIDATION),
            (PermissionDenied(), LookupErrorKind.PERMISSION_DENIED),
            (UnsupportedPlatform(), LookupErrorKind.UNSUPPORTED_PLATFORM),
            (LookupFailure(), LookupErrorKind.LOOKUP_FAILURE),
            (PersistenceFailure(), LookupErrorKind.PERSISTENCE_FAILURE),
        ],
    )
    def test_kind_and_default_message(self, error, kind: LookupErrorKind) -> None:
        assert error.kind == kind
        assert error.message
        assert str(error) == error.message

    def test_validation_lists_missing_fields(self) -> None:
        error = ValidationError(["street", "city"])
        assert error.missing == ["street", "city"]
        assert "street, city" in error.message

    def test_custom_message(self) -> None:
        assert LookupFailure("Try again later").message == "Try again later"
        assert not LookupFailure().transport_error


class TestLookupResult:
    """Tests for LookupResult."""

    def test_success(self) -> None:
        result = LookupResult.success(DistrictRecord(state="Washington"))
        assert result.ok
        assert result.kind is None
        assert result.message == "We've identified your electoral districts."

    def test_failure(self) -> None:
        result = LookupResult.failure(PermissionDenied())
        assert not result.ok
        assert result.kind == LookupErrorKind.PERMISSION_DENIED
        assert result.message == PermissionDenied.default_message

    def test_requires_exactly_one(self) -> None:
        with pytest.raises(ValueError):
            LookupResult()
        with pytest.raises(ValueError):
            LookupResult(record=DistrictRecord(state="Washington"), error=LookupFailure())


class TestPositionProviders:
    """Tests for the position providers."""

    @pytest.mark.asyncio
    async def test_static_position(self) -> None:
        coordinates = Coordinates(latitude=47.6, longitude=-122.3)
        assert await StaticPositionProvider(coordinates).current_position() == coordinates

    @pytest.mark.asyncio
    async def test_no_position_is_unsupported(self) -> None:
        with pytest.raises(UnsupportedPlatform):
            await StaticPositionProvider(None).current_position()

    @pytest.mark.asyncio
    async def test_denied(self) -> None:
        with pytest.raises(PermissionDenied):
            await DeniedPositionProvider().current_position()

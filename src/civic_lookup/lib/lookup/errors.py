"""District lookup error taxonomy and result type."""

from dataclasses import dataclass
from enum import StrEnum

from civic_lookup.lib.districts.types import DistrictRecord


class LookupErrorKind(StrEnum):
    VALIDATION = "validation_error"
    PERMISSION_DENIED = "permission_denied"
    UNSUPPORTED_PLATFORM = "unsupported_platform"
    LOOKUP_FAILURE = "lookup_failure"
    PERSISTENCE_FAILURE = "persistence_failure"


class DistrictLookupError(Exception):
    """Base class for lookup failures.  ``message`` is safe to show to a user."""

    kind: LookupErrorKind
    default_message: str = "Unable to determine your electoral districts."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DistrictLookupError):
    """The submitted address is missing required fields."""

    kind = LookupErrorKind.VALIDATION
    default_message = "Please complete the address form."

    def __init__(self, missing: list[str] | None = None, message: str | None = None) -> None:
        self.missing = missing or []
        if message is None and self.missing:
            message = f"Please complete the address form (missing: {', '.join(self.missing)})."
        super().__init__(message)


class PermissionDenied(DistrictLookupError):
    """The user declined location access."""

    kind = LookupErrorKind.PERMISSION_DENIED
    default_message = "Please allow location access or enter your address manually."


class UnsupportedPlatform(DistrictLookupError):
    """Device geolocation is not available."""

    kind = LookupErrorKind.UNSUPPORTED_PLATFORM
    default_message = "Geolocation is not supported here. Please enter your address manually."


class LookupFailure(DistrictLookupError):
    """The civic data source failed or returned no usable divisions.

    ``transport_error`` is True when the cause was a failed request rather
    than an empty answer.
    """

    kind = LookupErrorKind.LOOKUP_FAILURE
    default_message = "Address not found or unable to determine electoral districts."

    def __init__(self, message: str | None = None, *, transport_error: bool = False) -> None:
        self.transport_error = transport_error
        super().__init__(message)


class PersistenceFailure(DistrictLookupError):
    """Writing districts to the per-user store failed."""

    kind = LookupErrorKind.PERSISTENCE_FAILURE
    default_message = "Your districts could not be saved to your account."


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a lookup: exactly one of ``record`` and ``error`` is set."""

    record: DistrictRecord | None = None
    error: DistrictLookupError | None = None
    saved_to_account: bool = False

    def __post_init__(self) -> None:
        if (self.record is None) == (self.error is None):
            msg = "LookupResult requires exactly one of record or error"
            raise ValueError(msg)

    @classmethod
    def success(cls, record: DistrictRecord, *, saved_to_account: bool = False) -> "LookupResult":
        return cls(record=record, saved_to_account=saved_to_account)

    @classmethod
    def failure(cls, error: DistrictLookupError) -> "LookupResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> LookupErrorKind | None:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return "We've identified your electoral districts."

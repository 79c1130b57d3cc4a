"""Abstract reverse geocoder interface and shared result types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from civic_lookup.lib.districts.types import AddressInput


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 point."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not (-90 <= self.latitude <= 90):
            msg = f"latitude must be between -90 and 90, got {self.latitude}"
            raise ValueError(msg)
        if not (-180 <= self.longitude <= 180):
            msg = f"longitude must be between -180 and 180, got {self.longitude}"
            raise ValueError(msg)

    def as_query(self) -> str:
        """Render as ``"lat,lng"``, the form the Civic API accepts as an address."""
        return f"{self.latitude},{self.longitude}"


@dataclass
class ReverseGeocodeResult:
    """Named geographies covering a point.

    ``geographies`` maps a layer name (e.g. ``"Counties"``) to the
    descriptors the provider returned for it, each with at least ``NAME``.
    """

    geographies: dict[str, list[dict]] = field(default_factory=dict)
    raw_response: dict | None = None

    def first(self, *layers: str) -> dict | None:
        """Return the first descriptor from the first non-empty layer named."""
        for layer in layers:
            entries = self.geographies.get(layer) or []
            if entries:
                return entries[0]
        return None

    def first_name(self, *layers: str) -> str | None:
        descriptor = self.first(*layers)
        if descriptor is None:
            return None
        name = descriptor.get("NAME")
        return name if isinstance(name, str) and name.strip() else None


class GeocodingProviderError(Exception):
    """Raised when a geocoding provider experiences a transport or service error.

    Distinguishes provider failures (timeout, HTTP error, connection error)
    from a successful response with no match (which returns None).
    """

    def __init__(self, provider_name: str, message: str, status_code: int | None = None) -> None:
        self.provider_name = provider_name
        self.message = message
        self.status_code = status_code
        super().__init__(f"{provider_name}: {message}")


class BaseReverseGeocoder(ABC):
    """Coordinates -> named geographies -> coarse address."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Unique name identifying this geocoder provider."""

    @abstractmethod
    async def reverse_geocode(self, coordinates: Coordinates) -> ReverseGeocodeResult | None:
        """Look up the geographies containing ``coordinates``.

        Returns:
            ReverseGeocodeResult, or None if the provider found nothing.

        Raises:
            GeocodingProviderError: On transport or service errors.
        """

    @abstractmethod
    def to_address(self, result: ReverseGeocodeResult) -> AddressInput | None:
        """Recover a coarse address from a reverse geocode result, if possible."""

    async def recover_address(self, coordinates: Coordinates) -> AddressInput | None:
        """Reverse geocode and convert to an address in one step."""
        result = await self.reverse_geocode(coordinates)
        if result is None:
            return None
        return self.to_address(result)

"""US Census Bureau reverse geocoder.

Uses the Census Geocoding API ``geographies/coordinates`` endpoint
(https://geocoding.geo.census.gov/geocoder/) to find the named geographies
covering a point.  Only the place/county, state and ZCTA layers are used, to
recover a coarse address that the Civic Information API can resolve.
"""

import httpx
from loguru import logger

from civic_lookup.lib.districts.types import AddressInput
from civic_lookup.lib.geocoder.base import (
    BaseReverseGeocoder,
    Coordinates,
    GeocodingProviderError,
    ReverseGeocodeResult,
)

CENSUS_COORDINATES_URL = "https://geocoding.geo.census.gov/geocoder/geographies/coordinates"
DEFAULT_TIMEOUT = 30.0

STATES_LAYER = "States"
COUNTIES_LAYER = "Counties"
PLACE_LAYERS = ("Incorporated Places", "Census Designated Places", "Places")
ZCTA_LAYERS = ("2020 Census ZIP Code Tabulation Areas", "ZIP Code Tabulation Areas")


class CensusGeocoder(BaseReverseGeocoder):
    """US Census Bureau reverse geocoder."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._timeout = timeout

    @property
    def provider_name(self) -> str:
        return "census"

    async def reverse_geocode(self, coordinates: Coordinates) -> ReverseGeocodeResult | None:
        """Look up the Census geographies containing a point.

        Args:
            coordinates: WGS84 point.

        Returns:
            ReverseGeocodeResult, or None if the response holds no geographies.

        Raises:
            GeocodingProviderError: On transport or service errors (timeout, HTTP error, connection).
        """
        params = {
            "x": coordinates.longitude,
            "y": coordinates.latitude,
            "benchmark": "Public_AR_Current",
            "vintage": "Current_Current",
            "format": "json",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(CENSUS_COORDINATES_URL, params=params)
                response.raise_for_status()

            data = response.json()
            return self._parse_response(data)

        except httpx.TimeoutException as e:
            logger.warning("Census reverse geocoder timeout")
            raise GeocodingProviderError("census", "Geocoding request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Census reverse geocoder HTTP error {e.response.status_code}")
            raise GeocodingProviderError(
                "census", f"Provider returned HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.warning("Census reverse geocoder connection error")
            raise GeocodingProviderError("census", "Connection to geocoding provider failed") from e
        except ValueError as e:
            logger.warning("Census reverse geocoder returned non-JSON response")
            raise GeocodingProviderError("census", "Invalid JSON response") from e

    def _parse_response(self, data: dict) -> ReverseGeocodeResult | None:
        """Parse a Census ``geographies/coordinates`` response.

        Args:
            data: Raw JSON response from the Census API.

        Returns:
            ReverseGeocodeResult or None if no geographies were returned.
        """
        result = data.get("result") if isinstance(data, dict) else None
        geographies = result.get("geographies") if isinstance(result, dict) else None
        if not isinstance(geographies, dict):
            return None

        layers = {
            layer: [entry for entry in entries if isinstance(entry, dict)]
            for layer, entries in geographies.items()
            if isinstance(entries, list)
        }
        if not any(layers.values()):
            return None
        return ReverseGeocodeResult(geographies=layers, raw_response=data)

    def to_address(self, result: ReverseGeocodeResult) -> AddressInput | None:
        """Build ``AddressInput(city=<place or county>, state=<USPS code>, zip=<ZCTA>)``.

        Returns None when no state can be determined.
        """
        state = result.first(STATES_LAYER) or {}
        state_code = state.get("STUSAB") or state.get("NAME")
        if not state_code:
            return None

        locality = result.first_name(*PLACE_LAYERS) or result.first_name(COUNTIES_LAYER)
        zcta = result.first(*ZCTA_LAYERS) or {}
        zip_code = zcta.get("ZCTA5") or zcta.get("BASENAME")

        return AddressInput(city=locality, state=state_code, zip=zip_code)

"""Geocoder library: reverse geocoding used to recover an address from coordinates.

Public API:
    - BaseReverseGeocoder: Abstract provider interface
    - Coordinates: WGS84 point
    - ReverseGeocodeResult: Named geographies covering a point
    - GeocodingProviderError: Transport/service failure
    - CensusGeocoder: US Census Bureau provider
"""

from civic_lookup.lib.geocoder.base import (
    BaseReverseGeocoder,
    Coordinates,
    GeocodingProviderError,
    ReverseGeocodeResult,
)
from civic_lookup.lib.geocoder.census import CensusGeocoder

__all__ = [
    "BaseReverseGeocoder",
    "CensusGeocoder",
    "Coordinates",
    "GeocodingProviderError",
    "ReverseGeocodeResult",
]

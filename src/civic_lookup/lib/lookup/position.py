"""Device position capability."""

from abc import ABC, abstractmethod

from civic_lookup.lib.geocoder.base import Coordinates
from civic_lookup.lib.lookup.errors import PermissionDenied, UnsupportedPlatform


class PositionProvider(ABC):
    """Source of the device's current coordinates."""

    @abstractmethod
    async def current_position(self) -> Coordinates:
        """Return the current position, suspending until the user grants access.

        Raises:
            PermissionDenied: The user declined location access.
            UnsupportedPlatform: No geolocation capability is available.
        """


class StaticPositionProvider(PositionProvider):
    """Position reported by the client (e.g. browser coordinates in a request body)."""

    def __init__(self, coordinates: Coordinates | None) -> None:
        self._coordinates = coordinates

    async def current_position(self) -> Coordinates:
        if self._coordinates is None:
            raise UnsupportedPlatform
        return self._coordinates


class DeniedPositionProvider(PositionProvider):
    """Position provider for a client that reported a declined permission prompt."""

    async def current_position(self) -> Coordinates:
        raise PermissionDenied

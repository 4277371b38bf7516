from abc import ABC, abstractmethod
from typing import Optional
from models.errors import LocationDeniedError
from models.models import Location


class LocationProvider(ABC):
    """Source of the client's current coordinates."""

    @property
    def available(self) -> bool:
        return True

    @abstractmethod
    async def current_position(self) -> Location:
        """Return the current position or raise LocationDeniedError."""
        pass


class StaticLocationProvider(LocationProvider):
    def __init__(self, location: Optional[Location]):
        self.location = location

    @property
    def available(self) -> bool:
        return self.location is not None

    async def current_position(self) -> Location:
        if self.location is None:
            raise LocationDeniedError()
        return self.location


class DeniedLocationProvider(LocationProvider):
    async def current_position(self) -> Location:
        raise LocationDeniedError()


def provider_from_settings(
    lat: Optional[float], lng: Optional[float], denied: bool
) -> LocationProvider:
    if denied:
        return DeniedLocationProvider()
    if lat is None or lng is None:
        return StaticLocationProvider(None)
    return StaticLocationProvider(Location(lat=lat, lng=lng))

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from models.models import Location, User

EARTH_RADIUS_KM = 6371.0


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def format_distance(distance_km: float) -> str:
    # both branches round half up
    if distance_km < 1:
        return f"{math.floor(distance_km * 1000 + 0.5)}m away"
    tenths = Decimal(distance_km).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{tenths}km away"


def distance_label(viewer: Optional[Location], owner: User) -> Optional[str]:
    """Distance from the viewer to a book's owner, if both positions are known."""
    if viewer is None or owner.location is None:
        return None
    return format_distance(
        haversine(viewer.lat, viewer.lng, owner.location.lat, owner.location.lng)
    )

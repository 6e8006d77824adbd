"""Great-circle distance on a spherical Earth."""

from __future__ import annotations

import math

from traveler.contracts.common import GeoPoint

# Same sphere as the map geometry library the distances are compared against
EARTH_RADIUS_M = 6378137.0


def great_circle_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance in meters."""
    la1, lo1 = math.radians(a.lat), math.radians(a.lng)
    la2, lo2 = math.radians(b.lat), math.radians(b.lng)
    dlat = la2 - la1
    dlon = lo2 - lo1
    h = math.sin(dlat / 2) ** 2 + math.cos(la1) * math.cos(la2) * math.sin(dlon / 2) ** 2
    return 2 * math.asin(min(1.0, math.sqrt(h))) * EARTH_RADIUS_M

"""Synthetic airport discovery.

There is no airport data source: an airport is invented near the given
point. Swapping in a real lookup would make ``locate`` fallible.
"""

from __future__ import annotations

import random
import string

from traveler.contracts.common import GeoPoint
from traveler.contracts.trip import Airport

# Max offset per axis in degrees (roughly 0-15 km depending on latitude)
MAX_OFFSET_DEG = 0.1


class AirportLocator:
    """Invents a plausible airport close to a point.

    Pass a seeded ``random.Random`` to get reproducible airports.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def _offset(self) -> float:
        return self._rng.uniform(-MAX_OFFSET_DEG, MAX_OFFSET_DEG)

    def locate(self, point: GeoPoint) -> Airport:
        lat = max(-90.0, min(90.0, point.lat + self._offset()))
        lng = point.lng + self._offset()
        # Keep longitude in [-180, 180] near the antimeridian
        if lng > 180.0:
            lng -= 360.0
        elif lng < -180.0:
            lng += 360.0

        # Independent draws, duplicates across calls allowed
        iata = "".join(self._rng.choice(string.ascii_uppercase) for _ in range(3))
        return Airport(
            position=GeoPoint(lat=lat, lng=lng),
            name=f"{iata} International Airport",
            iata_code=iata,
        )

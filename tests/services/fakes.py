"""In-memory capability fakes for the geocoding, directions and backend seams."""

from __future__ import annotations

import asyncio
from typing import Callable

from traveler.contracts.common import GeoPoint
from traveler.contracts.enums import Algorithm, TransportMode
from traveler.contracts.trip import Location
from traveler.services.directions import RouteLegData
from traveler.services.geodesy import great_circle_distance

PARIS = GeoPoint(lat=48.8566, lng=2.3522)
LYON = GeoPoint(lat=45.7640, lng=4.8357)

# Average speeds used by FakeDirections, meters per second
SPEEDS_MPS = {
    TransportMode.DRIVING: 50 / 3.6,
    TransportMode.WALKING: 5 / 3.6,
    TransportMode.TRANSIT: 35 / 3.6,
}


class FakeGeocoder:
    """Geocodes from a fixed table. Unknown text has no match."""

    def __init__(self, places: dict[str, GeoPoint] | None = None):
        self.places = dict(places or {"Paris": PARIS, "Lyon": LYON})
        self.calls: list[str] = []
        self.gate: asyncio.Event | None = None
        self.error: Exception | None = None

    async def geocode(self, text: str) -> GeoPoint | None:
        self.calls.append(text)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.places.get(text)


class FakeDirections:
    """Road distance is the great-circle distance times ``detour``."""

    def __init__(
        self,
        detour: float = 1.25,
        no_route: Callable[[GeoPoint, GeoPoint], bool] | None = None,
    ):
        self.detour = detour
        self.no_route = no_route
        self.calls: list[dict] = []

    async def route(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TransportMode,
        avoid_tolls: bool = False,
        avoid_highways: bool = False,
    ) -> RouteLegData | None:
        self.calls.append({
            "origin": origin,
            "destination": destination,
            "mode": TransportMode(mode),
            "avoid_tolls": avoid_tolls,
            "avoid_highways": avoid_highways,
        })
        if self.no_route is not None and self.no_route(origin, destination):
            return None
        distance = great_circle_distance(origin, destination) * self.detour
        if avoid_tolls:
            distance *= 1.1
        return RouteLegData(
            distance_meters=distance,
            duration_seconds=distance / SPEEDS_MPS[TransportMode(mode)],
            polyline="_p~iF~ps|U_ulLnnqC",
        )


class FakeBackend:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.submissions: list[tuple[str, str, Algorithm]] = []

    async def submit(
        self, source: Location, destination: Location, algorithm: Algorithm
    ) -> dict:
        self.submissions.append((source.name, destination.name, Algorithm(algorithm)))
        if self.error is not None:
            raise self.error
        return {"path": [], "algorithm": Algorithm(algorithm).value}

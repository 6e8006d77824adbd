"""Trip composition: resolved endpoints + transport mode -> ``TripResult``.

Ground modes (driving, walking, transit) are a single directions leg.
Flying is composed of three legs:

1. drive from the source to a synthetic departure airport
2. fly the great-circle distance between source and destination
3. drive from a synthetic arrival airport to the destination

plus a fixed airport-procedure overhead. Either ground leg failing fails
the whole composition; no partial flight plan is ever returned.
"""

from __future__ import annotations

import logging
from typing import Callable

from traveler.contracts.common import GeoPoint
from traveler.contracts.enums import Algorithm, LegKind, TransportMode
from traveler.contracts.trip import (
    FLIGHT_OVERHEAD_SECONDS,
    Location,
    RoutePreferences,
    TripLeg,
    TripResult,
)
from traveler.services.airports import AirportLocator
from traveler.services.directions import RouteProvider
from traveler.services.geodesy import great_circle_distance

logger = logging.getLogger(__name__)

# Cruise-speed estimate for the air leg
FLYING_SPEED_KMH = 800


class TripComposer:
    """Builds a ``TripResult``. Stateless: every call is independent."""

    def __init__(
        self,
        route_provider: RouteProvider,
        airport_locator: AirportLocator,
        distance_fn: Callable[[GeoPoint, GeoPoint], float] = great_circle_distance,
    ):
        self._routes = route_provider
        self._airports = airport_locator
        self._distance = distance_fn

    async def compose(
        self,
        source: Location,
        destination: Location,
        mode: TransportMode,
        preferences: RoutePreferences,
        algorithm: Algorithm,
    ) -> TripResult:
        """Compose a trip from ``source`` to ``destination``.

        ``algorithm`` is only logged: geometry never depends on it.
        """
        mode = TransportMode(mode)
        logger.info(
            "Composing %s trip %s -> %s (algorithm=%s)",
            mode.value, source.name, destination.name, Algorithm(algorithm).value,
        )

        if mode == TransportMode.FLYING:
            return await self._compose_flight(source, destination)
        return await self._compose_ground(source, destination, mode, preferences)

    async def _compose_ground(
        self,
        source: Location,
        destination: Location,
        mode: TransportMode,
        preferences: RoutePreferences,
    ) -> TripResult:
        leg = await self._routes.compute_leg(
            source.point, destination.point, mode, preferences
        )
        return TripResult(
            source=source,
            destination=destination,
            mode=mode,
            legs=[leg],
            total_distance_meters=leg.distance_meters,
            total_duration_seconds=leg.duration_seconds,
        )

    async def _compose_flight(
        self, source: Location, destination: Location
    ) -> TripResult:
        # 1-2. Air leg: straight geodesic at cruise speed
        air_distance = self._distance(source.point, destination.point)
        air_duration = air_distance / 1000 / FLYING_SPEED_KMH * 3600

        # 3. Fresh airports for this computation only
        source_airport = self._airports.locate(source.point)
        dest_airport = self._airports.locate(destination.point)

        # 4. Airport transfers are always driven, without avoidance flags
        to_airport = await self._routes.compute_leg(
            source.point, source_airport.position, TransportMode.DRIVING
        )
        from_airport = await self._routes.compute_leg(
            dest_airport.position, destination.point, TransportMode.DRIVING
        )

        air_leg = TripLeg(
            kind=LegKind.AIR,
            start=source_airport.position,
            end=dest_airport.position,
            distance_meters=air_distance,
            duration_seconds=air_duration,
        )

        # 5. Totals
        total_distance = (
            air_distance + to_airport.distance_meters + from_airport.distance_meters
        )
        total_duration = (
            air_duration
            + to_airport.duration_seconds
            + from_airport.duration_seconds
            + FLIGHT_OVERHEAD_SECONDS
        )

        logger.debug(
            "Flight %s -> %s via %s/%s: %.0f m, %.0f s",
            source.name, destination.name,
            source_airport.iata_code, dest_airport.iata_code,
            total_distance, total_duration,
        )

        # 6. Fixed leg order
        return TripResult(
            source=source,
            destination=destination,
            mode=TransportMode.FLYING,
            legs=[to_airport, air_leg, from_airport],
            total_distance_meters=total_distance,
            total_duration_seconds=total_duration,
            source_airport=source_airport,
            dest_airport=dest_airport,
        )

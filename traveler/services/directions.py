"""Ground routing: one best leg between two points.

``RouteProvider`` wraps the ``DirectionsClient`` capability and converts
its answer into a ``TripLeg``. ``GoogleDirectionsClient`` is the
production client backed by the Google Directions API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from traveler.contracts.common import GeoPoint
from traveler.contracts.enums import LegKind, TransportMode
from traveler.contracts.trip import RoutePreferences, TripLeg
from traveler.services.errors import CapabilityError, DirectionsError

logger = logging.getLogger(__name__)

DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"

# Statuses meaning "no route", as opposed to a broken request
_NO_ROUTE_STATUSES = {"ZERO_RESULTS", "NOT_FOUND"}


@dataclass(frozen=True)
class RouteLegData:
    """First leg of the best route returned by a directions service."""

    distance_meters: float
    duration_seconds: float
    polyline: str | None = None


class DirectionsClient(Protocol):
    async def route(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TransportMode,
        avoid_tolls: bool = False,
        avoid_highways: bool = False,
    ) -> RouteLegData | None:
        """Best route's first leg, or None when there is no route."""
        ...


class GoogleDirectionsClient:
    """Async HTTP client for the Google Directions API."""

    def __init__(self, api_key: str, http_client: httpx.AsyncClient | None = None):
        self._api_key = api_key
        self._client = http_client or httpx.AsyncClient(timeout=15.0)

    async def route(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TransportMode,
        avoid_tolls: bool = False,
        avoid_highways: bool = False,
    ) -> RouteLegData | None:
        params = {
            "origin": origin.as_param(),
            "destination": destination.as_param(),
            "mode": TransportMode(mode).value,
            "key": self._api_key,
        }
        avoid = []
        if avoid_tolls:
            avoid.append("tolls")
        if avoid_highways:
            avoid.append("highways")
        if avoid:
            params["avoid"] = "|".join(avoid)

        resp = await self._client.get(DIRECTIONS_URL, params=params)
        resp.raise_for_status()
        data = resp.json()

        status = data.get("status", "UNKNOWN_ERROR")
        if status in _NO_ROUTE_STATUSES:
            return None
        if status != "OK":
            logger.error(
                "Google Directions API error: %s",
                data.get("error_message", status),
            )
            raise CapabilityError("directions", status)

        return _parse_first_leg(data)


def _parse_first_leg(data: dict) -> RouteLegData | None:
    """Extract the first route's first leg from a Directions response."""
    routes = data.get("routes") or []
    if not routes:
        return None
    legs = routes[0].get("legs") or []
    if not legs:
        return None

    leg = legs[0]
    polyline = (routes[0].get("overview_polyline") or {}).get("points")
    return RouteLegData(
        distance_meters=float(leg["distance"]["value"]),
        duration_seconds=float(leg["duration"]["value"]),
        polyline=polyline,
    )


class RouteProvider:
    """Adapter from the directions capability to ``TripLeg``."""

    def __init__(self, directions: DirectionsClient):
        self._directions = directions

    async def compute_leg(
        self,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: TransportMode,
        preferences: RoutePreferences | None = None,
    ) -> TripLeg:
        """Single best ground leg from ``origin`` to ``destination``.

        Honors ``avoid_tolls`` / ``avoid_highways``. Flying never goes
        through directions and is rejected.
        """
        mode = TransportMode(mode)
        if mode == TransportMode.FLYING:
            raise ValueError("Flight segments are not routed through directions")
        preferences = preferences or RoutePreferences()

        data = await self._directions.route(
            origin,
            destination,
            mode,
            avoid_tolls=preferences.avoid_tolls,
            avoid_highways=preferences.avoid_highways,
        )
        if data is None:
            raise DirectionsError(origin.as_param(), destination.as_param(), mode.value)

        return TripLeg(
            kind=LegKind.GROUND,
            start=origin,
            end=destination,
            distance_meters=data.distance_meters,
            duration_seconds=data.duration_seconds,
            polyline=data.polyline,
        )

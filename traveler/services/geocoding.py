"""Place resolution: free text to a ``Location``.

``GeoResolver`` depends only on the ``Geocoder`` capability;
``GoogleGeocoder`` is the production implementation backed by the Google
Geocoding API.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from traveler.contracts.common import GeoPoint
from traveler.contracts.trip import Location
from traveler.services.errors import CapabilityError, InvalidInput, ResolutionError

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


class Geocoder(Protocol):
    async def geocode(self, text: str) -> GeoPoint | None:
        """Best match for ``text``, or None when nothing matches."""
        ...


class GoogleGeocoder:
    """Async HTTP client for the Google Geocoding API."""

    def __init__(self, api_key: str, http_client: httpx.AsyncClient | None = None):
        self._api_key = api_key
        self._client = http_client or httpx.AsyncClient(timeout=15.0)

    async def geocode(self, text: str) -> GeoPoint | None:
        resp = await self._client.get(
            GEOCODE_URL,
            params={"address": text, "key": self._api_key},
        )
        resp.raise_for_status()
        data = resp.json()

        status = data.get("status", "UNKNOWN_ERROR")
        if status == "ZERO_RESULTS":
            return None
        if status != "OK":
            logger.error(
                "Google Geocoding API error for %r: %s",
                text, data.get("error_message", status),
            )
            raise CapabilityError("geocoding", status)

        results = data.get("results") or []
        if not results:
            return None
        location = results[0]["geometry"]["location"]
        return GeoPoint(lat=location["lat"], lng=location["lng"])


class GeoResolver:
    """Turns user-typed place text into a resolved ``Location``."""

    def __init__(self, geocoder: Geocoder):
        self._geocoder = geocoder

    async def resolve(self, place_text: str) -> Location:
        """Resolve ``place_text`` to its first match. No retry.

        Raises ``InvalidInput`` for blank text and ``ResolutionError``
        when the geocoder has no match.
        """
        if not place_text or not place_text.strip():
            raise InvalidInput("Please enter both source and destination")

        point = await self._geocoder.geocode(place_text)
        if point is None:
            logger.info("No geocoding match for %r", place_text)
            raise ResolutionError(place_text)

        return Location(name=place_text, lat=point.lat, lng=point.lng)

"""Tests for the Google geocoding client and GeoResolver."""

from __future__ import annotations

import httpx
import pytest

from traveler.contracts.common import GeoPoint
from traveler.services.errors import CapabilityError, InvalidInput, ResolutionError
from traveler.services.geocoding import GeoResolver, GoogleGeocoder
from tests.services.fakes import PARIS, FakeGeocoder

GEOCODE_OK = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "Paris, France",
            "geometry": {"location": {"lat": 48.856614, "lng": 2.3522219}},
        },
        {
            "formatted_address": "Paris, TX, USA",
            "geometry": {"location": {"lat": 33.6609389, "lng": -95.555513}},
        },
    ],
}


class TestGoogleGeocoder:
    async def test_first_result_is_returned(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(200, json=GEOCODE_OK)
        )
        async with httpx.AsyncClient(transport=transport) as http:
            geocoder = GoogleGeocoder("test-key", http_client=http)
            point = await geocoder.geocode("Paris")
        assert point == GeoPoint(lat=48.856614, lng=2.3522219)

    async def test_request_params(self):
        captured = None

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal captured
            captured = request
            return httpx.Response(200, json=GEOCODE_OK)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            await GoogleGeocoder("test-key", http_client=http).geocode("Place de la Concorde")

        assert captured is not None
        assert captured.url.path == "/maps/api/geocode/json"
        assert captured.url.params["address"] == "Place de la Concorde"
        assert captured.url.params["key"] == "test-key"

    async def test_zero_results_is_none(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(200, json={"status": "ZERO_RESULTS", "results": []})
        )
        async with httpx.AsyncClient(transport=transport) as http:
            point = await GoogleGeocoder("k", http_client=http).geocode("Nowhereville")
        assert point is None

    async def test_denied_request_raises(self):
        transport = httpx.MockTransport(
            lambda req: httpx.Response(
                200,
                json={"status": "REQUEST_DENIED", "error_message": "bad key", "results": []},
            )
        )
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(CapabilityError, match="REQUEST_DENIED"):
                await GoogleGeocoder("k", http_client=http).geocode("Paris")

    async def test_http_error_propagates(self):
        transport = httpx.MockTransport(lambda req: httpx.Response(500))
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(httpx.HTTPStatusError):
                await GoogleGeocoder("k", http_client=http).geocode("Paris")


class TestGeoResolver:
    async def test_resolve_echoes_text_as_name(self):
        resolver = GeoResolver(FakeGeocoder())
        location = await resolver.resolve("Paris")
        assert location.name == "Paris"
        assert location.lat == PARIS.lat
        assert location.lng == PARIS.lng
        assert location.point == PARIS

    async def test_unknown_place_raises_resolution_error(self):
        resolver = GeoResolver(FakeGeocoder())
        with pytest.raises(ResolutionError) as exc_info:
            await resolver.resolve("Atlantis")
        assert exc_info.value.place == "Atlantis"
        assert exc_info.value.details == {"place": "Atlantis"}
        assert str(exc_info.value) == "Geocoding failed for Atlantis"

    @pytest.mark.parametrize("text", ["", "   "])
    async def test_blank_text_never_reaches_geocoder(self, text):
        geocoder = FakeGeocoder()
        with pytest.raises(InvalidInput):
            await GeoResolver(geocoder).resolve(text)
        assert geocoder.calls == []

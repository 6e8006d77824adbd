"""Shared fixtures for API tests."""

from __future__ import annotations

import random

import httpx
import pytest

from traveler.api.app import app
from traveler.services.airports import AirportLocator
from traveler.services.algorithm import AlgorithmPresentation
from traveler.services.directions import RouteProvider
from traveler.services.geocoding import GeoResolver
from traveler.services.trip_composer import TripComposer
from traveler.services.trip_session import SessionRegistry
from tests.services.fakes import FakeBackend, FakeDirections, FakeGeocoder


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def geocoder():
    return FakeGeocoder()


@pytest.fixture
def registry(backend, geocoder):
    """Session registry wired to in-memory capability fakes."""
    composer = TripComposer(
        RouteProvider(FakeDirections()),
        AirportLocator(random.Random(8)),
    )
    return SessionRegistry(
        GeoResolver(geocoder),
        composer,
        AlgorithmPresentation(backend),
    )


@pytest.fixture
async def test_app(registry):
    """FastAPI app with the fake registry on app.state."""
    app.state.sessions = registry
    yield app
    await registry.close()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def session_id(client):
    resp = await client.post("/api/sessions")
    assert resp.status_code == 201
    return resp.json()["session_id"]

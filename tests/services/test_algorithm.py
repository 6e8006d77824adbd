"""Tests for algorithm colors, names and backend forwarding."""

from __future__ import annotations

import json

import httpx
import pytest

from traveler.contracts.enums import Algorithm
from traveler.contracts.trip import Location
from traveler.services.algorithm import (
    AlgorithmPresentation,
    BackendPathClient,
    color_for,
    display_name,
)
from tests.services.fakes import FakeBackend

SOURCE = Location(name="Paris", lat=48.8566, lng=2.3522)
DESTINATION = Location(name="Lyon", lat=45.7640, lng=4.8357)


class TestPresentation:
    def test_colors(self):
        assert color_for(Algorithm.DIJKSTRA) == "#FF0000"
        assert color_for(Algorithm.ASTAR) == "#4285F4"
        assert color_for(Algorithm.BFS) == "#00FF00"
        assert color_for(Algorithm.DFS) == "#FFA500"

    def test_accepts_raw_label(self):
        assert color_for("a-star") == "#4285F4"
        assert display_name("dijkstra") == "Dijkstra's"

    def test_every_algorithm_has_color_and_name(self):
        for algorithm in Algorithm:
            assert color_for(algorithm).startswith("#")
            assert display_name(algorithm)

    def test_unknown_label_rejected(self):
        with pytest.raises(ValueError):
            color_for("greedy")


class TestBackendPathClient:
    async def test_submit_posts_algorithm(self):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"path": []})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            client = BackendPathClient("http://backend:5000/", http_client=http)
            response = await client.submit(SOURCE, DESTINATION, Algorithm.BFS)

        assert response == {"path": []}
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == "http://backend:5000/api/routes/calculate"
        body = json.loads(request.content)
        assert body["algorithm"] == "bfs"
        assert body["source"] == {"name": "Paris", "lat": 48.8566, "lng": 2.3522}
        assert body["destination"]["name"] == "Lyon"


class TestForward:
    async def test_forward_submits(self):
        backend = FakeBackend()
        await AlgorithmPresentation(backend).forward(SOURCE, DESTINATION, Algorithm.DFS)
        assert backend.submissions == [("Paris", "Lyon", Algorithm.DFS)]

    async def test_forward_swallows_backend_failure(self):
        backend = FakeBackend(error=httpx.ConnectError("backend down"))
        await AlgorithmPresentation(backend).forward(SOURCE, DESTINATION, Algorithm.ASTAR)
        assert len(backend.submissions) == 1

    async def test_forward_without_backend_is_noop(self):
        await AlgorithmPresentation().forward(SOURCE, DESTINATION, Algorithm.ASTAR)

"""Algorithm label presentation and backend forwarding.

The selected algorithm never changes the computed geometry. It picks the
color the path is drawn with and is submitted to the routes backend,
whose answer is ignored.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from traveler.contracts.enums import Algorithm
from traveler.contracts.trip import Location

logger = logging.getLogger(__name__)

ALGORITHM_COLORS: dict[Algorithm, str] = {
    Algorithm.DIJKSTRA: "#FF0000",  # red
    Algorithm.ASTAR: "#4285F4",  # blue
    Algorithm.BFS: "#00FF00",  # green
    Algorithm.DFS: "#FFA500",  # orange
}

ALGORITHM_NAMES: dict[Algorithm, str] = {
    Algorithm.DIJKSTRA: "Dijkstra's",
    Algorithm.ASTAR: "A*",
    Algorithm.BFS: "BFS",
    Algorithm.DFS: "DFS",
}


def color_for(algorithm: Algorithm | str) -> str:
    return ALGORITHM_COLORS[Algorithm(algorithm)]


def display_name(algorithm: Algorithm | str) -> str:
    return ALGORITHM_NAMES[Algorithm(algorithm)]


class PathBackend(Protocol):
    async def submit(
        self, source: Location, destination: Location, algorithm: Algorithm
    ) -> Any:
        ...


class BackendPathClient:
    """Async HTTP client for the routes backend ``/api/routes/calculate``."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient | None = None):
        self._base_url = base_url.rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=15.0)

    async def submit(
        self, source: Location, destination: Location, algorithm: Algorithm
    ) -> Any:
        resp = await self._client.post(
            f"{self._base_url}/api/routes/calculate",
            json={
                "source": source.to_json_dict(),
                "destination": destination.to_json_dict(),
                "algorithm": Algorithm(algorithm).value,
            },
        )
        resp.raise_for_status()
        return resp.json()


class AlgorithmPresentation:
    """Colors, names and best-effort forwarding for algorithm labels."""

    def __init__(self, backend: PathBackend | None = None):
        self._backend = backend

    color_for = staticmethod(color_for)
    display_name = staticmethod(display_name)

    async def forward(
        self, source: Location, destination: Location, algorithm: Algorithm
    ) -> None:
        """Submit the algorithm to the backend. Never raises."""
        if self._backend is None:
            return
        try:
            await self._backend.submit(source, destination, algorithm)
        except Exception:
            logger.exception(
                "Routes backend submission failed (%s, %s -> %s)",
                Algorithm(algorithm).value, source.name, destination.name,
            )

"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
import random
from contextlib import asynccontextmanager

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from traveler.api.routes import algorithms, trips  # noqa: E402
from traveler.services.airports import AirportLocator  # noqa: E402
from traveler.services.algorithm import AlgorithmPresentation, BackendPathClient  # noqa: E402
from traveler.services.directions import GoogleDirectionsClient, RouteProvider  # noqa: E402
from traveler.services.geocoding import GeoResolver, GoogleGeocoder  # noqa: E402
from traveler.services.trip_composer import TripComposer  # noqa: E402
from traveler.services.trip_session import SessionRegistry  # noqa: E402

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:5000"


def build_session_registry(http_client: httpx.AsyncClient) -> SessionRegistry:
    """Wire the capability clients from environment configuration."""
    api_key = os.environ.get("GOOGLE_MAPS_API_KEY", "")
    if not api_key:
        logger.warning("GOOGLE_MAPS_API_KEY is not set; geocoding and directions will fail")

    seed = os.environ.get("AIRPORT_SEED")
    rng = random.Random(int(seed)) if seed else random.Random()

    backend = BackendPathClient(
        os.environ.get("ROUTES_BACKEND_URL", DEFAULT_BACKEND_URL),
        http_client=http_client,
    )
    composer = TripComposer(
        RouteProvider(GoogleDirectionsClient(api_key, http_client=http_client)),
        AirportLocator(rng),
    )
    return SessionRegistry(
        GeoResolver(GoogleGeocoder(api_key, http_client=http_client)),
        composer,
        AlgorithmPresentation(backend),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the shared HTTP client and the session registry."""
    timeout = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "15"))
    http_client = httpx.AsyncClient(timeout=timeout)
    registry = build_session_registry(http_client)
    app.state.sessions = registry
    logger.info("Trip session registry ready (http timeout %.0fs)", timeout)
    try:
        yield
    finally:
        await registry.close()
        await http_client.aclose()


app = FastAPI(
    title="Traveler Guide API",
    description="Trip planning across driving, flying, walking and transit",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trips.router, prefix="/api")
app.include_router(algorithms.router, prefix="/api")


@app.get("/api/health")
async def health():
    registry = getattr(app.state, "sessions", None)
    return {
        "status": "ok",
        "sessions": len(registry) if registry is not None else 0,
        "maps_api_configured": bool(os.environ.get("GOOGLE_MAPS_API_KEY")),
    }

"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request

from traveler.services.trip_session import SessionRegistry, TripSession


# ------------------------------------------------------------------
# Sessions (singleton registry from app.state)
# ------------------------------------------------------------------


def get_session_registry(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> TripSession:
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return session

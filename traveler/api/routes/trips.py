"""Trip session endpoints: compute, recolor, clear, notifications."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, Field

from traveler.api.deps import get_session, get_session_registry
from traveler.contracts import result as codes
from traveler.contracts.enums import Algorithm, TransportMode
from traveler.services.algorithm import color_for, display_name
from traveler.services.trip_session import SessionRegistry, TripSession

router = APIRouter(prefix="/sessions", tags=["trips"])

_FAILURE_STATUS = {
    codes.INVALID_INPUT: 400,
    codes.RESOLUTION_ERROR: 404,
    codes.DIRECTIONS_ERROR: 422,
    codes.COMPUTATION_IN_PROGRESS: 409,
    codes.UNKNOWN_FAILURE: 502,
}


class TripRequest(BaseModel):
    """Places to route between, with optional preference changes."""

    source: str = Field(default="", description="Free-text source place")
    destination: str = Field(default="", description="Free-text destination place")
    mode: TransportMode | None = None
    avoid_tolls: bool | None = None
    avoid_highways: bool | None = None
    algorithm: Algorithm | None = None


class PreferencesUpdate(BaseModel):
    mode: TransportMode | None = None
    avoid_tolls: bool | None = None
    avoid_highways: bool | None = None


class AlgorithmUpdate(BaseModel):
    algorithm: Algorithm


def _session_state(session: TripSession) -> dict[str, Any]:
    return {
        "session_id": session.id,
        "preferences": session.preferences.to_json_dict(),
        "algorithm": session.algorithm.value,
    }


@router.post("", status_code=201)
async def create_session(
    registry: SessionRegistry = Depends(get_session_registry),
) -> dict[str, Any]:
    return _session_state(registry.create())


@router.get("/{session_id}")
async def get_session_state(
    session: TripSession = Depends(get_session),
) -> dict[str, Any]:
    return _session_state(session)


@router.delete("/{session_id}", status_code=204)
async def delete_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> Response:
    if not await registry.remove(session_id):
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
    return Response(status_code=204)


@router.post("/{session_id}/trip")
async def compute_trip(
    request: TripRequest,
    session: TripSession = Depends(get_session),
) -> dict[str, Any]:
    """Compute a trip and make it the session's current one.

    Preference and algorithm fields are kept by the session only when the
    computation succeeds. On failure the previous trip and settings stay
    current and the error is returned with a status matching its code.
    """
    outcome = await session.compute(
        request.source,
        request.destination,
        mode=request.mode,
        avoid_tolls=request.avoid_tolls,
        avoid_highways=request.avoid_highways,
        algorithm=request.algorithm,
    )
    if not outcome.success:
        error = outcome.error
        raise HTTPException(
            status_code=_FAILURE_STATUS.get(error.code, 502),
            detail=error.model_dump(),
            headers={"Retry-After": "1"} if error.retryable else None,
        )
    return {
        "trip": outcome.data.to_json_dict(),
        "duration_ms": outcome.duration_ms,
    }


@router.get("/{session_id}/trip")
async def get_trip(session: TripSession = Depends(get_session)) -> dict[str, Any]:
    view = session.view()
    if view is None:
        raise HTTPException(status_code=404, detail="No trip calculated")
    return view.to_json_dict()


@router.delete("/{session_id}/trip", status_code=204)
async def clear_trip(session: TripSession = Depends(get_session)) -> Response:
    session.clear()
    return Response(status_code=204)


@router.put("/{session_id}/algorithm")
async def change_algorithm(
    request: AlgorithmUpdate,
    session: TripSession = Depends(get_session),
) -> dict[str, Any]:
    """Switch the algorithm label. Only the trip's color and name change."""
    view = session.set_algorithm(request.algorithm)
    return {
        "algorithm": request.algorithm.value,
        "algorithm_name": display_name(request.algorithm),
        "color": color_for(request.algorithm),
        "trip": view.to_json_dict() if view is not None else None,
    }


@router.put("/{session_id}/preferences")
async def update_preferences(
    request: PreferencesUpdate,
    session: TripSession = Depends(get_session),
) -> dict[str, Any]:
    prefs = session.set_preferences(
        mode=request.mode,
        avoid_tolls=request.avoid_tolls,
        avoid_highways=request.avoid_highways,
    )
    return prefs.to_json_dict()


@router.get("/{session_id}/notification")
async def get_notification(
    session: TripSession = Depends(get_session),
) -> dict[str, Any]:
    notification = session.notifier.current
    return {
        "notification": notification.to_json_dict() if notification is not None else None,
    }

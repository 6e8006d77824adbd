"""Traveler data contracts: Pydantic v2 models for trip computation.

Nothing here is persisted.

Inputs (user-owned, snapshotted per computation)
------------------------------------------------
- ``RoutePreferences``: transport mode and avoidance flags
- ``Algorithm``: presentation label, never drives geometry

Calculated
----------
- ``Location``: free text resolved through the geocoding capability
- ``Airport``: synthetic, created fresh for every flight computation
- ``TripLeg`` / ``TripResult``: legs and totals of one computation
- ``TripView``: formatted, colored snapshot of a ``TripResult`` (API DTO)
- ``Notification``: transient success/error message
"""

from traveler.contracts.enums import (
    Algorithm,
    LegKind,
    NotificationKind,
    TransportMode,
)
from traveler.contracts.common import ContractModel, GeoPoint
from traveler.contracts.result import ServiceError, ServiceResult
from traveler.contracts.trip import (
    FLIGHT_OVERHEAD_SECONDS,
    Airport,
    Location,
    RoutePreferences,
    TripLeg,
    TripResult,
    TripView,
    overhead_seconds,
)
from traveler.contracts.notification import Notification

__all__ = [
    # Enums
    "Algorithm",
    "LegKind",
    "NotificationKind",
    "TransportMode",
    # Common
    "ContractModel",
    "GeoPoint",
    # Result
    "ServiceError",
    "ServiceResult",
    # Domain models
    "FLIGHT_OVERHEAD_SECONDS",
    "Airport",
    "Location",
    "RoutePreferences",
    "TripLeg",
    "TripResult",
    "TripView",
    "overhead_seconds",
    "Notification",
]

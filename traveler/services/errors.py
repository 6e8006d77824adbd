"""Trip-computation exceptions.

Every exception carries its failure ``code`` and converts itself to a
``ServiceError`` so the session needs no lookup table.
"""

from traveler.contracts import result
from traveler.contracts.result import ServiceError


class TripError(Exception):
    """Base exception for all trip-computation errors."""

    code = result.UNKNOWN_FAILURE

    @property
    def details(self) -> dict[str, str]:
        return {}

    def as_service_error(self) -> ServiceError:
        return ServiceError(code=self.code, message=str(self), details=self.details or None)


class InvalidInput(TripError):
    """Raised when the source or destination text is empty."""

    code = result.INVALID_INPUT


class ResolutionError(TripError):
    """Raised when geocoding finds no match for a place text."""

    code = result.RESOLUTION_ERROR

    def __init__(self, place: str):
        self.place = place
        super().__init__(f"Geocoding failed for {place}")

    @property
    def details(self) -> dict[str, str]:
        return {"place": self.place}


class DirectionsError(TripError):
    """Raised when the directions capability returns no route for a leg."""

    code = result.DIRECTIONS_ERROR

    def __init__(self, origin: str, destination: str, mode: str):
        self.origin = origin
        self.destination = destination
        self.mode = mode
        super().__init__(f"No {mode} route found from {origin} to {destination}")

    @property
    def details(self) -> dict[str, str]:
        return {"origin": self.origin, "destination": self.destination, "mode": self.mode}


class ComputationInProgress(TripError):
    """Raised when a session already has a computation in flight."""

    code = result.COMPUTATION_IN_PROGRESS

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__("A route is already being calculated")


class UnknownFailure(TripError):
    """Any other unexpected failure from a collaborator."""

    code = result.UNKNOWN_FAILURE

    def __init__(self, message: str = "Error calculating route"):
        super().__init__(message)


class CapabilityError(Exception):
    """Raised by a capability client when the upstream answers with an
    unexpected status (quota, denied request, malformed payload)."""

    def __init__(self, service: str, status: str):
        self.service = service
        self.status = status
        super().__init__(f"{service} returned {status}")

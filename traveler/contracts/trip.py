"""Location, Airport, TripLeg, TripResult: the output of one trip computation.

All models here are **calculated**, never persisted. A ``TripResult`` is
built once per successful computation and replaced wholesale by the next
one; it is frozen so nothing can patch it in place.
"""

import math
from datetime import datetime, timezone
from typing import Self

from pydantic import ConfigDict, Field, model_validator

from traveler.contracts.common import ContractModel, GeoPoint
from traveler.contracts.enums import Algorithm, LegKind, TransportMode

# Airport procedures added on top of measured flight travel time
FLIGHT_OVERHEAD_SECONDS = 2 * 60 * 60


def overhead_seconds(mode: TransportMode | str) -> float:
    """Fixed additive duration applied to every trip in ``mode``."""
    return FLIGHT_OVERHEAD_SECONDS if mode == TransportMode.FLYING else 0


class Location(ContractModel):
    """A place resolved from free text. ``name`` echoes the user's input."""

    name: str = Field(..., min_length=1)
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    model_config = ConfigDict(frozen=True)

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class RoutePreferences(ContractModel):
    """User-owned routing preferences, snapshotted per computation."""

    avoid_tolls: bool = False
    avoid_highways: bool = False
    mode: TransportMode = TransportMode.DRIVING

    model_config = ConfigDict(frozen=True)


class Airport(ContractModel):
    """Synthetic airport near a location. Ephemeral, never cached."""

    position: GeoPoint
    name: str
    iata_code: str = Field(..., pattern=r"^[A-Z]{3}$")

    model_config = ConfigDict(frozen=True)


class TripLeg(ContractModel):
    """One contiguous segment of a trip with a single kind of travel."""

    kind: LegKind
    start: GeoPoint
    end: GeoPoint
    distance_meters: float = Field(..., ge=0)
    duration_seconds: float = Field(..., ge=0)
    polyline: str | None = Field(
        default=None, description="Encoded overview polyline (ground legs only)"
    )

    model_config = ConfigDict(frozen=True)


class TripResult(ContractModel):
    """Normalized result of a trip computation.

    Totals are stored, not derived, so the validator enforces them:
    distance is the sum of the legs, duration is the sum of the legs plus
    the mode overhead.
    """

    source: Location
    destination: Location
    mode: TransportMode
    legs: list[TripLeg] = Field(..., min_length=1)
    total_distance_meters: float = Field(..., ge=0)
    total_duration_seconds: float = Field(..., ge=0)
    source_airport: Airport | None = None
    dest_airport: Airport | None = None
    computed_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=timezone.utc),
        description="When this result was computed",
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_trip_integrity(self) -> Self:
        kinds = [leg.kind for leg in self.legs]
        if self.mode == TransportMode.FLYING:
            if kinds != [LegKind.GROUND, LegKind.AIR, LegKind.GROUND]:
                raise ValueError(
                    f"Flying trips need legs [ground, air, ground], got {kinds}"
                )
            if self.source_airport is None or self.dest_airport is None:
                raise ValueError("Flying trips need both airports")
        else:
            if kinds != [LegKind.GROUND]:
                raise ValueError(
                    f"{self.mode} trips need exactly one ground leg, got {kinds}"
                )
            if self.source_airport is not None or self.dest_airport is not None:
                raise ValueError(f"{self.mode} trips carry no airports")

        distance = math.fsum(leg.distance_meters for leg in self.legs)
        if not math.isclose(self.total_distance_meters, distance, abs_tol=1e-6):
            raise ValueError(
                f"total_distance_meters ({self.total_distance_meters}) "
                f"must equal the sum of leg distances ({distance})"
            )

        duration = math.fsum(leg.duration_seconds for leg in self.legs)
        duration += overhead_seconds(self.mode)
        if not math.isclose(self.total_duration_seconds, duration, abs_tol=1e-6):
            raise ValueError(
                f"total_duration_seconds ({self.total_duration_seconds}) "
                f"must equal leg durations plus overhead ({duration})"
            )

        return self

    @property
    def path(self) -> list[GeoPoint]:
        """Vertices of the drawn path, first leg start to last leg end."""
        points = [self.legs[0].start]
        points.extend(leg.end for leg in self.legs)
        return points


# ---------------------------------------------------------------------------
# API response model: presentation snapshot of a TripResult
# ---------------------------------------------------------------------------


class TripView(ContractModel):
    """What the presentation layer shows for the current trip.

    Rebuilt whenever the algorithm changes; ``result`` is carried over
    untouched so numeric fields and geometry never move.
    """

    result: TripResult
    distance_text: str
    duration_text: str
    algorithm: Algorithm
    algorithm_name: str
    color: str = Field(..., pattern=r"^#[0-9A-F]{6}$")
    path: list[GeoPoint]

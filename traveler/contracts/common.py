"""Base classes and shared types for Traveler contracts.

Unit conventions (all contracts and API responses):
- **Distances**: meters, suffix ``_meters``
- **Durations**: seconds, suffix ``_seconds``
- **Datetimes**: always UTC, ISO 8601 in serialized form
- **Coordinates**: WGS84 decimal degrees, ``lat`` / ``lng``

Display strings (``"2.50 km"``, ``"1 hr 1 min"``) are produced by the
formatter service only and never stored on a contract.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContractModel(BaseModel):
    """Base model with JSON-friendly serialization.

    - Enums serialize as string values.
    - ``to_json_dict()`` produces a JSON-safe dict (datetimes as ISO 8601).
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_json_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GeoPoint(BaseModel):
    """WGS84 geographic coordinate."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    model_config = ConfigDict(frozen=True)

    def as_param(self) -> str:
        """``"lat,lng"`` form used by the directions API."""
        return f"{self.lat},{self.lng}"

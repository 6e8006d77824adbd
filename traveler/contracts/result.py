"""Outcome of one trip computation: a view or the first failure hit.

Failure codes are stable strings; the API maps each one to an HTTP status
and the notifier shows ``message`` as is.
"""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

# Machine-readable failure codes
INVALID_INPUT = "invalid_input"
RESOLUTION_ERROR = "resolution_error"
DIRECTIONS_ERROR = "directions_error"
COMPUTATION_IN_PROGRESS = "computation_in_progress"
UNKNOWN_FAILURE = "unknown_failure"

class ServiceError(BaseModel):
    """Why a computation produced no trip.

    ``details`` carries the failing input: ``place`` for resolution
    failures, ``origin``/``destination``/``mode`` for directions failures.
    """

    code: str = Field(..., description="Machine-readable failure code")
    message: str = Field(..., description="User-facing message, shown in the error notification")
    details: dict[str, str] | None = None

    @property
    def retryable(self) -> bool:
        """Only a busy session clears up by itself."""
        return self.code == COMPUTATION_IN_PROGRESS


class ServiceResult(BaseModel, Generic[T]):
    """Outcome of one computation.

    On success: ``data`` is populated.
    On failure: ``error`` describes the first failure encountered and
    ``data`` is always ``None`` (no partial trips).
    """

    success: bool
    data: T | None = None
    error: ServiceError | None = None
    duration_ms: float | None = Field(default=None, ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @classmethod
    def ok(cls, data: T, duration_ms: float | None = None) -> "ServiceResult[T]":
        return cls(success=True, data=data, duration_ms=duration_ms)

    @classmethod
    def fail(cls, code: str, message: str, **details: str) -> "ServiceResult[T]":
        return cls.from_error(
            ServiceError(code=code, message=message, details=details or None)
        )

    @classmethod
    def from_error(cls, error: ServiceError) -> "ServiceResult[T]":
        return cls(success=False, error=error)

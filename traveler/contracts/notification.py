"""Transient user-facing notification (the UI's toast)."""

from datetime import datetime, timedelta, timezone

from pydantic import Field, computed_field

from traveler.contracts.common import ContractModel
from traveler.contracts.enums import NotificationKind

DEFAULT_TTL_SECONDS = 3.0


class Notification(ContractModel):
    """Success or error message shown after a computation.

    Expires ``ttl_seconds`` after creation regardless of later events.
    """

    message: str = Field(..., min_length=1)
    kind: NotificationKind = NotificationKind.SUCCESS
    ttl_seconds: float = Field(default=DEFAULT_TTL_SECONDS, gt=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @computed_field
    @property
    def expires_at(self) -> datetime:
        return self.created_at + timedelta(seconds=self.ttl_seconds)

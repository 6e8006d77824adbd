"""Single-slot notification holder with per-notification expiry."""

from __future__ import annotations

import asyncio
import logging

from traveler.contracts.enums import NotificationKind
from traveler.contracts.notification import DEFAULT_TTL_SECONDS, Notification

logger = logging.getLogger(__name__)


class Notifier:
    """Holds at most one live notification.

    Each notification owns its expiry task. Posting a new one cancels the
    previous task, so an old timer can never clear a newer message.
    Must be used from inside a running event loop.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS):
        self._ttl = ttl_seconds
        self._current: Notification | None = None
        self._expiry: asyncio.Task | None = None

    @property
    def current(self) -> Notification | None:
        return self._current

    def post(
        self, message: str, kind: NotificationKind = NotificationKind.SUCCESS
    ) -> Notification:
        self._cancel_expiry()
        notification = Notification(message=message, kind=kind, ttl_seconds=self._ttl)
        self._current = notification
        self._expiry = asyncio.get_running_loop().create_task(
            self._expire(notification)
        )
        logger.debug("Notification (%s): %s", notification.kind, message)
        return notification

    def success(self, message: str) -> Notification:
        return self.post(message, NotificationKind.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.post(message, NotificationKind.ERROR)

    def dismiss(self) -> None:
        self._cancel_expiry()
        self._current = None

    def _cancel_expiry(self) -> None:
        if self._expiry is not None and not self._expiry.done():
            self._expiry.cancel()
        self._expiry = None

    async def _expire(self, notification: Notification) -> None:
        await asyncio.sleep(notification.ttl_seconds)
        if self._current is notification:
            self._current = None

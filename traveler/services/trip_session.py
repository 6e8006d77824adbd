"""Trip session: the user-triggered "compute" action end to end.

A session owns the preferences/algorithm snapshot, the current
``TripResult`` and its notification. ``compute`` is atomic from the
caller's point of view: it either replaces the current result with a new
complete one, or leaves it untouched and reports a single failure.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid

from traveler.contracts.enums import Algorithm, TransportMode
from traveler.contracts.result import ServiceResult
from traveler.contracts.trip import Location, RoutePreferences, TripResult, TripView
from traveler.services.algorithm import AlgorithmPresentation
from traveler.services.errors import (
    ComputationInProgress,
    InvalidInput,
    TripError,
    UnknownFailure,
)
from traveler.services.formatter import format_distance, format_duration
from traveler.services.geocoding import GeoResolver
from traveler.services.notifier import Notifier
from traveler.services.trip_composer import TripComposer

logger = logging.getLogger(__name__)


def build_view(result: TripResult, algorithm: Algorithm) -> TripView:
    """Format and color a result for display."""
    return TripView(
        result=result,
        distance_text=format_distance(result.total_distance_meters),
        duration_text=format_duration(result.total_duration_seconds),
        algorithm=algorithm,
        algorithm_name=AlgorithmPresentation.display_name(algorithm),
        color=AlgorithmPresentation.color_for(algorithm),
        path=result.path,
    )


def _has_text(text: str | None) -> bool:
    return bool((text or "").strip())


def _apply_overrides(
    preferences: RoutePreferences,
    *,
    avoid_tolls: bool | None = None,
    avoid_highways: bool | None = None,
    mode: TransportMode | None = None,
) -> RoutePreferences:
    """Copy of ``preferences`` with every non-``None`` override applied."""
    update = {}
    if avoid_tolls is not None:
        update["avoid_tolls"] = avoid_tolls
    if avoid_highways is not None:
        update["avoid_highways"] = avoid_highways
    if mode is not None:
        update["mode"] = TransportMode(mode)
    if not update:
        return preferences
    return preferences.model_copy(update=update)


class TripSession:
    """State and orchestration for one user's trip planning.

    Only one computation may be in flight per session; an overlapping
    ``compute`` call is rejected, not queued.
    """

    def __init__(
        self,
        resolver: GeoResolver,
        composer: TripComposer,
        presentation: AlgorithmPresentation,
        notifier: Notifier | None = None,
        session_id: str | None = None,
    ):
        self.id = session_id or uuid.uuid4().hex
        self._resolver = resolver
        self._composer = composer
        self._presentation = presentation
        self.notifier = notifier or Notifier()

        self._preferences = RoutePreferences()
        self._algorithm = Algorithm.ASTAR
        self._result: TripResult | None = None
        self._in_flight = False
        self._background: set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    @property
    def preferences(self) -> RoutePreferences:
        return self._preferences

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def result(self) -> TripResult | None:
        return self._result

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def view(self) -> TripView | None:
        if self._result is None:
            return None
        return build_view(self._result, self._algorithm)

    def set_preferences(
        self,
        *,
        avoid_tolls: bool | None = None,
        avoid_highways: bool | None = None,
        mode: TransportMode | None = None,
    ) -> RoutePreferences:
        """Update the snapshot used by the next computation."""
        self._preferences = _apply_overrides(
            self._preferences,
            avoid_tolls=avoid_tolls,
            avoid_highways=avoid_highways,
            mode=mode,
        )
        return self._preferences

    def set_transport_mode(self, mode: TransportMode) -> RoutePreferences:
        return self.set_preferences(mode=mode)

    def set_algorithm(self, algorithm: Algorithm) -> TripView | None:
        """Change the algorithm label.

        Only presentation changes: the current ``TripResult`` object is
        kept as is and re-colored.
        """
        self._algorithm = Algorithm(algorithm)
        return self.view()

    def clear(self) -> None:
        self._result = None

    # ------------------------------------------------------------------
    # Compute
    # ------------------------------------------------------------------

    async def compute(
        self,
        source_text: str,
        destination_text: str,
        *,
        mode: TransportMode | None = None,
        avoid_tolls: bool | None = None,
        avoid_highways: bool | None = None,
        algorithm: Algorithm | None = None,
    ) -> ServiceResult[TripView]:
        """Resolve both places, compose the trip, format it.

        ``mode``, ``avoid_tolls``, ``avoid_highways`` and ``algorithm``
        override the session snapshot for this computation only. They are
        committed to the session together with the new result; a rejected
        or failed computation leaves preferences, algorithm and the current
        result untouched and posts an error notification.
        """
        if self._in_flight:
            logger.warning("Session %s: computation already in flight", self.id)
            return ServiceResult.from_error(
                ComputationInProgress(self.id).as_service_error()
            )

        if not _has_text(source_text) or not _has_text(destination_text):
            exc = InvalidInput("Please enter both source and destination")
            logger.info("Session %s: %s", self.id, exc)
            self.notifier.error(str(exc))
            return ServiceResult.from_error(exc.as_service_error())

        preferences = _apply_overrides(
            self._preferences,
            mode=mode,
            avoid_tolls=avoid_tolls,
            avoid_highways=avoid_highways,
        )
        algorithm = Algorithm(algorithm) if algorithm is not None else self._algorithm
        self._in_flight = True
        start = time.perf_counter()
        try:
            result = await self._run(source_text, destination_text, preferences, algorithm)
        except TripError as exc:
            logger.info("Session %s: trip computation failed: %s", self.id, exc)
            self.notifier.error(str(exc))
            return ServiceResult.from_error(exc.as_service_error())
        except Exception:
            logger.exception("Session %s: unexpected failure computing route", self.id)
            exc = UnknownFailure()
            self.notifier.error(str(exc))
            return ServiceResult.from_error(exc.as_service_error())
        finally:
            self._in_flight = False

        self._preferences = preferences
        self._algorithm = algorithm
        self._result = result
        view = build_view(result, algorithm)
        self.notifier.success(f"Route calculated using {view.algorithm_name} algorithm")
        return ServiceResult.ok(view, duration_ms=(time.perf_counter() - start) * 1000)

    async def _run(
        self,
        source_text: str,
        destination_text: str,
        preferences: RoutePreferences,
        algorithm: Algorithm,
    ) -> TripResult:
        source, destination = await self._resolve_both(source_text, destination_text)
        self._forward_in_background(source, destination, algorithm)

        return await self._composer.compose(
            source, destination, preferences.mode, preferences, algorithm
        )

    async def _resolve_both(
        self, source_text: str, destination_text: str
    ) -> tuple[Location, Location]:
        """Resolve both endpoints concurrently; the first failure wins."""
        tasks = [
            asyncio.ensure_future(self._resolver.resolve(source_text)),
            asyncio.ensure_future(self._resolver.resolve(destination_text)),
        ]
        try:
            source, destination = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            # Drain the discarded call so its outcome is never reported
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return source, destination

    def _forward_in_background(
        self, source: Location, destination: Location, algorithm: Algorithm
    ) -> None:
        task = asyncio.ensure_future(
            self._presentation.forward(source, destination, algorithm)
        )
        self._background.add(task)
        task.add_done_callback(self._background.discard)

    async def close(self) -> None:
        """Cancel background work and the pending notification expiry."""
        pending = list(self._background)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self.notifier.dismiss()


class SessionRegistry:
    """In-memory map of session id to ``TripSession``."""

    def __init__(
        self,
        resolver: GeoResolver,
        composer: TripComposer,
        presentation: AlgorithmPresentation,
    ):
        self._resolver = resolver
        self._composer = composer
        self._presentation = presentation
        self._sessions: dict[str, TripSession] = {}

    def create(self) -> TripSession:
        session = TripSession(self._resolver, self._composer, self._presentation)
        self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> TripSession | None:
        return self._sessions.get(session_id)

    async def remove(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        await session.close()
        return True

    async def close(self) -> None:
        for session_id in list(self._sessions):
            await self.remove(session_id)

    def __len__(self) -> int:
        return len(self._sessions)

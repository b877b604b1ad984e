"""Multi-provider aggregation for a selected city."""

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from functools import partial
from typing import TYPE_CHECKING, Any

from citysearch.aggregation.steps import StepOutcome, run_step
from citysearch.aggregation.window import event_window
from citysearch.data import (
    AggregatedResult,
    CitySuggestion,
    EventSummary,
    SearchLifecycleState,
)
from citysearch.errors import SearchInProgressError, ValidationError
from citysearch.providers.base import (
    EventsProvider,
    PhotoProvider,
    SummaryProvider,
    WeatherProvider,
)
from citysearch.state.store import ViewStateStore

if TYPE_CHECKING:
    from citysearch.run_logger import SearchRunLogger, SearchRunRecord

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class AggregationOrchestrator:
    """Query weather, events, photo and summary providers for one city.

    Flow:
    1. Weather (fatal): on failure the search aborts, the store shows the
       generic error and the lifecycle becomes FAILED.
    2. Events, photo, summary (best-effort): each failure leaves only its own
       field empty. Run sequentially, or concurrently when
       ``parallel_enrichment`` is set.
    3. The store receives the result and the lifecycle becomes SUCCEEDED.

    The lifecycle always leaves LOADING. If the input is edited while a search
    is in flight, the store ignores that search's writes.

    Args:
        store: View state to publish lifecycle, result and errors to.
        weather: Weather provider.
        events: Events provider.
        photo: Optional photo provider; when None, ``photo_url`` stays empty.
        summary: Optional summary provider; when None, ``summary`` stays empty.
        events_page_size: Maximum number of events to request.
        photo_orientation: Orientation filter for the photo query.
        parallel_enrichment: Run the best-effort steps concurrently.
        run_logger: Optional SearchRunLogger for per-step diagnostics.
        clock: Returns the current time; used for the events window.
    """

    def __init__(
        self,
        store: ViewStateStore,
        *,
        weather: WeatherProvider,
        events: EventsProvider,
        photo: PhotoProvider | None = None,
        summary: SummaryProvider | None = None,
        events_page_size: int = 5,
        photo_orientation: str = "landscape",
        parallel_enrichment: bool = False,
        run_logger: "SearchRunLogger | None" = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._weather = weather
        self._events = events
        self._photo = photo
        self._summary = summary
        self._events_page_size = events_page_size
        self._photo_orientation = photo_orientation
        self._parallel = parallel_enrichment
        self._run_logger = run_logger
        self._clock = clock
        self._components = {
            "weather": type(weather).__name__,
            "events": type(events).__name__,
            "photo": type(photo).__name__,
            "summary": type(summary).__name__,
        }

    async def search(self, city: CitySuggestion | None) -> AggregatedResult:
        """Aggregate provider data for ``city``.

        Args:
            city: The confirmed selection.

        Returns:
            The aggregated result. If the input changed while the search was
            running, the result is returned but not published to the store.

        Raises:
            ValidationError: No city selected; no provider is called.
            SearchInProgressError: Another search is still loading.
            ProviderError: The weather provider failed.
        """
        if city is None or not city.name:
            error = ValidationError("no city selected")
            self._store.set_error(error.user_message)
            raise error
        if self._store.lifecycle is SearchLifecycleState.LOADING:
            raise SearchInProgressError("a search is already in progress")

        record: "SearchRunRecord | None" = None
        if self._run_logger:
            record = self._run_logger.start_run(city)

        epoch = self._store.begin_search()
        result: AggregatedResult | None = None
        try:
            # Step 1: weather is the anchor dataset
            weather = await run_step("weather", partial(self._weather.current, city.name))
            self._log_step(record, weather)
            if weather.error is not None:
                logger.error(f"Search for {city.full_name} failed: {weather.error}")
                self._store.fail_search(epoch, weather.error.user_message)
                raise weather.error from weather.error.cause

            # Step 2: best-effort enrichment
            events, photo, summary = await self._enrich(city, record)

            result = AggregatedResult(
                city=city,
                weather=weather.value,
                events=tuple(events.value or ()),
                photo_url=photo.value,
                summary=summary.value,
            )
            if not self._store.complete_search(epoch, result):
                logger.info(f"Input changed during search for {city.full_name}; result dropped")
            return result
        finally:
            self._store.finish_search(epoch)
            if self._run_logger:
                lifecycle = (
                    SearchLifecycleState.SUCCEEDED
                    if result is not None
                    else SearchLifecycleState.FAILED
                )
                self._run_logger.finish_run(record, result, lifecycle)

    async def _enrich(
        self, city: CitySuggestion, record: "SearchRunRecord | None"
    ) -> tuple[
        StepOutcome[list[EventSummary]],
        StepOutcome[str | None],
        StepOutcome[str | None],
    ]:
        if self._parallel:
            events, photo, summary = await asyncio.gather(
                run_step("events", partial(self._fetch_events, city)),
                run_step("photo", partial(self._fetch_photo, city)),
                run_step("summary", partial(self._fetch_summary, city)),
            )
        else:
            events = await run_step("events", partial(self._fetch_events, city))
            photo = await run_step("photo", partial(self._fetch_photo, city))
            summary = await run_step("summary", partial(self._fetch_summary, city))

        for outcome in (events, photo, summary):
            self._log_step(record, outcome)
        return (events, photo, summary)

    async def _fetch_events(self, city: CitySuggestion) -> list[EventSummary]:
        start, end = event_window(self._clock())
        return await self._events.upcoming(
            city.name,
            start=start,
            end=end,
            size=self._events_page_size,
        )

    async def _fetch_photo(self, city: CitySuggestion) -> str | None:
        if self._photo is None:
            return None
        return await self._photo.find_photo(
            f"{city.name} city",
            orientation=self._photo_orientation,
        )

    async def _fetch_summary(self, city: CitySuggestion) -> str | None:
        if self._summary is None:
            return None
        return await self._summary.summary(city.name)

    def _log_step(self, record: "SearchRunRecord | None", outcome: StepOutcome[Any]) -> None:
        if self._run_logger:
            self._run_logger.log_step(record, outcome, self._components[outcome.step])

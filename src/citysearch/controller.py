"""Entry points the presentation layer drives."""

import logging
from collections.abc import Callable
from types import TracebackType

from citysearch.aggregation.orchestrator import AggregationOrchestrator
from citysearch.data import AggregatedResult, CitySuggestion
from citysearch.errors import CitySearchError, SearchInProgressError
from citysearch.state.store import ViewState, ViewStateStore
from citysearch.suggestions.debounce import DEFAULT_DEBOUNCE_SECONDS, Debouncer
from citysearch.suggestions.dedup import deduplicate
from citysearch.suggestions.fetcher import SuggestionFetcher

logger = logging.getLogger(__name__)


class SearchController:
    """Owns the view state and routes input, picks and searches through it.

    Flow:
    1. ``on_input_change``: clear stale state, debounce a suggestion lookup.
    2. ``on_suggestion_pick``: confirm a city.
    3. ``on_search_trigger``: aggregate provider data for the confirmed city.

    Must be used from within a running event loop. Use as an async context
    manager (or call ``aclose``) so a pending lookup is cancelled on teardown.

    Args:
        store: View state owned by this controller.
        fetcher: Suggestion fetcher.
        orchestrator: Aggregation orchestrator publishing to ``store``.
        debounce_seconds: Quiet period before a suggestion lookup fires.
    """

    def __init__(
        self,
        store: ViewStateStore,
        fetcher: SuggestionFetcher,
        orchestrator: AggregationOrchestrator,
        *,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._store = store
        self._fetcher = fetcher
        self._orchestrator = orchestrator
        self._debouncer = Debouncer(debounce_seconds)

    @property
    def state(self) -> ViewState:
        return self._store.snapshot()

    def subscribe(self, listener: Callable[[ViewState], None]) -> Callable[[], None]:
        return self._store.subscribe(listener)

    def on_input_change(self, text: str) -> None:
        generation = self._store.clear_on_edit(text)
        self._debouncer.schedule(lambda: self._refresh_suggestions(text, generation))

    def on_suggestion_pick(self, suggestion: CitySuggestion) -> None:
        self._debouncer.cancel()
        self._store.select(suggestion)

    async def on_search_trigger(self) -> AggregatedResult | None:
        """Run a search for the current selection.

        Returns:
            The aggregated result, or None if the search was refused or
            failed. The store carries the user-facing error text.
        """
        try:
            return await self._orchestrator.search(self._store.selection.current)
        except SearchInProgressError as e:
            logger.info(f"Search not started: {e}")
            self._store.set_error(e.user_message)
            return None
        except CitySearchError as e:
            logger.info(f"Search not completed: {e}")
            return None

    async def flush_suggestions(self) -> None:
        """Run a pending suggestion lookup now instead of waiting for the timer."""
        await self._debouncer.flush()

    async def aclose(self) -> None:
        await self._debouncer.aclose()

    async def __aenter__(self) -> "SearchController":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _refresh_suggestions(self, text: str, generation: int) -> None:
        raw = await self._fetcher.fetch(text)
        self._store.set_suggestions(generation, deduplicate(raw))

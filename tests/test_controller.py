"""Tests for SearchController."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from citysearch.aggregation import AggregationOrchestrator
from citysearch.controller import SearchController
from citysearch.data import (
    CitySuggestion,
    RawSuggestion,
    SearchLifecycleState,
    WeatherSnapshot,
)
from citysearch.errors import (
    GENERIC_FAILURE_MESSAGE,
    NO_SELECTION_MESSAGE,
    SearchInProgressError,
)
from citysearch.state import ViewState, ViewStateStore
from citysearch.suggestions import SuggestionFetcher

PARIS = CitySuggestion(name="Paris", country="France")

WEATHER = WeatherSnapshot(
    location_name="Paris",
    latitude=48.87,
    longitude=2.33,
    local_time="2026-10-19 14:05",
    temperature_c=14.0,
    condition_text="Sunny",
)


@pytest.fixture
def geocoding() -> MagicMock:
    provider = MagicMock()
    provider.find_cities = AsyncMock(
        return_value=[
            RawSuggestion(name="Paris", country="France"),
            RawSuggestion(name="Paris", country="France"),
            RawSuggestion(name="Paris", country="United States of America"),
        ]
    )
    return provider


@pytest.fixture
def weather() -> MagicMock:
    provider = MagicMock()
    provider.current = AsyncMock(return_value=WEATHER)
    return provider


@pytest.fixture
def events() -> MagicMock:
    provider = MagicMock()
    provider.upcoming = AsyncMock(return_value=[])
    return provider


@pytest.fixture
def store() -> ViewStateStore:
    return ViewStateStore()


@pytest.fixture
def controller(
    store: ViewStateStore,
    geocoding: MagicMock,
    weather: MagicMock,
    events: MagicMock,
) -> SearchController:
    orchestrator = AggregationOrchestrator(store, weather=weather, events=events)
    return SearchController(
        store,
        SuggestionFetcher(geocoding),
        orchestrator,
        debounce_seconds=10.0,
    )


class TestSuggestions:
    """Tests for typing and picking."""

    async def test_only_last_query_is_fetched(
        self, controller: SearchController, geocoding: MagicMock
    ) -> None:
        controller.on_input_change("Par")
        controller.on_input_change("Pari")
        controller.on_input_change("Paris")

        await controller.flush_suggestions()

        geocoding.find_cities.assert_awaited_once_with("Paris", limit=10)

    async def test_suggestions_are_deduplicated(self, controller: SearchController) -> None:
        controller.on_input_change("Paris")
        await controller.flush_suggestions()

        assert [s.full_name for s in controller.state.suggestions] == [
            "Paris, France",
            "Paris, United States of America",
        ]

    async def test_short_query_makes_no_request(
        self, controller: SearchController, geocoding: MagicMock
    ) -> None:
        controller.on_input_change("Pa")
        await controller.flush_suggestions()

        geocoding.find_cities.assert_not_called()
        assert controller.state.suggestions == ()

    async def test_lookup_failure_shows_nothing(
        self, controller: SearchController, geocoding: MagicMock
    ) -> None:
        geocoding.find_cities.side_effect = httpx.ConnectError("offline")

        controller.on_input_change("Paris")
        await controller.flush_suggestions()

        assert controller.state.suggestions == ()
        assert controller.state.error is None

    async def test_debounce_fires_after_quiet_period(
        self,
        store: ViewStateStore,
        geocoding: MagicMock,
        weather: MagicMock,
        events: MagicMock,
    ) -> None:
        orchestrator = AggregationOrchestrator(store, weather=weather, events=events)
        async with SearchController(
            store, SuggestionFetcher(geocoding), orchestrator, debounce_seconds=0.01
        ) as controller:
            controller.on_input_change("Paris")
            geocoding.find_cities.assert_not_called()

            await asyncio.sleep(0.1)

            geocoding.find_cities.assert_awaited_once()
            assert len(controller.state.suggestions) == 2

    async def test_in_flight_lookup_superseded_by_new_input(
        self,
        store: ViewStateStore,
        geocoding: MagicMock,
        weather: MagicMock,
        events: MagicMock,
    ) -> None:
        gate = asyncio.Event()

        async def find_cities(prefix: str, *, limit: int = 10) -> list[RawSuggestion]:
            if prefix == "Par":
                await gate.wait()
                return [RawSuggestion(name="Paris", country="France")]
            return [RawSuggestion(name="Lyon", country="France")]

        geocoding.find_cities.side_effect = find_cities
        orchestrator = AggregationOrchestrator(store, weather=weather, events=events)
        controller = SearchController(
            store, SuggestionFetcher(geocoding), orchestrator, debounce_seconds=0
        )

        controller.on_input_change("Par")
        await asyncio.sleep(0.01)
        assert geocoding.find_cities.await_count == 1

        controller.on_input_change("Lyo")
        gate.set()
        await controller.flush_suggestions()

        assert [s.name for s in controller.state.suggestions] == ["Lyon"]
        await controller.aclose()

    async def test_pick_cancels_pending_lookup(
        self, controller: SearchController, geocoding: MagicMock
    ) -> None:
        controller.on_input_change("Par")
        controller.on_suggestion_pick(PARIS)
        await controller.flush_suggestions()

        geocoding.find_cities.assert_not_called()
        state = controller.state
        assert state.selection == PARIS
        assert state.suggestions == ()
        assert state.query == "Paris, France"

    async def test_edit_after_pick_clears_selection(self, controller: SearchController) -> None:
        controller.on_suggestion_pick(PARIS)
        controller.on_input_change("Paris, Franc")

        assert controller.state.selection is None
        assert not controller.state.can_search
        await controller.aclose()


class TestSearchTrigger:
    """Tests for running a search through the controller."""

    async def test_search_without_selection(
        self, controller: SearchController, weather: MagicMock
    ) -> None:
        result = await controller.on_search_trigger()

        assert result is None
        weather.current.assert_not_called()
        assert controller.state.error == NO_SELECTION_MESSAGE

    async def test_full_flow(
        self, controller: SearchController, weather: MagicMock
    ) -> None:
        controller.on_input_change("Paris")
        await controller.flush_suggestions()
        controller.on_suggestion_pick(controller.state.suggestions[0])

        result = await controller.on_search_trigger()

        assert result is not None
        assert result.city == PARIS
        assert result.weather == WEATHER
        weather.current.assert_awaited_once_with("Paris")
        assert controller.state.lifecycle is SearchLifecycleState.SUCCEEDED
        assert controller.state.result is result

    async def test_weather_failure(
        self, controller: SearchController, weather: MagicMock
    ) -> None:
        weather.current.side_effect = httpx.ConnectError("offline")
        controller.on_suggestion_pick(PARIS)

        result = await controller.on_search_trigger()

        assert result is None
        state = controller.state
        assert state.lifecycle is SearchLifecycleState.FAILED
        assert state.error == GENERIC_FAILURE_MESSAGE
        assert state.result is None

    async def test_search_while_loading_shows_message(
        self, controller: SearchController, store: ViewStateStore, weather: MagicMock
    ) -> None:
        controller.on_suggestion_pick(PARIS)
        store.begin_search()

        result = await controller.on_search_trigger()

        assert result is None
        weather.current.assert_not_called()
        assert controller.state.error == SearchInProgressError.user_message
        assert controller.state.lifecycle is SearchLifecycleState.LOADING

    async def test_input_change_clears_result(self, controller: SearchController) -> None:
        controller.on_suggestion_pick(PARIS)
        await controller.on_search_trigger()

        controller.on_input_change("Lon")

        state = controller.state
        assert state.result is None
        assert state.selection is None
        assert state.error is None
        await controller.aclose()


class TestLifecycle:
    """Tests for teardown and listeners."""

    async def test_context_manager_cancels_pending_lookup(
        self, controller: SearchController, geocoding: MagicMock
    ) -> None:
        async with controller:
            controller.on_input_change("Paris")

        await asyncio.sleep(0)
        geocoding.find_cities.assert_not_called()

    async def test_subscribe(self, controller: SearchController) -> None:
        received: list[ViewState] = []
        unsubscribe = controller.subscribe(received.append)

        controller.on_suggestion_pick(PARIS)
        await controller.on_search_trigger()
        unsubscribe()

        lifecycles = [s.lifecycle for s in received]
        assert SearchLifecycleState.LOADING in lifecycles
        assert lifecycles[-1] is SearchLifecycleState.SUCCEEDED

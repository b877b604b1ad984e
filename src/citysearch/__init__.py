"""citysearch: city suggestions and multi-provider city lookups."""

from citysearch.aggregation import (
    AggregationOrchestrator,
    StepOutcome,
    event_window,
    get_upcoming_sunday,
    run_step,
)
from citysearch.config import CitySearchConfig, create_from_config, load_config
from citysearch.controller import SearchController
from citysearch.data import (
    AggregatedResult,
    CitySuggestion,
    EventSummary,
    RawSuggestion,
    SearchLifecycleState,
    WeatherSnapshot,
)
from citysearch.errors import (
    CitySearchError,
    ProviderError,
    SearchInProgressError,
    ValidationError,
)
from citysearch.providers import (
    EventsProvider,
    GeocodingProvider,
    GeoDBProvider,
    PhotoProvider,
    SummaryProvider,
    TicketmasterProvider,
    UnsplashProvider,
    WeatherAPIProvider,
    WeatherProvider,
    WikipediaProvider,
)
from citysearch.run_logger import SearchRunLogger
from citysearch.state import SelectionState, ViewState, ViewStateStore
from citysearch.suggestions import Debouncer, SuggestionFetcher, deduplicate

__all__ = [
    # Models
    "AggregatedResult",
    "CitySuggestion",
    "EventSummary",
    "RawSuggestion",
    "SearchLifecycleState",
    "WeatherSnapshot",
    # Errors
    "CitySearchError",
    "ProviderError",
    "SearchInProgressError",
    "ValidationError",
    # Protocols
    "EventsProvider",
    "GeocodingProvider",
    "PhotoProvider",
    "SummaryProvider",
    "WeatherProvider",
    # Providers
    "GeoDBProvider",
    "TicketmasterProvider",
    "UnsplashProvider",
    "WeatherAPIProvider",
    "WikipediaProvider",
    # Suggestions
    "Debouncer",
    "SuggestionFetcher",
    "deduplicate",
    # State
    "SelectionState",
    "ViewState",
    "ViewStateStore",
    # Aggregation
    "AggregationOrchestrator",
    "StepOutcome",
    "event_window",
    "get_upcoming_sunday",
    "run_step",
    # Controller
    "SearchController",
    # Logging
    "SearchRunLogger",
    # Config
    "CitySearchConfig",
    "create_from_config",
    "load_config",
]

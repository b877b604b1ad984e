"""Factory functions to create components from configuration."""

from pathlib import Path

from citysearch.aggregation.orchestrator import AggregationOrchestrator
from citysearch.config.models import (
    CitySearchConfig,
    GeoDBConfig,
    TicketmasterConfig,
    UnsplashConfig,
    WeatherAPIConfig,
    WikipediaConfig,
)
from citysearch.controller import SearchController
from citysearch.providers.base import (
    EventsProvider,
    GeocodingProvider,
    PhotoProvider,
    SummaryProvider,
    WeatherProvider,
)
from citysearch.providers.geodb import GeoDBProvider
from citysearch.providers.ticketmaster import TicketmasterProvider
from citysearch.providers.unsplash import UnsplashProvider
from citysearch.providers.weatherapi import WeatherAPIProvider
from citysearch.providers.wikipedia import WikipediaProvider
from citysearch.run_logger import SearchRunLogger
from citysearch.state.store import ViewStateStore
from citysearch.suggestions.fetcher import SuggestionFetcher


def create_geocoding_provider(config: GeoDBConfig) -> GeocodingProvider:
    """Create a geocoding provider from config.

    Uses explicit type matching rather than getattr.
    """
    if isinstance(config, GeoDBConfig):
        return GeoDBProvider(timeout=config.timeout)
    msg = f"Unknown geocoding config type: {type(config)}"
    raise ValueError(msg)


def create_weather_provider(config: WeatherAPIConfig) -> WeatherProvider:
    """Create a weather provider from config."""
    if isinstance(config, WeatherAPIConfig):
        return WeatherAPIProvider(timeout=config.timeout)
    msg = f"Unknown weather config type: {type(config)}"
    raise ValueError(msg)


def create_events_provider(config: TicketmasterConfig) -> EventsProvider:
    """Create an events provider from config."""
    if isinstance(config, TicketmasterConfig):
        return TicketmasterProvider(timeout=config.timeout)
    msg = f"Unknown events config type: {type(config)}"
    raise ValueError(msg)


def create_photo_provider(config: UnsplashConfig | None) -> PhotoProvider | None:
    """Create a photo provider from config, or None when disabled."""
    if config is None:
        return None
    if isinstance(config, UnsplashConfig):
        return UnsplashProvider(timeout=config.timeout)
    msg = f"Unknown photo config type: {type(config)}"
    raise ValueError(msg)


def create_summary_provider(config: WikipediaConfig | None) -> SummaryProvider | None:
    """Create a summary provider from config, or None when disabled."""
    if config is None:
        return None
    if isinstance(config, WikipediaConfig):
        if config.user_agent:
            return WikipediaProvider(timeout=config.timeout, user_agent=config.user_agent)
        return WikipediaProvider(timeout=config.timeout)
    msg = f"Unknown summary config type: {type(config)}"
    raise ValueError(msg)


def create_controller(
    config: CitySearchConfig,
    run_logger: SearchRunLogger | None = None,
) -> SearchController:
    """Create a SearchController and its collaborators from config."""
    store = ViewStateStore()
    providers = config.providers

    fetcher = SuggestionFetcher(
        create_geocoding_provider(providers.geocoding),
        min_query_length=config.suggestions.min_query_length,
        limit=config.suggestions.limit,
    )
    orchestrator = AggregationOrchestrator(
        store,
        weather=create_weather_provider(providers.weather),
        events=create_events_provider(providers.events),
        photo=create_photo_provider(providers.photo),
        summary=create_summary_provider(providers.summary),
        events_page_size=config.aggregation.events_page_size,
        photo_orientation=config.aggregation.photo_orientation,
        parallel_enrichment=config.aggregation.parallel_enrichment,
        run_logger=run_logger,
    )
    return SearchController(
        store,
        fetcher,
        orchestrator,
        debounce_seconds=config.suggestions.debounce_seconds,
    )


def create_from_config(
    config: CitySearchConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[SearchController, SearchRunLogger | None]:
    """Create a complete controller from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (controller, run_logger).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: SearchRunLogger | None = None
    if log_enabled:
        run_logger = SearchRunLogger(log_dir=log_dir, enabled=True)

    controller = create_controller(config, run_logger=run_logger)
    return (controller, run_logger)

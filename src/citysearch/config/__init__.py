"""Configuration module for citysearch."""

from citysearch.config.factory import create_controller, create_from_config
from citysearch.config.loader import get_default_config_path, load_config
from citysearch.config.models import (
    AggregationConfig,
    CitySearchConfig,
    GeoDBConfig,
    LoggingConfig,
    ProvidersConfig,
    SuggestionConfig,
    TicketmasterConfig,
    UnsplashConfig,
    WeatherAPIConfig,
    WikipediaConfig,
)

__all__ = [
    "AggregationConfig",
    "CitySearchConfig",
    "GeoDBConfig",
    "LoggingConfig",
    "ProvidersConfig",
    "SuggestionConfig",
    "TicketmasterConfig",
    "UnsplashConfig",
    "WeatherAPIConfig",
    "WikipediaConfig",
    "create_controller",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]

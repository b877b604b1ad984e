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

__all__ = [
    "EventsProvider",
    "GeoDBProvider",
    "GeocodingProvider",
    "PhotoProvider",
    "SummaryProvider",
    "TicketmasterProvider",
    "UnsplashProvider",
    "WeatherAPIProvider",
    "WeatherProvider",
    "WikipediaProvider",
]

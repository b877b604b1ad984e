"""Data models for citysearch."""

from citysearch.data.models import (
    AggregatedResult,
    CitySuggestion,
    EventSummary,
    RawSuggestion,
    SearchLifecycleState,
    WeatherSnapshot,
)

__all__ = [
    "AggregatedResult",
    "CitySuggestion",
    "EventSummary",
    "RawSuggestion",
    "SearchLifecycleState",
    "WeatherSnapshot",
]

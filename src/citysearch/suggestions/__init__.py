"""Incremental suggestion pipeline: debounce, lookup, dedup."""

from citysearch.suggestions.debounce import DEFAULT_DEBOUNCE_SECONDS, Debouncer
from citysearch.suggestions.dedup import deduplicate
from citysearch.suggestions.fetcher import SuggestionFetcher

__all__ = [
    "DEFAULT_DEBOUNCE_SECONDS",
    "Debouncer",
    "SuggestionFetcher",
    "deduplicate",
]

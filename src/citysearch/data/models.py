"""Core data models for citysearch."""

from dataclasses import dataclass, field
from enum import StrEnum


class SearchLifecycleState(StrEnum):
    """Lifecycle of an aggregation search, as seen by the view layer."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RawSuggestion:
    """A single geocoding hit for a partial city name."""

    name: str
    country: str


@dataclass(frozen=True)
class CitySuggestion:
    """A displayable city candidate.

    ``full_name`` is both the display label and the deduplication key.
    """

    name: str
    country: str
    full_name: str = ""

    def __post_init__(self) -> None:
        if not self.full_name:
            object.__setattr__(self, "full_name", f"{self.name}, {self.country}")

    @classmethod
    def from_raw(cls, raw: RawSuggestion) -> "CitySuggestion":
        return cls(name=raw.name, country=raw.country)


@dataclass(frozen=True)
class WeatherSnapshot:
    """Current conditions for a location."""

    location_name: str
    latitude: float
    longitude: float
    local_time: str
    temperature_c: float
    condition_text: str
    condition_icon: str = ""


@dataclass(frozen=True)
class EventSummary:
    """An upcoming event in the selected city."""

    name: str
    start_date: str | None = None
    ticket_url: str | None = None


@dataclass(frozen=True)
class AggregatedResult:
    """Combined provider data for one city.

    Every field is independently optional: a best-effort provider failing
    leaves only its own field empty.
    """

    city: CitySuggestion
    weather: WeatherSnapshot | None = None
    events: tuple[EventSummary, ...] = field(default_factory=tuple)
    photo_url: str | None = None
    summary: str | None = None

"""Pydantic configuration models for citysearch components."""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================
# Provider Configs
# ============================================================


class GeoDBConfig(BaseModel):
    """Configuration for GeoDBProvider."""

    type: Literal["geodb"] = "geodb"
    timeout: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}


class WeatherAPIConfig(BaseModel):
    """Configuration for WeatherAPIProvider."""

    type: Literal["weatherapi"] = "weatherapi"
    timeout: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}


class TicketmasterConfig(BaseModel):
    """Configuration for TicketmasterProvider."""

    type: Literal["ticketmaster"] = "ticketmaster"
    timeout: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}


class UnsplashConfig(BaseModel):
    """Configuration for UnsplashProvider."""

    type: Literal["unsplash"] = "unsplash"
    timeout: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}


class WikipediaConfig(BaseModel):
    """Configuration for WikipediaProvider."""

    type: Literal["wikipedia"] = "wikipedia"
    timeout: float = Field(default=10.0, gt=0)
    user_agent: str | None = None

    model_config = {"frozen": True}


class ProvidersConfig(BaseModel):
    """Upstream data providers. ``photo`` and ``summary`` may be disabled with null."""

    geocoding: GeoDBConfig = Field(default_factory=GeoDBConfig)
    weather: WeatherAPIConfig = Field(default_factory=WeatherAPIConfig)
    events: TicketmasterConfig = Field(default_factory=TicketmasterConfig)
    photo: UnsplashConfig | None = Field(default_factory=UnsplashConfig)
    summary: WikipediaConfig | None = Field(default_factory=WikipediaConfig)

    model_config = {"frozen": True}


# ============================================================
# Pipeline Configs
# ============================================================


class SuggestionConfig(BaseModel):
    """Configuration for the incremental suggestion pipeline."""

    debounce_seconds: float = Field(default=0.5, ge=0)
    min_query_length: int = Field(default=3, ge=1)
    limit: int = Field(default=10, ge=1, le=10)

    model_config = {"frozen": True}


class AggregationConfig(BaseModel):
    """Configuration for the aggregation orchestrator."""

    events_page_size: int = Field(default=5, ge=1, le=200)
    photo_orientation: Literal["landscape", "portrait", "squarish"] = "landscape"
    parallel_enrichment: bool = False

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-search JSON run logs."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class CitySearchConfig(BaseModel):
    """Root configuration for citysearch."""

    suggestions: SuggestionConfig = Field(default_factory=SuggestionConfig)
    aggregation: AggregationConfig = Field(default_factory=AggregationConfig)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}

"""Multi-provider aggregation pipeline."""

from citysearch.aggregation.orchestrator import AggregationOrchestrator
from citysearch.aggregation.steps import StepOutcome, run_step
from citysearch.aggregation.window import event_window, get_upcoming_sunday

__all__ = [
    "AggregationOrchestrator",
    "StepOutcome",
    "event_window",
    "get_upcoming_sunday",
    "run_step",
]

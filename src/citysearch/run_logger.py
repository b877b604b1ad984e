"""Run logger for recording each search's provider steps to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from citysearch.aggregation.steps import StepOutcome
from citysearch.data import AggregatedResult, CitySuggestion, SearchLifecycleState


class StepRecord(BaseModel):
    """Record of a single provider step."""

    step: str
    component: str
    ok: bool
    output: Any = None
    error: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class SearchRunRecord(BaseModel):
    """Record of a complete search."""

    run_id: str
    city: dict[str, Any]
    started_at: str
    completed_at: str | None = None
    steps: list[StepRecord] = []
    lifecycle: str | None = None
    event_count: int = 0


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, datetimes, lists, dicts,
    and primitives.
    """
    if obj is None:
        return None
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _serialize(dataclasses.asdict(obj))
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class SearchRunLogger:
    """Writes one JSON file per search.

    Each search owns its ``SearchRunRecord``: ``start_run`` returns it and the
    caller passes it back to ``log_step`` and ``finish_run``. Overlapping
    searches therefore never share a record.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_run(self, city: CitySuggestion) -> SearchRunRecord | None:
        """Create a new run record for ``city``, or None if logging is disabled."""
        if not self._enabled:
            return None

        return SearchRunRecord(
            run_id=str(uuid.uuid4()),
            city=_serialize(city),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_step(
        self,
        record: SearchRunRecord | None,
        outcome: StepOutcome[Any],
        component: str,
    ) -> None:
        """Append a step record to ``record``.

        Args:
            record: Run record returned by ``start_run``.
            outcome: Outcome of the provider step.
            component: Provider class name.
        """
        if not self._enabled or record is None:
            return

        record.steps.append(
            StepRecord(
                step=outcome.step,
                component=component,
                ok=outcome.ok,
                output=_serialize(outcome.value),
                error=repr(outcome.error.cause) if outcome.error is not None else None,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(outcome.duration_seconds, 4),
            )
        )

    def finish_run(
        self,
        record: SearchRunRecord | None,
        result: AggregatedResult | None,
        lifecycle: SearchLifecycleState,
    ) -> Path | None:
        """Write ``record`` to a JSON file.

        Args:
            record: Run record returned by ``start_run``.
            result: Aggregated result, or None if the search failed.
            lifecycle: Final lifecycle state of the search.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled or record is None:
            return None

        record.completed_at = datetime.now(tz=UTC).isoformat()
        record.lifecycle = lifecycle.value
        record.event_count = len(result.events) if result is not None else 0

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # search_2026-02-12T14-30-00_ab12cd34.json
        ts = record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"search_{ts}_{record.run_id[:8]}.json"
        filepath = self._log_dir / filename

        filepath.write_text(record.model_dump_json(indent=2))
        self._last_log_path = filepath
        return filepath
